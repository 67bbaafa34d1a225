# Copyright 2022 CSIRO
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Contains the implementation of :py:class:`Space`."""

from typing import Any, Optional
from ._errors import AirFlowModelError



class Space:
    """Represents a space (room or zone) in a building.

    The values that change through a simulation (temperatures and flows) are
    not held by the space, but in a :py:class:`air_flow.SimulationState`. The
    space only remembers where in the state its values live. Those locations
    are set once by whichever model registers them (e.g.
    :py:class:`air_flow.AirFlowModel` registers the infiltration and
    ventilation values).

    :ivar str name: The name of the space.
    :ivar typing.Optional[float] volume: Air volume of the space (m3).
    :ivar typing.Optional[float] floor_area: Floor area of the space (m2).
    :ivar infiltration: How air infiltrates the space (see
        :py:mod:`air_flow.infiltration`), or *None*.
    :ivar ventilation: How the space is ventilated (see
        :py:mod:`air_flow.ventilation`), or *None*.
    :ivar typing.Optional[air_flow.Building] building: The building the space
        belongs to.

    :param dict[str, Any] \\**kwargs: Items set as attributes on the instance.
    """

    def __init__(self,
            name: str,
            volume: Optional[float] = None,
            floor_area: Optional[float] = None,
            infiltration: Any = None,
            ventilation: Any = None,
            building: Any = None,
            **kwargs):
        self.name = name
        self.volume = volume
        self.floor_area = floor_area
        self.infiltration = infiltration
        self.ventilation = ventilation
        self.building = building

        # set by air_flow.SimpleModel.add_space
        self.space_index = None

        self.dry_bulb_temperature_index = None
        self.infiltration_volume_index = None
        self.infiltration_temperature_index = None
        self.ventilation_volume_index = None
        self.ventilation_temperature_index = None

        for k, v in kwargs.items(): setattr(self, k, v)


    def _set_index(self, attr, index):
        if getattr(self, attr) is not None:
            raise AirFlowModelError(
                f"{attr} of space '{self.name}' has already been set")
        setattr(self, attr, index)

    def clear_index(self, attr):
        """Forget where a value lives in the simulation state (e.g.
        ``'infiltration_volume_index'``), so that it can be registered
        again."""
        setattr(self, attr, None)

    def _get(self, attr, state):
        index = getattr(self, attr)
        return None if index is None else state[index]

    def _set(self, attr, state, value):
        index = getattr(self, attr)
        if index is None:
            raise AirFlowModelError(f"{attr} of space '{self.name}' has not been set")
        state[index] = value


    def set_dry_bulb_temperature_index(self, index):
        self._set_index('dry_bulb_temperature_index', index)

    def set_infiltration_volume_index(self, index):
        self._set_index('infiltration_volume_index', index)

    def set_infiltration_temperature_index(self, index):
        self._set_index('infiltration_temperature_index', index)

    def set_ventilation_volume_index(self, index):
        self._set_index('ventilation_volume_index', index)

    def set_ventilation_temperature_index(self, index):
        self._set_index('ventilation_temperature_index', index)


    def dry_bulb_temperature(self, state):
        """The dry bulb temperature of the air in the space, or *None* if no
        model has registered it."""
        return self._get('dry_bulb_temperature_index', state)

    def set_dry_bulb_temperature(self, state, value):
        self._set('dry_bulb_temperature_index', state, value)

    def infiltration_volume(self, state):
        return self._get('infiltration_volume_index', state)

    def set_infiltration_volume(self, state, value):
        self._set('infiltration_volume_index', state, value)

    def infiltration_temperature(self, state):
        return self._get('infiltration_temperature_index', state)

    def set_infiltration_temperature(self, state, value):
        self._set('infiltration_temperature_index', state, value)

    def ventilation_volume(self, state):
        return self._get('ventilation_volume_index', state)

    def set_ventilation_volume(self, state, value):
        self._set('ventilation_volume_index', state, value)

    def ventilation_temperature(self, state):
        return self._get('ventilation_temperature_index', state)

    def set_ventilation_temperature(self, state, value):
        self._set('ventilation_temperature_index', state, value)


    def __repr__(self):
        return 'Space({}, {}, {})'.format(self.name, self.volume, self.infiltration)
