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

"""Contains the implementation of the simulation state: the flat array of
values every model in a simulation reads from and writes to, and the header
describing what each value means."""

from enum import Enum
import numpy as np
import pandas as pd
from ._errors import AirFlowModelError



class ElementKind(Enum):
    SPACE_DRY_BULB_TEMPERATURE = 'SpaceDryBulbTemperature'
    SPACE_INFILTRATION_VOLUME = 'SpaceInfiltrationVolume'
    SPACE_INFILTRATION_TEMPERATURE = 'SpaceInfiltrationTemperature'
    SPACE_VENTILATION_VOLUME = 'SpaceVentilationVolume'
    SPACE_VENTILATION_TEMPERATURE = 'SpaceVentilationTemperature'



class SimulationStateElement:
    """A value in the simulation state.

    :ivar ElementKind kind: What the value represents.
    :ivar int space_index: The index (in the model) of the space the value
        belongs to.
    """

    def __init__(self, kind, space_index):
        self.kind = kind
        self.space_index = space_index

    def __eq__(self, other):
        if not isinstance(other, SimulationStateElement):
            return NotImplemented
        return self.kind is other.kind and self.space_index == other.space_index

    def __hash__(self):
        return hash((self.kind, self.space_index))

    def __str__(self):
        return '{}({})'.format(self.kind.value, self.space_index)

    def __repr__(self):
        return 'SimulationStateElement({}, {})'.format(self.kind, self.space_index)



class SimulationStateHeader:
    """Describes the contents of a :py:class:`SimulationState`.

    Models push the elements they need while they are being constructed, then
    :py:meth:`take_values` creates the state the simulation runs on.
    """

    def __init__(self):
        self.elements = []
        self._initial_values = []
        self._indexes = {}


    def push(self, element, initial_value):
        """Add *element* to the state.

        :param SimulationStateElement element: The element to add.
        :param float initial_value: The value the element starts with.

        :return: The index of the element in the state.
        :rtype: int

        :raises air_flow.AirFlowModelError: If *element* has already been
            added.
        """
        if element in self._indexes:
            raise AirFlowModelError(f'{element} has already been added to the simulation state')
        index = len(self.elements)
        self.elements.append(element)
        self._initial_values.append(float(initial_value))
        self._indexes[element] = index
        return index


    def index_of(self, element):
        """The index of *element*, or *None* if it has not been added."""
        return self._indexes.get(element)


    @property
    def names(self):
        """The names of the elements, in order."""
        return [str(e) for e in self.elements]


    def take_values(self):
        """Create a state holding the initial values of the elements.

        :rtype: SimulationState
        """
        return SimulationState(self, np.array(self._initial_values, dtype='float'))


    def __len__(self):
        return len(self.elements)



class SimulationState:
    """The values of the elements described by a :py:class:`SimulationStateHeader`."""

    def __init__(self, header, values):
        assert len(header) == len(values)
        self.header = header
        self.values = values

    def __getitem__(self, index):
        return float(self.values[index])

    def __setitem__(self, index, value):
        self.values[index] = value

    def __len__(self):
        return len(self.values)

    def copy(self):
        return SimulationState(self.header, np.copy(self.values))

    def to_series(self):
        """The state as a :py:class:`pandas.Series` labelled by element name."""
        return pd.Series(self.values, index=self.header.names, dtype='float')
