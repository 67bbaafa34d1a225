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

"""Contains the implementation of :py:class:`AirFlowModel`."""

import logging
from .config import (
    INITIAL_FLOW_VOLUME,
    INITIAL_FLOW_TEMPERATURE)
from ._errors import AirFlowModelError, MODULE_NAME
from ._state import ElementKind, SimulationStateElement
from .eplus import outdoor_temperature
from .infiltration import create_infiltration_resolver
from .ventilation import create_ventilation_resolver

logger = logging.getLogger(__name__)

_INFILTRATION_ELEMENTS = (
    (ElementKind.SPACE_INFILTRATION_VOLUME, 'infiltration_volume_index', INITIAL_FLOW_VOLUME),
    (ElementKind.SPACE_INFILTRATION_TEMPERATURE, 'infiltration_temperature_index', INITIAL_FLOW_TEMPERATURE))

_VENTILATION_ELEMENTS = (
    (ElementKind.SPACE_VENTILATION_VOLUME, 'ventilation_volume_index', INITIAL_FLOW_VOLUME),
    (ElementKind.SPACE_VENTILATION_TEMPERATURE, 'ventilation_temperature_index', INITIAL_FLOW_TEMPERATURE))



class AirFlowModel:
    """Calculates the infiltration and ventilation of the spaces in a model.

    On construction, the infiltration volume and temperature of every space
    (and the ventilation volume and temperature of every space that has
    ventilation) are added to *state_header*, and the resolvers that will
    calculate them are created. This is where incomplete models are
    reported.

    :ivar list infiltration_resolvers: The infiltration resolvers, one per
        space that has infiltration.
    :ivar list ventilation_resolvers: The ventilation resolvers, one per space
        that has ventilation.

    :param air_flow.SimpleModel model: The model to calculate air flows for.
    :param air_flow.SimulationStateHeader state_header: The header to register
        the air flow values in.

    :raises air_flow.AirFlowModelError: If the model lacks the data required
        by the infiltration or ventilation of one of its spaces. The spaces
        are then left as they were, so once the model is corrected it can be
        registered in a new header.
    """

    #: The name this model is reported under.
    module_name = MODULE_NAME

    def __init__(self, model, state_header):
        # (space, index attribute) pairs set here, forgotten again on failure
        # so the (corrected) model can be registered in a new header
        registered = []
        try:
            for i, space in enumerate(model.spaces):
                elements = _INFILTRATION_ELEMENTS
                if space.ventilation is not None:
                    elements = elements + _VENTILATION_ELEMENTS
                for kind, attr, initial_value in elements:
                    index = state_header.push(SimulationStateElement(kind, i), initial_value)
                    getattr(space, 'set_' + attr)(index)
                    registered.append((space, attr))

            self.infiltration_resolvers = [create_infiltration_resolver(space) \
                for space in model.spaces if space.infiltration is not None]

            self.ventilation_resolvers = [create_ventilation_resolver(space) \
                for space in model.spaces if space.ventilation is not None]
        except AirFlowModelError:
            for space, attr in registered:
                space.clear_index(attr)
            raise

        logger.debug(
            '%s created for %d spaces (%d infiltration and %d ventilation resolvers)',
            self.module_name,
            len(model.spaces),
            len(self.infiltration_resolvers),
            len(self.ventilation_resolvers))


    def march(self, date, weather, model, state):
        """Advance one time step.

        Every space gets infiltration at the outdoor temperature (spaces with
        no infiltration keep a zero volume), then each resolver sets the
        flows of its space.

        :param air_flow.calendar.Date date: The date of the time step.
        :param air_flow.weather.Weather weather: The weather.
        :param air_flow.SimpleModel model: The model passed to the
            constructor.
        :param air_flow.SimulationState state: The state to update.

        :raises air_flow.AirFlowModelError: If the weather or the state lack
            the data the resolvers need.
        """
        current_weather = weather.get_weather_data(date)
        infiltration_temperature = outdoor_temperature(current_weather)

        for space in model.spaces:
            space.set_infiltration_temperature(state, infiltration_temperature)

        for resolver in self.infiltration_resolvers:
            resolver(current_weather, state)

        for resolver in self.ventilation_resolvers:
            resolver(current_weather, state)
