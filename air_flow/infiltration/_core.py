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

import logging
from .._errors import AirFlowModelError
from ._base import Infiltration

logger = logging.getLogger(__name__)



def create_infiltration_resolver(space):
    """Factory method for creating the infiltration resolver of a space.

    :param air_flow.Space space: The space. Its ``infiltration`` attribute
        must be an instance of
        :py:class:`air_flow.infiltration.Infiltration`.

    :return: A callable taking a :py:class:`air_flow.weather.CurrentWeather`
        and a :py:class:`air_flow.SimulationState`.

    :raises air_flow.AirFlowModelError: If *space* has no infiltration or its
        infiltration cannot be resolved.
    """
    infiltration = space.infiltration

    if infiltration is None:
        raise AirFlowModelError(f"space '{space.name}' has no infiltration")

    if not isinstance(infiltration, Infiltration):
        raise AirFlowModelError(
            f"infiltration of space '{space.name}' is not an Infiltration: {infiltration!r}")

    if space.infiltration_volume_index is None or space.infiltration_temperature_index is None:
        raise AirFlowModelError(
            f"infiltration of space '{space.name}' has not been registered in the simulation state")

    logger.debug("creating resolver for %r in space '%s'", infiltration, space.name)
    return infiltration.create_resolver(space)
