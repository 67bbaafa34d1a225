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
from ._ventilation import DesignFlowRateVentilation

logger = logging.getLogger(__name__)



def create_ventilation_resolver(space):
    """Factory method for creating the ventilation resolver of a space.

    :param air_flow.Space space: The space. Its ``ventilation`` attribute must
        be an instance of
        :py:class:`air_flow.ventilation.DesignFlowRateVentilation`.

    :raises air_flow.AirFlowModelError: If *space* has no ventilation, or its
        ventilation has not been registered in the simulation state.
    """
    ventilation = space.ventilation

    if ventilation is None:
        raise AirFlowModelError(f"space '{space.name}' has no ventilation")

    if not isinstance(ventilation, DesignFlowRateVentilation):
        raise AirFlowModelError(
            f"ventilation of space '{space.name}' is not supported: {ventilation!r}")

    if space.ventilation_volume_index is None or space.ventilation_temperature_index is None:
        raise AirFlowModelError(
            f"ventilation of space '{space.name}' has not been registered in the simulation state")

    logger.debug("creating resolver for %r in space '%s'", ventilation, space.name)
    return ventilation.create_resolver(space)
