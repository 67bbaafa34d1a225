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

"""Stack and wind coefficients for the effective leakage area model.

You can find the coefficients in the file *leakagecoefficients.json*. They are
those tabulated in the EnergyPlus Input/Output Reference (from the ASHRAE
Handbook of Fundamentals), indexed by the number of storeys of the building
(1, 2 and 3) and, for the wind coefficient, the shelter class.
"""

import json
import logging
import pkgutil
from .._errors import AirFlowModelError
from ..config import MAX_EFFECTIVE_LEAKAGE_AREA_STOREYS

logger = logging.getLogger(__name__)

LEAKAGE_COEFFICIENTS = json.loads(pkgutil.get_data(__name__, 'leakagecoefficients.json'))
STACK_COEFFICIENTS = LEAKAGE_COEFFICIENTS['stack']
WIND_COEFFICIENTS = LEAKAGE_COEFFICIENTS['wind']



def _whole_storeys(building):
    n_storeys = building.n_storeys
    try:
        whole = int(n_storeys)
    except (TypeError, ValueError, OverflowError):
        raise AirFlowModelError(
            f"building '{building.name}' has {n_storeys!r} storeys... n_storeys must "
            "be a whole number") from None
    if whole != n_storeys:
        raise AirFlowModelError(
            f"building '{building.name}' has {n_storeys!r} storeys... n_storeys must "
            "be a whole number")
    if whole < 1:
        raise AirFlowModelError(f"building '{building.name}' has {whole} storeys")
    return whole



def resolve_stack_coefficient(space, building):
    """The stack coefficient of *building*.

    This is ``building.stack_coefficient`` if that is set, otherwise it is
    looked up from ``building.n_storeys``.

    :param air_flow.Space space: The space the coefficient is required for
        (used in messages only).
    :param air_flow.Building building: The building *space* belongs to.

    :rtype: float

    :raises air_flow.AirFlowModelError: If the building has neither a stack
        coefficient nor a number of storeys, or its number of storeys is
        not a whole number of at least one.
    """
    if building.stack_coefficient is not None:
        return building.stack_coefficient

    n_storeys = building.n_storeys
    if n_storeys is None:
        raise AirFlowModelError(
            f"space '{space.name}' has been assigned an effective air leakage area "
            "infiltration but its associated building has not enough data... Please "
            "assign values to the building's stack_coefficient or n_storeys fields")

    n_storeys = _whole_storeys(building)

    if n_storeys > MAX_EFFECTIVE_LEAKAGE_AREA_STOREYS:
        logger.warning(
            "the effective air leakage area infiltration (used in space '%s') is "
            "appropriate for buildings up to about %d storeys... building '%s' is %d storeys",
            space.name, MAX_EFFECTIVE_LEAKAGE_AREA_STOREYS, building.name, n_storeys)

    return STACK_COEFFICIENTS[min(n_storeys, len(STACK_COEFFICIENTS)) - 1]


def resolve_wind_coefficient(space, building):
    """The wind coefficient of *building*.

    This is ``building.wind_coefficient`` if that is set, otherwise it is
    looked up from ``building.shelter_class`` and ``building.n_storeys``.
    Buildings of three or more storeys share the same coefficients.

    :param air_flow.Space space: The space the coefficient is required for
        (used in messages only).
    :param air_flow.Building building: The building *space* belongs to.

    :rtype: float

    :raises air_flow.AirFlowModelError: If the building has no wind
        coefficient and is missing its number of storeys or shelter class,
        or its number of storeys is not a whole number of at least one.
    """
    if building.wind_coefficient is not None:
        return building.wind_coefficient

    n_storeys = building.n_storeys
    if n_storeys is None:
        raise AirFlowModelError(
            f"building '{building.name}', associated with space '{space.name}', has not "
            "been assigned an n_storeys field... Cannot resolve the wind coefficient for "
            "effective air leakage area infiltration")

    if building.shelter_class is None:
        raise AirFlowModelError(
            f"space '{space.name}' has been assigned an effective air leakage area "
            "infiltration but its associated building has not enough data... Please "
            "assign values to the building's wind_coefficient or shelter_class and "
            "n_storeys fields")

    n_storeys = _whole_storeys(building)

    by_storeys = WIND_COEFFICIENTS[building.shelter_class.name]
    return by_storeys[min(n_storeys, len(by_storeys)) - 1]
