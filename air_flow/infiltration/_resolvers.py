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

"""Functions that create resolvers: closures which, given the current weather
and the simulation state, set the infiltration volume and temperature of a
space."""

from .._errors import AirFlowModelError
from ..eplus import (
    outdoor_temperature,
    design_flow_rate,
    effective_leakage_area,
    flow_coefficient_flow_rate)
from ._coefficients import (
    resolve_stack_coefficient,
    resolve_wind_coefficient)



def _resolver(space, volume):
    # infiltrated air comes in at the outdoor temperature
    def resolve(current_weather, state):
        space.set_infiltration_temperature(state, outdoor_temperature(current_weather))
        space.set_infiltration_volume(state, volume(current_weather, state))
    return resolve



def constant_resolver(space, v):
    return _resolver(space, lambda current_weather, state: v)


def design_flow_rate_resolver(space, design_rate, a, b, c, d):
    return _resolver(
        space,
        lambda current_weather, state: design_flow_rate(
            current_weather, space, state, design_rate, a, b, c, d))


def effective_air_leakage_resolver(space, area):
    if space.building is None:
        raise AirFlowModelError(
            f"space '{space.name}' has been assigned an effective air leakage area "
            "infiltration but no building... Assign a building to it")

    cs = resolve_stack_coefficient(space, space.building)
    cw = resolve_wind_coefficient(space, space.building)

    return _resolver(
        space,
        lambda current_weather, state: effective_leakage_area(
            current_weather, space, state, area, cw, cs))


def flow_coefficient_resolver(space, c, cs, cw, s, n):
    return _resolver(
        space,
        lambda current_weather, state: flow_coefficient_flow_rate(
            current_weather, space, state, c, cs, cw, s, n))
