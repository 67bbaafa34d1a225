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

import pytest as pt
from math import sqrt
from air_flow import AirFlowModelError, CurrentWeather
from air_flow.eplus import (
    design_flow_rate,
    blast_design_flow_rate,
    doe2_design_flow_rate,
    effective_leakage_area,
    flow_coefficient_flow_rate)

# Reference values are from EnergyPlus' Input/Output Reference:
#
#   "These coefficients produce a value of 1.0 at 0C deltaT and 3.35 m/s
#   (7.5 mph) windspeed, which corresponds to a typical summer condition. At a
#   winter condition of 40C deltaT and 6 m/s (13.4 mph) windspeed, these
#   coefficients would increase the infiltration rate by a factor of 2.75."
#
# and for DOE-2:
#
#   "With these coefficients, the summer conditions above would give a factor
#   of 0.75, and the winter conditions would give 1.34. A windspeed of 4.47 m/s
#   (10 mph) gives a factor of 1.0."

SUMMER = CurrentWeather(dry_bulb_temperature=2., wind_speed=3.35)



def test_blast_design_flow_rate(space):
    state = [2.]
    assert blast_design_flow_rate(SUMMER, space, state, 1.) == pt.approx(1., abs=.02)

    winter = CurrentWeather(dry_bulb_temperature=-38., wind_speed=6.)
    assert blast_design_flow_rate(winter, space, state, 1.) == pt.approx(2.75, abs=.02)



def test_doe2_design_flow_rate(space):
    state = [2.]
    assert doe2_design_flow_rate(SUMMER, space, state, 1.) == pt.approx(.75, abs=.02)

    winter = CurrentWeather(dry_bulb_temperature=42., wind_speed=6.)
    assert doe2_design_flow_rate(winter, space, state, 1.) == pt.approx(1.34, abs=.02)

    windy = CurrentWeather(dry_bulb_temperature=42., wind_speed=4.47)
    assert doe2_design_flow_rate(windy, space, state, 1.) == pt.approx(1., abs=.02)



def test_design_flow_rate_scales_with_design_rate(space):
    weather = CurrentWeather(dry_bulb_temperature=12., wind_speed=2.)
    state = [22.]
    # 1 + .1 * 10 + .5 * 2 + .25 * 4 = 4
    assert design_flow_rate(weather, space, state, 1., 1., .1, .5, .25) == pt.approx(4.)
    assert design_flow_rate(weather, space, state, .5, 1., .1, .5, .25) == pt.approx(2.)



def test_design_flow_rate_requires_data(space):
    with pt.raises(AirFlowModelError, match='wind speed'):
        design_flow_rate(CurrentWeather(dry_bulb_temperature=2.), space, [2.], 1., 1., 0., 0., 0.)

    with pt.raises(AirFlowModelError, match='dry bulb'):
        design_flow_rate(CurrentWeather(wind_speed=2.), space, [2.], 1., 1., 0., 0., 0.)

    space.dry_bulb_temperature_index = None
    with pt.raises(AirFlowModelError, match="space 'some space'"):
        design_flow_rate(SUMMER, space, [2.], 1., 1., 0., 0., 0.)



def test_effective_leakage_area(space):
    weather = CurrentWeather(dry_bulb_temperature=0., wind_speed=4.)
    state = [20.]
    cs, cw = .000145, .000172
    expected = .1 * sqrt(cs * 20. + cw * 16.)
    assert effective_leakage_area(weather, space, state, 100., cw, cs) == pt.approx(expected)

    # the direction of the temperature difference does not matter
    state = [-20.]
    assert effective_leakage_area(weather, space, state, 100., cw, cs) == pt.approx(expected)



def test_effective_leakage_area_without_wind(space):
    weather = CurrentWeather(dry_bulb_temperature=0.)
    state = [20.]
    assert effective_leakage_area(weather, space, state, 100., .000172, .000145) == \
        pt.approx(.1 * sqrt(.000145 * 20.))



def test_flow_coefficient_flow_rate(space):
    # stack only: c * cs * dT^n = 1 * .5 * 16^.5
    weather = CurrentWeather(dry_bulb_temperature=4., wind_speed=0.)
    assert flow_coefficient_flow_rate(weather, space, [20.], 1., .5, .2, .7, .5) == pt.approx(2.)

    # wind only: c * cw * (s * ws)^(2n) = 1 * .2 * (.5 * 10)^1
    weather = CurrentWeather(dry_bulb_temperature=20., wind_speed=10.)
    assert flow_coefficient_flow_rate(weather, space, [20.], 1., .5, .2, .5, .5) == pt.approx(1.)

    # both combine in quadrature
    weather = CurrentWeather(dry_bulb_temperature=4., wind_speed=10.)
    assert flow_coefficient_flow_rate(weather, space, [20.], 1., .5, .2, .5, .5) == \
        pt.approx(sqrt(5.))
