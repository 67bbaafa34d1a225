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
from air_flow import AirFlowModelError, CurrentWeather, Space
from air_flow.eplus import design_flow_rate_ventilation
from air_flow.ventilation import (
    DesignFlowRateVentilation,
    create_ventilation_resolver)

MILD = CurrentWeather(dry_bulb_temperature=15., wind_speed=2.)



def test_default_ventilation_is_constant(space):
    ventilation = DesignFlowRateVentilation(2.)
    assert design_flow_rate_ventilation(MILD, space, [20.], ventilation) == pt.approx(2.)
    cold = CurrentWeather(dry_bulb_temperature=-30., wind_speed=12.)
    assert design_flow_rate_ventilation(cold, space, [20.], ventilation) == pt.approx(2.)



def test_ventilation_uses_design_flow_rate_equation(space):
    ventilation = DesignFlowRateVentilation(1., a=.5, b=.1, c=.25, d=0.)
    # .5 + .1 * 5 + .25 * 2
    assert design_flow_rate_ventilation(MILD, space, [20.], ventilation) == pt.approx(1.5)



@pt.mark.parametrize('limits', [
    {'min_indoor_temperature': 22.},
    {'max_indoor_temperature': 18.},
    {'delta_temperature': 6.},
    {'min_outdoor_temperature': 16.},
    {'max_outdoor_temperature': 14.},
    {'max_wind_speed': 1.5}])
def test_ventilation_limits(space, limits):
    # indoor 20C, outdoor 15C, wind 2 m/s
    ventilation = DesignFlowRateVentilation(2., **limits)
    assert design_flow_rate_ventilation(MILD, space, [20.], ventilation) == 0.



def test_ventilation_within_limits(space):
    ventilation = DesignFlowRateVentilation(
        2.,
        min_indoor_temperature = 18.,
        max_indoor_temperature = 26.,
        delta_temperature = 5.,
        min_outdoor_temperature = 10.,
        max_outdoor_temperature = 15.,
        max_wind_speed = 2.)
    assert design_flow_rate_ventilation(MILD, space, [20.], ventilation) == pt.approx(2.)



def test_ventilation_validation():
    with pt.raises(AirFlowModelError, match='design_rate'):
        DesignFlowRateVentilation(-1.)
    with pt.raises(AirFlowModelError, match='min_indoor_temperature'):
        DesignFlowRateVentilation(1., min_indoor_temperature=25., max_indoor_temperature=20.)
    with pt.raises(AirFlowModelError, match='min_outdoor_temperature'):
        DesignFlowRateVentilation(1., min_outdoor_temperature=25., max_outdoor_temperature=20.)
    with pt.raises(AirFlowModelError, match='max_wind_speed'):
        DesignFlowRateVentilation(1., max_wind_speed=-1.)



def test_ventilation_resolver(space):
    space.ventilation = DesignFlowRateVentilation(.5, delta_temperature=0.)
    with pt.raises(AirFlowModelError, match='has not been registered'):
        create_ventilation_resolver(space)

    space.set_ventilation_volume_index(3)
    space.set_ventilation_temperature_index(4)
    resolver = create_ventilation_resolver(space)

    state = [20., 0., 0., 0., 0.]
    resolver(MILD, state)
    assert state[3] == pt.approx(.5)
    assert state[4] == 15.

    # outside warmer than inside
    resolver(CurrentWeather(dry_bulb_temperature=25., wind_speed=2.), state)
    assert state[3] == 0.
    assert state[4] == 25.



def test_create_ventilation_resolver_errors():
    with pt.raises(AirFlowModelError, match='has no ventilation'):
        create_ventilation_resolver(Space('s'))
    with pt.raises(AirFlowModelError, match='not supported'):
        create_ventilation_resolver(Space('s', ventilation=1.))
