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

from .._errors import AirFlowModelError
from ..eplus import (
    outdoor_temperature,
    design_flow_rate_ventilation)



class DesignFlowRateVentilation:
    """Ventilation following EnergyPlus' ``ZoneVentilation:DesignFlowRate``.

    The flow is that of :py:func:`air_flow.eplus.design_flow_rate`, while all
    the conditions set by the limits hold, and zero otherwise. The default
    limits never switch the ventilation off, and the default coefficients
    give a constant flow of *design_rate*.

    :param float design_rate: The design flow rate (m3/s).
    :param float a: Constant term coefficient.
    :param float b: Temperature term coefficient (1/C).
    :param float c: Velocity term coefficient (s/m).
    :param float d: Velocity squared term coefficient (s2/m2).
    :param float min_indoor_temperature: Below this indoor temperature (C)
        there is no ventilation.
    :param float max_indoor_temperature: Above this indoor temperature (C)
        there is no ventilation.
    :param float delta_temperature: There is no ventilation while the indoor
        temperature minus the outdoor temperature is below this (C).
    :param float min_outdoor_temperature: Below this outdoor temperature (C)
        there is no ventilation.
    :param float max_outdoor_temperature: Above this outdoor temperature (C)
        there is no ventilation.
    :param float max_wind_speed: Above this wind speed (m/s) there is no
        ventilation.
    """

    def __init__(
            self,
            design_rate,
            a = 1.,
            b = 0.,
            c = 0.,
            d = 0.,
            min_indoor_temperature = -100.,
            max_indoor_temperature = 100.,
            delta_temperature = -100.,
            min_outdoor_temperature = -100.,
            max_outdoor_temperature = 100.,
            max_wind_speed = 40.):

        if design_rate < 0.:
            raise AirFlowModelError(f'design_rate must be non-negative, got {design_rate}')

        if min_indoor_temperature > max_indoor_temperature:
            raise AirFlowModelError(
                'min_indoor_temperature ({}) is greater than max_indoor_temperature ({})'.format(
                    min_indoor_temperature, max_indoor_temperature))

        if min_outdoor_temperature > max_outdoor_temperature:
            raise AirFlowModelError(
                'min_outdoor_temperature ({}) is greater than max_outdoor_temperature ({})'.format(
                    min_outdoor_temperature, max_outdoor_temperature))

        if max_wind_speed < 0.:
            raise AirFlowModelError(f'max_wind_speed must be non-negative, got {max_wind_speed}')

        self.design_rate = design_rate
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        self.min_indoor_temperature = min_indoor_temperature
        self.max_indoor_temperature = max_indoor_temperature
        self.delta_temperature = delta_temperature
        self.min_outdoor_temperature = min_outdoor_temperature
        self.max_outdoor_temperature = max_outdoor_temperature
        self.max_wind_speed = max_wind_speed


    def create_resolver(self, space):
        """Create the function that calculates ventilation of *space*.

        :return: A callable taking a :py:class:`air_flow.weather.CurrentWeather`
            and a :py:class:`air_flow.SimulationState`, which sets the
            ventilation volume and temperature of *space* in the state.
        """
        def resolve(current_weather, state):
            space.set_ventilation_temperature(state, outdoor_temperature(current_weather))
            space.set_ventilation_volume(
                state,
                design_flow_rate_ventilation(current_weather, space, state, self))
        return resolve


    def __repr__(self):
        return 'DesignFlowRateVentilation({}, {}, {}, {}, {})'.format(
            self.design_rate, self.a, self.b, self.c, self.d)
