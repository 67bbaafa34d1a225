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

"""Air flow equations from the EnergyPlus Engineering and Input/Output
References.

Every function takes the current weather, the space the flow enters and the
simulation state (from which the temperature of the space is read), and
returns a volumetric flow in m3/s.
"""

from math import sqrt
from ._errors import AirFlowModelError

#: Coefficients (A, B, C, D) of the design flow rate equation that BLAST used.
BLAST_COEFFICIENTS = (0.606, 0.03636, 0.1177, 0.)

#: Coefficients (A, B, C, D) of the design flow rate equation that DOE-2 used.
DOE2_COEFFICIENTS = (0., 0., 0.224, 0.)



def outdoor_temperature(weather):
    if weather.dry_bulb_temperature is None:
        raise AirFlowModelError('weather does not have a dry bulb temperature')
    return weather.dry_bulb_temperature


def space_temperature(space, state):
    t = space.dry_bulb_temperature(state)
    if t is None:
        raise AirFlowModelError(f"space '{space.name}' does not have a dry bulb temperature")
    return t


def wind_speed(weather, required=True):
    if weather.wind_speed is None:
        if required:
            raise AirFlowModelError('weather does not have a wind speed')
        return 0.
    return weather.wind_speed



def design_flow_rate(weather, space, state, design_rate, a, b, c, d):
    """Infiltration as estimated by EnergyPlus' ``ZoneInfiltration:DesignFlowRate``.

    .. math::

        \\phi = \\phi_{design} (A + B|T_{space} - T_{outside}| + C W_{speed} + D W^2_{speed})

    :param float design_rate: The design flow rate (m3/s).
    :param float a: Constant term coefficient.
    :param float b: Temperature term coefficient (1/C).
    :param float c: Velocity term coefficient (s/m).
    :param float d: Velocity squared term coefficient (s2/m2).
    """
    t_space = space_temperature(space, state)
    t_out = outdoor_temperature(weather)
    ws = wind_speed(weather)

    return design_rate * (a + b * abs(t_space - t_out) + c * ws + d * ws * ws)


def blast_design_flow_rate(weather, space, state, design_rate):
    """The design flow rate using the BLAST defaults (reported in EnergyPlus'
    Input/Output reference).

    These give a factor of 1.0 at 0C temperature difference and 3.35 m/s wind
    speed (a typical summer condition) and 2.75 at 40C and 6 m/s.
    """
    return design_flow_rate(weather, space, state, design_rate, *BLAST_COEFFICIENTS)


def doe2_design_flow_rate(weather, space, state, design_rate):
    """The design flow rate using the DOE-2 defaults (reported in EnergyPlus'
    Input/Output reference).

    These give a factor of 1.0 at a wind speed of 4.47 m/s.
    """
    return design_flow_rate(weather, space, state, design_rate, *DOE2_COEFFICIENTS)


def effective_leakage_area(weather, space, state, area, cw, cs):
    """Infiltration as estimated by EnergyPlus'
    ``ZoneInfiltration:EffectiveLeakageArea`` (Sherman and Grimsrud).

    .. math::

        \\phi = \\frac{A_L}{1000} \\sqrt{C_s |\\Delta T| + C_w W^2_{speed}}

    A missing wind speed is taken to be zero.

    :param float area: Effective air leakage area (cm2).
    :param float cw: Wind coefficient.
    :param float cs: Stack coefficient.
    """
    delta_t = abs(outdoor_temperature(weather) - space_temperature(space, state))
    ws = wind_speed(weather, required=False)

    return (area / 1000.) * sqrt(cs * delta_t + cw * ws * ws)


def flow_coefficient_flow_rate(weather, space, state, c, cs, cw, s, n):
    """Infiltration as estimated by EnergyPlus' ``ZoneInfiltration:FlowCoefficient``
    (the AIM-2 model of Walker and Wilson).

    .. math::

        \\phi = \\sqrt{(c C_s |\\Delta T|^n)^2 + (c C_w (s W_{speed})^{2n})^2}

    :param float c: Flow coefficient (m3/(s Pa^n)).
    :param float cs: Stack coefficient ((Pa/K)^n).
    :param float cw: Wind coefficient ((Pa s2/m2)^n).
    :param float s: Shelter factor.
    :param float n: Pressure exponent.
    """
    delta_t = abs(outdoor_temperature(weather) - space_temperature(space, state))
    ws = wind_speed(weather)

    stack = c * cs * delta_t ** n
    wind = c * cw * (s * ws) ** (2. * n)
    return sqrt(stack * stack + wind * wind)


def design_flow_rate_ventilation(weather, space, state, ventilation):
    """Ventilation as estimated by EnergyPlus' ``ZoneVentilation:DesignFlowRate``.

    The flow follows :py:func:`design_flow_rate`, but is zero whenever the
    indoor or outdoor temperature, their difference, or the wind speed are
    outside the limits set on *ventilation*.

    :param air_flow.ventilation.DesignFlowRateVentilation ventilation: The
        ventilation to estimate the flow of.
    """
    t_space = space_temperature(space, state)
    t_out = outdoor_temperature(weather)
    ws = wind_speed(weather)

    if not ventilation.min_indoor_temperature <= t_space <= ventilation.max_indoor_temperature:
        return 0.
    if t_space - t_out < ventilation.delta_temperature:
        return 0.
    if not ventilation.min_outdoor_temperature <= t_out <= ventilation.max_outdoor_temperature:
        return 0.
    if ws > ventilation.max_wind_speed:
        return 0.

    return design_flow_rate(
        weather,
        space,
        state,
        ventilation.design_rate,
        ventilation.a,
        ventilation.b,
        ventilation.c,
        ventilation.d)
