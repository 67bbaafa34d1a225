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

"""The kinds of infiltration a space can have."""

from .._errors import AirFlowModelError
from ..eplus import BLAST_COEFFICIENTS, DOE2_COEFFICIENTS
from ._base import Infiltration
from ._resolvers import (
    constant_resolver,
    design_flow_rate_resolver,
    effective_air_leakage_resolver,
    flow_coefficient_resolver)



def _check_non_negative(name, value):
    if value < 0.:
        raise AirFlowModelError(f'{name} must be non-negative, got {value}')



class ConstantInfiltration(Infiltration):
    """A constant infiltration flow.

    :param float flow: The flow (m3/s).
    """

    def __init__(self, flow):
        _check_non_negative('flow', flow)
        self.flow = flow

    def create_resolver(self, space):
        return constant_resolver(space, self.flow)

    def __repr__(self):
        return 'ConstantInfiltration({})'.format(self.flow)



class DesignFlowRateInfiltration(Infiltration):
    """Infiltration following EnergyPlus' ``ZoneInfiltration:DesignFlowRate``.

    See :py:func:`air_flow.eplus.design_flow_rate` for the meaning of the
    parameters.

    :param float design_rate: The design flow rate (m3/s).
    """

    def __init__(self, design_rate, a, b, c, d):
        _check_non_negative('design_rate', design_rate)
        self.design_rate = design_rate
        self.a = a
        self.b = b
        self.c = c
        self.d = d

    @property
    def coefficients(self):
        return self.a, self.b, self.c, self.d

    def create_resolver(self, space):
        return design_flow_rate_resolver(space, self.design_rate, *self.coefficients)

    def __repr__(self):
        return '{}({}, {}, {}, {}, {})'.format(
            type(self).__name__, self.design_rate, *self.coefficients)



class BlastInfiltration(DesignFlowRateInfiltration):
    """Design flow rate infiltration with the BLAST default coefficients."""

    def __init__(self, design_rate):
        super().__init__(design_rate, *BLAST_COEFFICIENTS)



class Doe2Infiltration(DesignFlowRateInfiltration):
    """Design flow rate infiltration with the DOE-2 default coefficients."""

    def __init__(self, design_rate):
        super().__init__(design_rate, *DOE2_COEFFICIENTS)



class EffectiveAirLeakageAreaInfiltration(Infiltration):
    """Infiltration following EnergyPlus' ``ZoneInfiltration:EffectiveLeakageArea``.

    The stack and wind coefficients are taken from the building the space
    belongs to (see :py:func:`air_flow.infiltration.resolve_stack_coefficient`
    and :py:func:`air_flow.infiltration.resolve_wind_coefficient`).

    :param float area: The effective air leakage area (cm2).
    """

    def __init__(self, area):
        _check_non_negative('area', area)
        self.area = area

    def create_resolver(self, space):
        return effective_air_leakage_resolver(space, self.area)

    def __repr__(self):
        return 'EffectiveAirLeakageAreaInfiltration({})'.format(self.area)



class FlowCoefficientInfiltration(Infiltration):
    """Infiltration following EnergyPlus' ``ZoneInfiltration:FlowCoefficient``.

    See :py:func:`air_flow.eplus.flow_coefficient_flow_rate` for the meaning
    of the parameters.
    """

    def __init__(
            self,
            flow_coefficient,
            stack_coefficient,
            wind_coefficient,
            shelter_factor,
            pressure_exponent = 0.67):
        _check_non_negative('flow_coefficient', flow_coefficient)
        if not 0. < pressure_exponent <= 1.:
            raise AirFlowModelError(f'pressure_exponent must be in (0, 1], got {pressure_exponent}')
        if not 0. <= shelter_factor <= 1.:
            raise AirFlowModelError(f'shelter_factor must be in [0, 1], got {shelter_factor}')
        self.flow_coefficient = flow_coefficient
        self.stack_coefficient = stack_coefficient
        self.wind_coefficient = wind_coefficient
        self.shelter_factor = shelter_factor
        self.pressure_exponent = pressure_exponent

    def create_resolver(self, space):
        return flow_coefficient_resolver(
            space,
            self.flow_coefficient,
            self.stack_coefficient,
            self.wind_coefficient,
            self.shelter_factor,
            self.pressure_exponent)

    def __repr__(self):
        return 'FlowCoefficientInfiltration({}, {}, {}, {}, {})'.format(
            self.flow_coefficient,
            self.stack_coefficient,
            self.wind_coefficient,
            self.shelter_factor,
            self.pressure_exponent)



def design_rate_from_air_changes(space, air_changes_per_hour):
    """The design flow rate (m3/s) that gives *air_changes_per_hour* in *space*.

    :raises air_flow.AirFlowModelError: If the volume of *space* is not known.
    """
    if space.volume is None:
        raise AirFlowModelError(f"space '{space.name}' does not have a volume")
    return air_changes_per_hour * space.volume / 3600.


def design_rate_from_floor_area(space, flow_per_area):
    """The design flow rate (m3/s) of *flow_per_area* (m3/s per m2 of floor)
    in *space*.

    :raises air_flow.AirFlowModelError: If the floor area of *space* is not
        known.
    """
    if space.floor_area is None:
        raise AirFlowModelError(f"space '{space.name}' does not have a floor area")
    return flow_per_area * space.floor_area
