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
from air_flow import (
    AirFlowModelError,
    ElementKind,
    SimulationStateElement,
    SimulationStateHeader)



def test_push_and_take_values():
    header = SimulationStateHeader()
    volume = SimulationStateElement(ElementKind.SPACE_INFILTRATION_VOLUME, 0)
    temperature = SimulationStateElement(ElementKind.SPACE_INFILTRATION_TEMPERATURE, 0)

    assert header.push(volume, .5) == 0
    assert header.push(temperature, 12.) == 1
    assert len(header) == 2
    assert header.index_of(temperature) == 1
    assert header.index_of(SimulationStateElement(ElementKind.SPACE_VENTILATION_VOLUME, 0)) is None

    state = header.take_values()
    assert len(state) == 2
    assert state[0] == .5
    assert state[1] == 12.

    state[0] = 1.5
    copied = state.copy()
    copied[0] = 3.
    assert state[0] == 1.5

    series = state.to_series()
    assert list(series.index) == ['SpaceInfiltrationVolume(0)', 'SpaceInfiltrationTemperature(0)']
    assert series['SpaceInfiltrationTemperature(0)'] == 12.



def test_push_twice():
    header = SimulationStateHeader()
    header.push(SimulationStateElement(ElementKind.SPACE_DRY_BULB_TEMPERATURE, 3), 20.)
    with pt.raises(AirFlowModelError, match=r'SpaceDryBulbTemperature\(3\)'):
        header.push(SimulationStateElement(ElementKind.SPACE_DRY_BULB_TEMPERATURE, 3), 21.)



def test_element_equality():
    a = SimulationStateElement(ElementKind.SPACE_VENTILATION_VOLUME, 1)
    assert a == SimulationStateElement(ElementKind.SPACE_VENTILATION_VOLUME, 1)
    assert a != SimulationStateElement(ElementKind.SPACE_VENTILATION_VOLUME, 2)
    assert a != SimulationStateElement(ElementKind.SPACE_VENTILATION_TEMPERATURE, 1)
    assert str(a) == 'SpaceVentilationVolume(1)'
