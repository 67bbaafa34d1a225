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

"""Infiltration and ventilation of building spaces, following the EnergyPlus
Engineering Reference."""

import os
import re

from ._errors import AirFlowModelError
from ._building import Building, ShelterClass
from ._space import Space
from ._simple_model import SimpleModel
from ._state import (
    ElementKind,
    SimulationStateElement,
    SimulationStateHeader,
    SimulationState)
from ._air_flow_model import AirFlowModel
from .calendar import Date
from .weather import (
    CurrentWeather,
    Weather,
    ScheduleConstant,
    SyntheticWeather,
    SeriesWeather)
from .infiltration import (
    ConstantInfiltration,
    DesignFlowRateInfiltration,
    BlastInfiltration,
    Doe2Infiltration,
    EffectiveAirLeakageAreaInfiltration,
    FlowCoefficientInfiltration)
from .ventilation import DesignFlowRateVentilation

with open(os.path.join(os.path.dirname(__file__), 'version'), 'r') as vf:
    __version__ = vf.read().strip()

_v_regex = r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"

_version_info_match = re.match(_v_regex, __version__)

__version_info__ = tuple(int(_version_info_match.group(i)) for i in ('major',
    'minor', 'patch'))
