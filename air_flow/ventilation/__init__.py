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

"""Representations of (intentional) ventilation.

Ventilation is assigned to a space by setting
:py:attr:`air_flow.Space.ventilation`. The functions that calculate the flows
are created by calling the (factory) function
:py:func:`create_ventilation_resolver`.
"""

from ._core import create_ventilation_resolver
from ._ventilation import DesignFlowRateVentilation
