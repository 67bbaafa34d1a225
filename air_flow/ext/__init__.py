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

"""Some components for running air flow models.

This subpackage provides utilities for running a model over a sequence of
time steps and plotting the results. They are convenient for analyses and
examples, but a full building simulation would normally drive
:py:class:`air_flow.AirFlowModel` itself, alongside its other models.
"""
