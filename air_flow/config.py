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

"""Configuration."""

import os

#: The volume (m3/s) infiltration and ventilation flows hold in the simulation
#: state before the first call to :py:meth:`air_flow.AirFlowModel.march`.
INITIAL_FLOW_VOLUME = 0.

#: The temperature (C) infiltration and ventilation flows hold in the
#: simulation state before the first call to
#: :py:meth:`air_flow.AirFlowModel.march`.
INITIAL_FLOW_TEMPERATURE = 0.

#: The effective leakage area model is appropriate for buildings up to about
#: this many storeys. Taller buildings get the coefficients of the tallest
#: tabulated building, and a warning is logged.
MAX_EFFECTIVE_LEAKAGE_AREA_STOREYS = 3

#: The number of hours in a (non leap) year.
HOURS_IN_YEAR = 8760.

#: The length of a time step (in hours) used by
#: :py:func:`air_flow.ext.simulation.run_simulation`.
#:
#: This can be set via the environment variable *AIR_FLOW_TIMESTEP_HOURS*.
DEFAULT_TIMESTEP_HOURS = float(os.environ.get('AIR_FLOW_TIMESTEP_HOURS', 1.))

#: The dry bulb temperature (C) assumed for spaces whose temperature is not
#: given to :py:func:`air_flow.ext.simulation.run_simulation`.
#:
#: This can be set via the environment variable *AIR_FLOW_SPACE_TEMPERATURE*.
DEFAULT_SPACE_TEMPERATURE = float(os.environ.get('AIR_FLOW_SPACE_TEMPERATURE', 20.))
