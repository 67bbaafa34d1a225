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

from abc import ABC, abstractmethod



class Infiltration(ABC):
    @abstractmethod
    def create_resolver(self, space):
        """Create the function that calculates infiltration into *space*.

        Anything that can be worked out before the simulation starts (e.g.
        coefficients that depend on the building) is worked out here, so
        problems with the model are reported before the simulation runs.

        :param air_flow.Space space: The space air infiltrates.

        :return: A callable taking a :py:class:`air_flow.weather.CurrentWeather`
            and a :py:class:`air_flow.SimulationState`, which sets the
            infiltration volume and temperature of *space* in the state.

        :raises air_flow.AirFlowModelError: If the model does not have the
            data required.
        """
        pass
