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

"""Contains the implementation of :py:class:`Building`."""

from enum import Enum
from typing import Optional



class ShelterClass(Enum):
    """How sheltered from the wind a building is.

    These are the shelter classes used for the wind coefficients of the
    effective leakage area infiltration model (classes 1 to 5 in the
    EnergyPlus Input/Output Reference).
    """

    #: No obstructions or local shielding.
    NO_OBSTRUCTIONS = 1

    #: Typical shelter for an isolated rural house.
    ISOLATED_RURAL = 2

    #: Typical shelter caused by other buildings across the street.
    URBAN = 3

    #: Typical shelter for urban buildings on larger lots.
    LARGE_LOT_URBAN = 4

    #: Typical shelter produced by buildings immediately adjacent.
    SMALL_LOT_URBAN = 5



class Building:
    """A building that contains one or more spaces.

    The effective leakage area infiltration model needs a stack and a wind
    coefficient. These can be given directly or, failing that, are looked up
    from *n_storeys* and *shelter_class*.

    :ivar str name: The name of the building.
    :ivar typing.Optional[int] n_storeys: The number of storeys.
    :ivar typing.Optional[ShelterClass] shelter_class: The shelter class.
    :ivar typing.Optional[float] stack_coefficient: Stack coefficient
        ((L/s)^2/(cm^4 K)).
    :ivar typing.Optional[float] wind_coefficient: Wind coefficient
        ((L/s)^2/(cm^4 (m/s)^2)).

    :param dict[str, Any] \\**kwargs: Items set as attributes on the instance.
    """

    def __init__(self,
            name: str,
            n_storeys: Optional[int] = None,
            shelter_class: Optional[ShelterClass] = None,
            stack_coefficient: Optional[float] = None,
            wind_coefficient: Optional[float] = None,
            **kwargs):
        self.name = name
        self.n_storeys = n_storeys
        self.shelter_class = shelter_class
        self.stack_coefficient = stack_coefficient
        self.wind_coefficient = wind_coefficient

        # set by air_flow.SimpleModel.add_building
        self.building_index = None

        for k, v in kwargs.items(): setattr(self, k, v)


    def __repr__(self):
        return 'Building({}, {}, {})'.format(self.name, self.n_storeys, self.shelter_class)
