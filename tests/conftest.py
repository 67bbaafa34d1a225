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

import pytest
from air_flow import (
    Building,
    ShelterClass,
    Space,
    SimpleModel,
    Date)


@pytest.fixture
def date():
    return Date(1, 1, 1.)


@pytest.fixture
def space():
    # the dry bulb temperature of the space is the first (and only) element
    # of a state such as [2.]
    space = Space('some space', volume=300., floor_area=100.)
    space.set_dry_bulb_temperature_index(0)
    space.set_infiltration_volume_index(1)
    space.set_infiltration_temperature_index(2)
    return space


@pytest.fixture
def building():
    return Building(
        'some building',
        n_storeys=1,
        shelter_class=ShelterClass.URBAN)


@pytest.fixture
def model(building):
    model = SimpleModel()
    model.add_space(Space('office', volume=150., building=building))
    model.add_space(Space('corridor', volume=50., building=building))
    return model
