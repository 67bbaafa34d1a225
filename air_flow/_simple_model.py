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

"""Contains the implementation of :py:class:`SimpleModel`."""

from ._errors import AirFlowModelError



class SimpleModel:
    """The description of the buildings and spaces being simulated.

    :ivar list[air_flow.Space] spaces: The spaces, in the order they were
        added.
    :ivar list[air_flow.Building] buildings: The buildings, in the order they
        were added.
    """

    def __init__(self):
        self.spaces = []
        self.buildings = []


    def add_building(self, building):
        """Add a building to the model.

        :param air_flow.Building building: The building to add.

        :return: *building*, with ``building_index`` set.
        """
        building.building_index = len(self.buildings)
        self.buildings.append(building)
        return building


    def add_space(self, space):
        """Add a space to the model.

        If the space belongs to a building that has not been added yet, the
        building is added too.

        :param air_flow.Space space: The space to add.

        :return: *space*, with ``space_index`` set.

        :raises air_flow.AirFlowModelError: If a space with the same name has
            already been added.
        """
        if any(s.name == space.name for s in self.spaces):
            raise AirFlowModelError(f"a space named '{space.name}' already exists")
        if space.building is not None and not any(b is space.building for b in self.buildings):
            self.add_building(space.building)
        space.space_index = len(self.spaces)
        self.spaces.append(space)
        return space


    def get_space(self, name):
        """The space named *name*.

        :raises KeyError: If there is no such space.
        """
        for space in self.spaces:
            if space.name == name:
                return space
        raise KeyError(name)
