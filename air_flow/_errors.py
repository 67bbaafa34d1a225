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

"""Contains the implementation of :py:class:`AirFlowModelError`."""

#: The name errors raised by this package are reported under.
MODULE_NAME = 'Air-flow model'



class AirFlowModelError(Exception):
    """Raised when the air flow model is given inconsistent or incomplete data.

    :ivar str reason: The description of the problem, without the module
        prefix.

    :param str reason: The description of the problem.
    """

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f'{MODULE_NAME}: {reason}')
