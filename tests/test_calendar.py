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

import numpy as np
import pytest as pt
from air_flow import AirFlowModelError
from air_flow.calendar import Date, hours_since_year_start



def test_date_position_in_year():
    assert Date(1, 1, 0.).hours_since_year_start() == 0.
    assert Date(3, 1, 0.).day_of_year() == 60
    assert Date(3, 1, 6.5).hours_since_year_start() == pt.approx(59 * 24 + 6.5)
    assert Date(12, 31, 24.).hours_since_year_start() == pt.approx(8760.)



def test_hours_since_year_start_on_arrays():
    res = hours_since_year_start(
        np.array([1, 1, 2]),
        np.array([1, 2, 1]),
        np.array([1., 0., 0.]))
    assert res.tolist() == [1., 24., 31 * 24.]



def test_add_hours():
    assert Date(1, 31, 12.).add_hours(24.) == Date(2, 1, 12.)
    assert Date(2, 28, 23.).add_hours(1.5) == Date(3, 1, .5)

    # wraps around the end of the year
    assert Date(12, 31, 23.).add_hours(2.) == Date(1, 1, 1.)



def test_invalid_dates():
    with pt.raises(AirFlowModelError):
        Date(13, 1, 0.)
    with pt.raises(AirFlowModelError):
        Date(2, 29, 0.)
    with pt.raises(AirFlowModelError):
        Date(4, 31, 0.)
    with pt.raises(AirFlowModelError):
        Date(1, 1, 25.)



def test_hours_since_year_start_rejects_invalid_dates():
    with pt.raises(AirFlowModelError, match='month must be in'):
        hours_since_year_start(np.array([0, 1]), np.array([1, 1]), np.array([0., 1.]))
    with pt.raises(AirFlowModelError, match='month must be in'):
        hours_since_year_start(13, 1, 0.)
    with pt.raises(AirFlowModelError, match='day 30 of month 2'):
        hours_since_year_start(np.array([1, 2]), np.array([31, 30]), np.array([0., 0.]))
    with pt.raises(AirFlowModelError, match='day must be within'):
        hours_since_year_start(1, 0, 0.)
