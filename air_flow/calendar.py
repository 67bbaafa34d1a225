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

"""Implementation of :py:class:`Date` and tools for locating dates within a
(non leap) year."""

import numpy as np
from .config import HOURS_IN_YEAR
from ._errors import AirFlowModelError

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# the number of days in the year before the first day of each month
_DAYS_BEFORE_MONTH = np.cumsum((0,) + DAYS_IN_MONTH[:-1])



def hours_since_year_start(month, day, hour):
    """The number of hours between the start of the year and the given time.

    Works on scalars and on (equally shaped) numpy arrays, so it can be used to
    build the time axis of a weather series.

    :param month: Month (1 to 12).
    :param day: Day of the month (starting at 1).
    :param hour: Hour of the day.

    :raises air_flow.AirFlowModelError: If a month is not a whole number in
        [1, 12], or a day is not within its month.
    """
    month_in = np.asarray(month, dtype='float')
    bad = np.isnan(month_in) | (month_in < 1) | (month_in > 12) | (month_in != np.floor(month_in))
    if np.any(bad):
        raise AirFlowModelError(
            f'month must be in [1, 12], got {np.atleast_1d(month_in)[np.atleast_1d(bad)][0]:g}')
    month = month_in.astype('int')

    day = np.asarray(day, dtype='float')
    days_in_month = np.asarray(DAYS_IN_MONTH)[month - 1]
    bad = np.isnan(day) | (day < 1) | (day > days_in_month)
    if np.any(bad):
        raise AirFlowModelError('day must be within its month, got day {:g} of month {}'.format(
            np.broadcast_to(day, bad.shape)[bad][0],
            np.broadcast_to(month, bad.shape)[bad][0]))

    day_of_year = _DAYS_BEFORE_MONTH[month - 1] + day
    result = 24. * (day_of_year - 1) + np.asarray(hour, dtype='float')
    return float(result) if result.ndim == 0 else result



class Date:
    """A moment within a year.

    :ivar int month: The month (1 to 12).
    :ivar int day: The day of the month (starting at 1).
    :ivar float hour: The (fractional) hour of the day, in [0, 24].

    :raises air_flow.AirFlowModelError: If the date does not exist in a non
        leap year.
    """

    def __init__(self, month, day, hour):
        if not 1 <= month <= 12:
            raise AirFlowModelError(f'month must be in [1, 12], got {month}')
        if not 1 <= day <= DAYS_IN_MONTH[month - 1]:
            raise AirFlowModelError(
                f'day must be in [1, {DAYS_IN_MONTH[month - 1]}] for month {month}, got {day}')
        if not 0. <= hour <= 24.:
            raise AirFlowModelError(f'hour must be in [0, 24], got {hour}')
        self.month = int(month)
        self.day = int(day)
        self.hour = float(hour)


    @classmethod
    def from_hours_since_year_start(cls, hours):
        """Create the date *hours* after the start of the year.

        Values outside of the year are wrapped around it.
        """
        hours = hours % HOURS_IN_YEAR
        day_of_year = int(hours // 24.)
        month = int(np.searchsorted(_DAYS_BEFORE_MONTH, day_of_year, side='right'))
        day = day_of_year - int(_DAYS_BEFORE_MONTH[month - 1]) + 1
        return cls(month, day, hours - 24. * day_of_year)


    def day_of_year(self):
        """The day of the year, starting at 1 on January 1st."""
        return int(_DAYS_BEFORE_MONTH[self.month - 1]) + self.day


    def hours_since_year_start(self):
        """The number of hours since midnight on January 1st."""
        return hours_since_year_start(self.month, self.day, self.hour)


    def add_hours(self, hours):
        """A new date *hours* after this one (wrapping at the end of the year).

        :rtype: Date
        """
        return Date.from_hours_since_year_start(self.hours_since_year_start() + hours)


    def __eq__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return (self.month, self.day, self.hour) == (other.month, other.day, other.hour)


    def __hash__(self):
        return hash((self.month, self.day, self.hour))


    def __repr__(self):
        return 'Date({}, {}, {})'.format(self.month, self.day, self.hour)
