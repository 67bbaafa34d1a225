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

"""Representations of the weather the air flow model is exposed to.

A weather source is anything implementing :py:class:`Weather`; the model only
ever asks it for a :py:class:`CurrentWeather` at a given
:py:class:`air_flow.calendar.Date`.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Union
import numpy as np
import pandas as pd
from scipy.interpolate import interp1d
from .calendar import Date, hours_since_year_start
from ._errors import AirFlowModelError

logger = logging.getLogger(__name__)

#: The fields of :py:class:`CurrentWeather`. These are also the names of the
#: columns :py:class:`SeriesWeather` reads.
WEATHER_FIELDS = ('dry_bulb_temperature', 'wind_speed')

# (column, missing value marker) of the fields in an EnergyPlus weather file.
_EPW_COLUMNS = {
    'dry_bulb_temperature': (6, 99.9),
    'wind_speed': (21, 999.)}
_EPW_HEADER_LINES = 8



class CurrentWeather:
    """The weather at a moment in time.

    Each field is *None* if the weather source does not provide it.

    :ivar typing.Optional[float] dry_bulb_temperature: Outdoor dry bulb
        temperature (C).
    :ivar typing.Optional[float] wind_speed: Wind speed (m/s).
    """

    def __init__(self, dry_bulb_temperature=None, wind_speed=None):
        self.dry_bulb_temperature = dry_bulb_temperature
        self.wind_speed = wind_speed

    def __repr__(self):
        return 'CurrentWeather(dry_bulb_temperature={}, wind_speed={})'.format(
            self.dry_bulb_temperature, self.wind_speed)



class Weather(ABC):
    @abstractmethod
    def get_weather_data(self, date: Date) -> CurrentWeather:
        """The weather at *date*."""
        pass



class ScheduleConstant:
    """A schedule that has the same value at all times.

    Instances are callable with a :py:class:`air_flow.calendar.Date`.
    """

    def __init__(self, value: float):
        self.value = value

    def __call__(self, date):
        return self.value



Schedule = Callable[[Date], float]



class SyntheticWeather(Weather):
    """Weather made up of one schedule per field.

    :param dry_bulb_temperature: Schedule (a callable taking a
        :py:class:`air_flow.calendar.Date`) for the dry bulb temperature, a
        number (which is wrapped in a :py:class:`ScheduleConstant`), or *None*.
    :param wind_speed: As for *dry_bulb_temperature*, for the wind speed.
    """

    def __init__(
            self,
            dry_bulb_temperature: Union[None, float, Schedule] = None,
            wind_speed: Union[None, float, Schedule] = None):
        self.dry_bulb_temperature = self._as_schedule(dry_bulb_temperature)
        self.wind_speed = self._as_schedule(wind_speed)

    @staticmethod
    def _as_schedule(s):
        if s is None or callable(s):
            return s
        return ScheduleConstant(float(s))

    def get_weather_data(self, date):
        return CurrentWeather(**{
            f: None if getattr(self, f) is None else getattr(self, f)(date)
            for f in WEATHER_FIELDS})



class SeriesWeather(Weather):
    """Weather interpolated (linearly) from a table of observations.

    Outside the range of the observations, the first (or last) observation is
    used. Missing observations (*NaN*) are skipped.

    :param pandas.DataFrame data: Table with columns *month*, *day* and *hour*
        and any of the columns in :py:data:`WEATHER_FIELDS`. Fields with no
        column, or no observations, will be *None* in the resulting
        :py:class:`CurrentWeather`.
    """

    def __init__(self, data: pd.DataFrame):
        missing = [c for c in ('month', 'day', 'hour') if c not in data.columns]
        if len(missing) > 0:
            raise AirFlowModelError(
                'weather data is missing the column(s) {}'.format(', '.join(missing)))

        self.data = data
        t = hours_since_year_start(
            data['month'].to_numpy(),
            data['day'].to_numpy(),
            data['hour'].to_numpy())
        t = np.atleast_1d(t)

        self._interpolators = {}
        for field in WEATHER_FIELDS:
            if field not in data.columns:
                self._interpolators[field] = None
                continue
            y = data[field].to_numpy(dtype='float')
            keep = ~np.isnan(y)
            if not np.any(keep):
                logger.debug('weather data has no observations of %s', field)
                self._interpolators[field] = None
                continue
            self._interpolators[field] = self._make_interpolator(t[keep], y[keep])


    @staticmethod
    def _make_interpolator(t, y):
        order = np.argsort(t, kind='stable')
        t, y = t[order], y[order]
        if len(t) == 1:
            return lambda x: y[0]
        return interp1d(t, y, bounds_error=False, fill_value=(y[0], y[-1]))


    @classmethod
    def from_csv(cls, path, **kwargs):
        """Read the weather from a CSV file with a header row naming the
        columns described in :py:class:`SeriesWeather`.

        *\\**kwargs* are passed to :py:func:`pandas.read_csv`.
        """
        return cls(pd.read_csv(path, **kwargs))


    @classmethod
    def from_epw(cls, path):
        """Read the weather from an EnergyPlus weather (EPW) file."""
        raw = pd.read_csv(path, skiprows=_EPW_HEADER_LINES, header=None)
        data = pd.DataFrame({
            'month': raw[1].astype(int),
            'day': raw[2].astype(int),
            'hour': raw[3].astype(float)})
        for field, (column, missing) in _EPW_COLUMNS.items():
            values = raw[column].astype(float)
            data[field] = values.mask(values >= missing)
        logger.debug('read %d weather records from %s', len(data), path)
        return cls(data)


    def get_weather_data(self, date):
        t = date.hours_since_year_start()
        return CurrentWeather(**{
            f: None if i is None else float(i(t))
            for f, i in self._interpolators.items()})
