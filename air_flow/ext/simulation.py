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

import logging
from numbers import Number
import pandas as pd
from ..config import (
    DEFAULT_TIMESTEP_HOURS,
    DEFAULT_SPACE_TEMPERATURE)
from .._errors import AirFlowModelError
from .._air_flow_model import AirFlowModel
from .._state import (
    ElementKind,
    SimulationStateElement,
    SimulationStateHeader)

logger = logging.getLogger(__name__)



def _temperature_getter(value):
    if callable(value):
        return value
    if isinstance(value, Number):
        return lambda date: value
    raise TypeError(f'space temperature must be a number or a callable, got {value!r}')



def run_simulation(
        model,
        weather,
        start,
        n_steps,
        timestep = DEFAULT_TIMESTEP_HOURS,
        space_temperatures = None):
    """A simple function for running an air flow model through time.

    The dry bulb temperature of every space is added to a new simulation state,
    so the spaces of *model* must not have been registered in a simulation
    state before. Before each step, the temperature of each space is set from
    *space_temperatures*, standing in for the thermal model a full simulation
    would have.

    :param air_flow.SimpleModel model: The model to simulate.
    :param air_flow.weather.Weather weather: The weather.
    :param air_flow.calendar.Date start: The date of the first step.
    :param int n_steps: The number of steps to take.
    :param float timestep: The length of each step (hours).
    :param space_temperatures: Dictionary mapping the names of spaces to their
        dry bulb temperature (C), either as a number or as a callable taking
        a :py:class:`air_flow.calendar.Date`. Spaces not mentioned are at
        :py:data:`air_flow.config.DEFAULT_SPACE_TEMPERATURE`.

    :return: A table with one row per step, with columns *month*, *day*,
        *hour* and one column per element of the simulation state.
    :rtype: pandas.DataFrame

    :raises air_flow.AirFlowModelError: If the spaces have already been
        registered, or the model is incomplete (in which case the spaces are
        left unregistered).
    """
    if space_temperatures is None:
        space_temperatures = {}

    unknown = set(space_temperatures.keys()) - set(s.name for s in model.spaces)
    if len(unknown) > 0:
        raise KeyError('unknown spaces: {}'.format(', '.join(sorted(unknown))))

    temperatures = [
        (space, _temperature_getter(space_temperatures.get(space.name, DEFAULT_SPACE_TEMPERATURE)))
        for space in model.spaces]

    header = SimulationStateHeader()

    registered = []
    try:
        for i, (space, getter) in enumerate(temperatures):
            space.set_dry_bulb_temperature_index(header.push(
                SimulationStateElement(ElementKind.SPACE_DRY_BULB_TEMPERATURE, i),
                getter(start)))
            registered.append(space)

        air_flow_model = AirFlowModel(model, header)
    except AirFlowModelError:
        for space in registered:
            space.clear_index('dry_bulb_temperature_index')
        raise

    state = header.take_values()

    rows = []
    date = start
    for step in range(n_steps):
        for space, getter in temperatures:
            space.set_dry_bulb_temperature(state, getter(date))

        air_flow_model.march(date, weather, model, state)

        row = {'month': date.month, 'day': date.day, 'hour': date.hour}
        row.update(state.to_series().to_dict())
        rows.append(row)

        date = date.add_hours(timestep)

    logger.debug('simulated %d steps of %s hours from %r', n_steps, timestep, start)

    return pd.DataFrame(rows, columns=['month', 'day', 'hour'] + header.names)
