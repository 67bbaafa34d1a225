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

import re
import numpy as np
import matplotlib.pyplot as plt
from .._state import ElementKind

_KINDS = {
    'infiltration': ElementKind.SPACE_INFILTRATION_VOLUME,
    'ventilation': ElementKind.SPACE_VENTILATION_VOLUME}



def flow_columns(results, kind='infiltration'):
    """The columns of *results* holding flow volumes of type *kind*.

    :param pandas.DataFrame results: As returned by
        :py:func:`air_flow.ext.simulation.run_simulation`.
    :param str kind: One of *'infiltration'* or *'ventilation'*.
    """
    if kind not in _KINDS:
        raise ValueError('kind must be one of {}, got {}'.format(', '.join(_KINDS), kind))
    pattern = re.compile(r'^{}\(\d+\)$'.format(_KINDS[kind].value))
    return [c for c in results.columns if pattern.match(c)]



def plot_flows(results, kind='infiltration', space_names=None, ax=None):
    """Plot the flows of each space through a simulation.

    :param pandas.DataFrame results: As returned by
        :py:func:`air_flow.ext.simulation.run_simulation`.
    :param str kind: One of *'infiltration'* or *'ventilation'*.
    :param space_names: Labels for the lines, indexed by the index of each
        space in the model. If *None*, the column names are used.
    :param matplotlib.axes.Axes ax: The axes to draw on. If *None*, a new
        figure is created.

    :return: The axes drawn on.
    """
    if ax is None:
        _, ax = plt.subplots()

    columns = flow_columns(results, kind)
    steps = np.arange(len(results))

    for column in columns:
        space_index = int(re.search(r"\((\d+)\)$", column).group(1))
        label = column if space_names is None else space_names[space_index]
        ax.plot(steps, results[column].to_numpy(), label=label)

    ax.set_xlabel('time step')
    ax.set_ylabel('{} ($m^3/s$)'.format(kind))
    if len(columns) > 0:
        ax.legend()

    return ax
