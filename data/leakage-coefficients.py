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

import os
import re
import json

PWD         = os.path.dirname(__file__)
JSON_FILE   = os.path.join(PWD, '..', 'air_flow', 'infiltration', 'leakagecoefficients.json')
SPHINX_FILE = os.path.join(PWD, '..', 'doc', 'source', 'leakagecoefficients.rst')

# EnergyPlus Input/Output Reference, ZoneInfiltration:EffectiveLeakageArea.
# Columns are for buildings of 1, 2 and 3 storeys.
STACK = [0.000145, 0.000290, 0.000435]

WIND = {
    'NO_OBSTRUCTIONS' : [0.000319, 0.000420, 0.000494],
    'ISOLATED_RURAL'  : [0.000246, 0.000325, 0.000382],
    'URBAN'           : [0.000172, 0.000231, 0.000271],
    'LARGE_LOT_URBAN' : [0.000104, 0.000137, 0.000161],
    'SMALL_LOT_URBAN' : [0.000032, 0.000042, 0.000049]}

def write_sphinx(json_string):
    if not os.path.isdir(os.path.dirname(SPHINX_FILE)):
        return
    with open(SPHINX_FILE, 'w') as sfile:
        sfile.writelines([
            '.. _leakage-coefficients-data:\n',
            '\n',
            'Leakage Coefficients\n',
            '====================\n',
            '\n',
            'Stack and wind coefficients are stored in the file *leakagecoefficients.json*, which contains::\n',
            '\n',
            '    ', re.sub(r'\n', r'\n    ', json_string)])

with open(JSON_FILE, 'w') as outfile:
    json_data = {'stack': STACK, 'wind': WIND}
    json.dump(json_data, outfile, indent=4)
    write_sphinx(json.dumps(json_data, indent=4))
