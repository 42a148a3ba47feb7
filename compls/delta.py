# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Delta coding of quantized points, each axis on its own.

The first delta is taken from the origin, so it is the first point itself:

>>> encode_deltas([QuantizedPoint(769615707, 432746200), QuantizedPoint(769616699, 432747688)])
[QuantizedPoint(x=769615707, y=432746200), QuantizedPoint(x=992, y=1488)]
>>> decode_deltas([QuantizedPoint(769615707, 432746200), QuantizedPoint(992, 1488)])
[QuantizedPoint(x=769615707, y=432746200), QuantizedPoint(x=769616699, y=432747688)]
"""

from typing import Iterable

from compls.quantizer import QuantizedPoint


def encode_deltas(points: Iterable[QuantizedPoint]) -> list[QuantizedPoint]:
    deltas = []
    prev_x, prev_y = 0, 0
    for x, y in points:
        deltas.append(QuantizedPoint(x - prev_x, y - prev_y))
        prev_x, prev_y = x, y
    return deltas


def decode_deltas(deltas: Iterable[QuantizedPoint]) -> list[QuantizedPoint]:
    points = []
    x, y = 0, 0
    for dx, dy in deltas:
        x += dx
        y += dy
        points.append(QuantizedPoint(x, y))
    return points
