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
Conversion of float coordinates to fixed-precision integers and back.

A value is multiplied by 10**precision and rounded to the nearest integer, ties away from zero:

>>> quantize(76.9615707, 7)
769615707
>>> quantize(0.125, 2), quantize(-0.125, 2)
(13, -13)
>>> dequantize(769615707, 7)
76.9615707
"""

import math
from enum import IntEnum
from typing import NamedTuple, Optional

from compls.constants import MAX_PRECISION, MAX_QUANTIZED_VALUE
from compls.exceptions import InvalidPrecision, NonFiniteCoordinate, PrecisionOverflow


class Precision(IntEnum):
    """Commonly used precisions, any other int in `0..MAX_PRECISION` is accepted as well."""

    # Metric CRS such as Pseudo-Mercator (EPSG:3857): centimetres.
    TWO = 2
    # Lat/lon in degrees (WGS-84, EPSG:4326): about 1.1 cm at the equator.
    SEVEN = 7

    def multiplicator(self) -> float:
        return multiplicator(self)


class QuantizedPoint(NamedTuple):
    x: int
    y: int


def validate_precision(precision: int) -> int:
    """Return `precision` as a plain int, or raise `InvalidPrecision`."""
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidPrecision(precision, f'precision must be an int, got {type(precision).__name__}')
    if not 0 <= precision <= MAX_PRECISION:
        raise InvalidPrecision(precision, f'precision must be between 0 and {MAX_PRECISION}, got {precision}')
    return int(precision)


def multiplicator(precision: int) -> float:
    # exact for every valid precision, 10**9 < 2**53
    return float(10 ** precision)


def quantize(value: float, precision: int, *, index: Optional[int] = None) -> int:
    """Scale `value` by 10**precision and round half away from zero.

    `precision` is expected to be validated already. `index` is only used to annotate the raised exception.
    """
    if not math.isfinite(value):
        raise NonFiniteCoordinate(value, precision, index)
    scaled = abs(value) * multiplicator(precision)
    if scaled > MAX_QUANTIZED_VALUE + 0.5:
        raise PrecisionOverflow(value, precision, index)
    # scaled <= 2**53 here, so subtracting its floor is exact
    rounded = math.floor(scaled)
    if scaled - rounded >= 0.5:
        rounded += 1
    if rounded > MAX_QUANTIZED_VALUE:
        raise PrecisionOverflow(value, precision, index)
    return rounded if value >= 0 else -rounded


def dequantize(value: int, precision: int) -> float:
    return value / multiplicator(precision)


def quantize_point(x: float, y: float, precision: int, *, index: Optional[int] = None) -> QuantizedPoint:
    return QuantizedPoint(quantize(x, precision, index=index), quantize(y, precision, index=index))


def dequantize_point(point: QuantizedPoint, precision: int) -> tuple[float, float]:
    return dequantize(point.x, precision), dequantize(point.y, precision)
