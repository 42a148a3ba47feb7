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

from typing import Optional

from compls.serialization.exceptions import TruncatedError

__all__ = [
    'CompLsError',
    'InvalidPrecision',
    'PrecisionOverflow',
    'NonFiniteCoordinate',
    'CorruptData',
    'LineStringParseError',
    'TruncatedError',
]


class CompLsError(Exception):
    """Base class for exceptions in compls."""
    pass


class InvalidPrecision(CompLsError, ValueError):
    """Raised when the requested number of digits is outside the supported range.
    """

    def __init__(self, precision: object, message: Optional[str] = None) -> None:
        self.precision = precision
        super().__init__(message or f'invalid precision: {precision!r}')


class PrecisionOverflow(CompLsError, ValueError):
    """Raised when a coordinate scaled by 10**precision does not fit the quantized integer range.

    `index` is the position of the offending point in the line string, it is `None` when `quantize()` is called on a
    bare value.
    """

    def __init__(self, value: float, precision: int, index: Optional[int] = None) -> None:
        self.value = value
        self.precision = precision
        self.index = index
        where = f' at point {index}' if index is not None else ''
        super().__init__(f'coordinate {value!r}{where} overflows at precision {precision}')


class NonFiniteCoordinate(PrecisionOverflow):
    """NaN or infinite coordinate."""

    def __init__(self, value: float, precision: int, index: Optional[int] = None) -> None:
        super().__init__(value, precision, index)
        where = f' at point {index}' if index is not None else ''
        self.args = (f'coordinate {value!r}{where} is not finite',)


class CorruptData(CompLsError, ValueError):
    """Raised when an encoded line string is structurally inconsistent.

    The low-level cause (for example a `TruncatedError`) is kept as `__cause__`.
    """


class LineStringParseError(CompLsError, ValueError):
    """Text could not be parsed as a line string."""
