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
The compact line string container.

Layout:

    [precision: 1 byte][N: unsigned leb128][dx_0: zigzag][dy_0: zigzag]...[dx_N-1: zigzag][dy_N-1: zigzag]

Where (dx_0, dy_0) is the first quantized point and every following pair is the difference to the previous point.

>>> ls = LineString([(76.9615707, 43.27462), (76.9616699, 43.2747688)])
>>> compact = CompactLineString.try_compact7(ls)
>>> bytes(compact).hex()
'0702b69dfbdd05b0bbd99c03c00fa017'

Breakdown of the result:

    07: precision
    02: 2 points
    b69dfbdd05: zigzag(769615707)
    b0bbd99c03: zigzag(432746200)
    c00f: zigzag(992)
    a017: zigzag(1488)

>>> compact.size()
2
>>> compact.linestring()
LineString([(76.9615707, 43.27462), (76.9616699, 43.2747688)])
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from structlog import get_logger
from typing_extensions import Buffer

from compls.conf.get_settings import get_global_settings
from compls.constants import MAX_COUNT_VARINT_BYTES, MAX_DELTA_VARINT_BYTES, MAX_PRECISION, MAX_QUANTIZED_VALUE
from compls.delta import decode_deltas, encode_deltas
from compls.exceptions import CorruptData
from compls.geometry import LineString
from compls.quantizer import Precision, QuantizedPoint, dequantize_point, quantize_point, validate_precision
from compls.serialization import (
    ByteReader,
    ByteWriter,
    OutOfDataError,
    SerializationError,
    TooLongError,
    TrailingDataError,
    TruncatedError,
)

logger = get_logger()

# every point takes at least one byte per axis
_MIN_POINT_SIZE = 2


class CompactLineString:
    """Immutable, self-describing encoding of a line string.

    Instances are created with `try_compact` (or one of its fixed-precision variants) or by wrapping existing bytes with
    `from_bytes`, and are read back with `linestring()`.
    """

    __slots__ = ('_data',)

    _data: bytes

    def __init__(self, data: bytes) -> None:
        # XXX: no validation here, use `from_bytes` for data coming from outside
        self._data = data

    @classmethod
    def try_compact(cls, line_string: Iterable[tuple[float, float]], precision: Optional[int] = None
                    ) -> CompactLineString:
        """Quantize, delta-encode and varint-serialize a line string.

        When `precision` is `None` the `DEFAULT_PRECISION` setting is used. Raises `InvalidPrecision` before touching
        any point, and `PrecisionOverflow` (with the point index) on the first coordinate that does not fit.
        """
        if precision is None:
            precision = get_global_settings().DEFAULT_PRECISION
        precision = validate_precision(precision)
        log = logger.new(precision=precision)

        points = [quantize_point(x, y, precision, index=i) for i, (x, y) in enumerate(line_string)]

        writer = ByteWriter()
        writer.write_byte(precision)
        writer.write_unsigned(len(points), max_bytes=MAX_COUNT_VARINT_BYTES)
        for dx, dy in encode_deltas(points):
            writer.write_signed(dx, max_bytes=MAX_DELTA_VARINT_BYTES)
            writer.write_signed(dy, max_bytes=MAX_DELTA_VARINT_BYTES)
        data = writer.finalize()

        log.debug('line string encoded', points=len(points), size=len(data))
        return cls(data)

    @classmethod
    def try_compact2(cls, line_string: Iterable[tuple[float, float]]) -> CompactLineString:
        """Encode with 2 digits, for metric coordinates."""
        return cls.try_compact(line_string, Precision.TWO)

    @classmethod
    def try_compact7(cls, line_string: Iterable[tuple[float, float]]) -> CompactLineString:
        """Encode with 7 digits, for lat/lon coordinates."""
        return cls.try_compact(line_string, Precision.SEVEN)

    @classmethod
    def from_bytes(cls, data: Buffer) -> CompactLineString:
        """Wrap existing bytes, checking that the header is consistent with the body length.

        The body itself is only fully checked by `linestring()`.
        """
        data = bytes(memoryview(data))
        reader = ByteReader(data)
        cls._read_header(reader)
        return cls(data)

    @property
    def precision(self) -> int:
        if not self._data:
            raise CorruptData('empty buffer')
        return self._data[0]

    def size(self) -> int:
        """Number of points, read from the header without decoding the body."""
        reader = ByteReader(self._data)
        _, count = self._read_header(reader)
        return count

    def linestring(self) -> LineString:
        """Decode back to a line string.

        Every axis value is within 0.5 * 10**-precision of the encoded one. Raises `CorruptData` if the body does not
        hold exactly the number of points declared in the header.
        """
        reader = ByteReader(self._data)
        precision, count = self._read_header(reader)
        log = logger.new(precision=precision, points=count)

        max_points = get_global_settings().MAX_POINTS
        if max_points is not None and count > max_points:
            log.warning('compact line string rejected', reason='too many points', max_points=max_points)
            raise CorruptData(f'{count} points exceed the limit of {max_points}')

        try:
            deltas = [
                QuantizedPoint(
                    reader.read_signed(max_bytes=MAX_DELTA_VARINT_BYTES),
                    reader.read_signed(max_bytes=MAX_DELTA_VARINT_BYTES),
                )
                for _ in range(count)
            ]
            reader.finalize()
        except TruncatedError as e:
            log.warning('compact line string rejected', reason='truncated varint')
            raise CorruptData('truncated varint in body') from e
        except OutOfDataError as e:
            log.warning('compact line string rejected', reason='missing points')
            raise CorruptData(f'body ended before the {count} declared points') from e
        except TrailingDataError as e:
            log.warning('compact line string rejected', reason='trailing data')
            raise CorruptData('trailing bytes after the declared points') from e
        except TooLongError as e:
            log.warning('compact line string rejected', reason='varint too long')
            raise CorruptData('varint longer than any valid delta') from e
        except SerializationError as e:
            log.warning('compact line string rejected', reason='serialization error')
            raise CorruptData('invalid body') from e

        points = decode_deltas(deltas)
        for index, point in enumerate(points):
            if abs(point.x) > MAX_QUANTIZED_VALUE or abs(point.y) > MAX_QUANTIZED_VALUE:
                log.warning('compact line string rejected', reason='point out of range', index=index)
                raise CorruptData(f'point {index} is out of the quantized range')

        log.debug('line string decoded', size=len(self._data))
        return LineString(dequantize_point(point, precision) for point in points)

    @staticmethod
    def _read_header(reader: ByteReader) -> tuple[int, int]:
        try:
            precision = reader.read_byte()
            count = reader.read_unsigned(max_bytes=MAX_COUNT_VARINT_BYTES)
        except TruncatedError as e:
            raise CorruptData('truncated point count') from e
        except OutOfDataError as e:
            raise CorruptData('missing header') from e
        except TooLongError as e:
            raise CorruptData('point count varint too long') from e
        if precision > MAX_PRECISION:
            raise CorruptData(f'invalid precision byte: {precision}')
        if count * _MIN_POINT_SIZE > reader.remaining():
            raise CorruptData(f'{count} points declared but only {reader.remaining()} bytes of body')
        return precision, count

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CompactLineString):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f'CompactLineString({self._data.hex()!r})'
