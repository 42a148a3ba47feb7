#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
Unsigned LEB128 (Little Endian Base 128), the varint the compact format is built from.

References:
- https://en.wikipedia.org/wiki/LEB128
- https://protobuf.dev/programming-guides/encoding/#varints

A value is cut in groups of 7 bits, least significant group first, one group per byte. The high bit of a byte is set
when another byte follows. Signed values go through zig-zag first, see the `zigzag` module.

>>> w = ByteWriter()
>>> for n in (0, 127, 128, 624485):
...     encode_leb128(w, n)
>>> w.finalize().hex()
'007f8001e58e26'
>>> leb128_size(624485)
3

>>> r = ByteReader(bytes.fromhex('007f8001e58e26'))
>>> [decode_leb128(r) for _ in range(4)]
[0, 127, 128, 624485]
>>> r.finalize()

The byte limit is checked before anything is written, and while reading:

>>> encode_leb128(ByteWriter(), 128, max_bytes=1)
Traceback (most recent call last):
    ...
compls.serialization.exceptions.TooLongError: 128 needs 2 bytes, at most 1 allowed
>>> decode_leb128(ByteReader(bytes.fromhex('e58e26')), max_bytes=2)
Traceback (most recent call last):
    ...
compls.serialization.exceptions.TooLongError: varint longer than 2 bytes

A value that announces more bytes than there are is truncated:

>>> decode_leb128(ByteReader(bytes.fromhex('e58e')))
Traceback (most recent call last):
    ...
compls.serialization.exceptions.TruncatedError: data ended inside a varint after 2 bytes
"""

from typing import Optional

from compls.serialization.exceptions import OutOfDataError, TooLongError, TruncatedError
from compls.serialization.reader import ByteReader
from compls.serialization.writer import ByteWriter

_GROUP_BITS = 7
_GROUP_MASK = 0b0111_1111
_CONTINUATION = 0b1000_0000


def leb128_size(value: int) -> int:
    """Number of bytes `value` takes once encoded."""
    if value < 0:
        raise ValueError('cannot encode value <0 as unsigned')
    return max(1, -(-value.bit_length() // _GROUP_BITS))


def encode_leb128(writer: ByteWriter, value: int, *, max_bytes: Optional[int] = None) -> None:
    """Write a non-negative integer, raising `TooLongError` when it needs more than `max_bytes` bytes."""
    size = leb128_size(value)
    if max_bytes is not None and size > max_bytes:
        raise TooLongError(f'{value} needs {size} bytes, at most {max_bytes} allowed')
    for _ in range(size - 1):
        writer.write_byte((value & _GROUP_MASK) | _CONTINUATION)
        value >>= _GROUP_BITS
    writer.write_byte(value)


def decode_leb128(reader: ByteReader, *, max_bytes: Optional[int] = None) -> int:
    """Read a non-negative integer.

    Raises `OutOfDataError` when there is no byte at all to read, `TruncatedError` when the data ends after a byte that
    had the continuation bit set and `TooLongError` when the value goes on past `max_bytes` bytes.
    """
    result = 0
    size = 0
    while True:
        if max_bytes is not None and size >= max_bytes:
            raise TooLongError(f'varint longer than {max_bytes} bytes')
        try:
            byte = reader.read_byte()
        except OutOfDataError as e:
            if size == 0:
                raise
            raise TruncatedError(f'data ended inside a varint after {size} bytes') from e
        result |= (byte & _GROUP_MASK) << (size * _GROUP_BITS)
        size += 1
        if not byte & _CONTINUATION:
            return result
