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
Signed varints, as zig-zag mapped unsigned LEB128 values.

Zig-zag interleaves negative and positive numbers so that values with a small magnitude get a small unsigned code
regardless of their sign: 0, -1, 1, -2, 2, ... become 0, 1, 2, 3, 4, ...

>>> [zigzag(n) for n in (0, -1, 1, -2, 2, -64, 64)]
[0, 1, 2, 3, 4, 127, 128]
>>> [unzigzag(n) for n in (0, 1, 2, 3, 4, 127, 128)]
[0, -1, 1, -2, 2, -64, 64]

>>> w = ByteWriter()
>>> for n in (0, -1, 992, -1488):
...     encode_zigzag(w, n)
>>> w.finalize().hex()
'0001c00f9f17'

>>> r = ByteReader(bytes.fromhex('0001c00f9f17'))
>>> [decode_zigzag(r) for _ in range(4)]
[0, -1, 992, -1488]
>>> r.finalize()
"""

from typing import Optional

from compls.serialization.encoding.leb128 import decode_leb128, encode_leb128
from compls.serialization.reader import ByteReader
from compls.serialization.writer import ByteWriter


def zigzag(value: int) -> int:
    """Map a signed integer to an unsigned one, small magnitudes to small codes."""
    if value >= 0:
        return value << 1
    return ((-value) << 1) - 1


def unzigzag(value: int) -> int:
    if value < 0:
        raise ValueError('zig-zag code cannot be negative')
    return (value >> 1) ^ -(value & 1)


def encode_zigzag(writer: ByteWriter, value: int, *, max_bytes: Optional[int] = None) -> None:
    encode_leb128(writer, zigzag(value), max_bytes=max_bytes)


def decode_zigzag(reader: ByteReader, *, max_bytes: Optional[int] = None) -> int:
    return unzigzag(decode_leb128(reader, max_bytes=max_bytes))
