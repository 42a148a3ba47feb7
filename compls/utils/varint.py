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

from typing import Optional

from compls.serialization import ByteReader, ByteWriter, TooLongError
from compls.serialization.encoding.zigzag import decode_zigzag, encode_zigzag


def encode_signed(value: int, *, max_bytes: Optional[int] = None) -> bytes:
    """
    Receive a signed integer and return its zig-zag varint bytes.

    >>> encode_signed(0) == bytes([0x00])
    True
    >>> encode_signed(-1) == bytes([0x01])
    True
    >>> encode_signed(992) == bytes([0xC0, 0x0F])
    True
    """
    writer = ByteWriter()
    try:
        encode_zigzag(writer, value, max_bytes=max_bytes)
    except TooLongError as e:
        raise ValueError(f'cannot encode more than {max_bytes} bytes') from e
    return writer.finalize()


def decode_signed(data: bytes, position: int = 0, *, max_bytes: Optional[int] = None) -> tuple[int, int]:
    """
    Decode the zig-zag varint that starts at `position` and return it with the position right after it.

    Raises `TruncatedError` when the data ends inside the varint.

    >>> decode_signed(bytes([0xC0, 0x0F]) + b'test')
    (992, 2)
    >>> decode_signed(b'\\x07\\x02\\x01', 2)
    (-1, 3)
    >>> try:
    ...     decode_signed(bytes([0xC0, 0x8F, 0x80]), max_bytes=2)
    ... except ValueError as e:
    ...     print(e)
    cannot decode more than 2 bytes
    """
    if not 0 <= position <= len(data):
        raise ValueError(f'position {position} out of range')
    reader = ByteReader(memoryview(data)[position:])
    try:
        value = decode_zigzag(reader, max_bytes=max_bytes)
    except TooLongError as e:
        raise ValueError(f'cannot decode more than {max_bytes} bytes') from e
    return value, len(data) - reader.remaining()
