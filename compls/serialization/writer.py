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


class ByteWriter:
    """Growing in-memory buffer the compact format is written to, one byte at a time."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def finalize(self) -> bytes:
        """Get the written bytes, the writer cannot be used after this."""
        result = bytes(self._buf)
        del self._buf
        return result

    def write_byte(self, value: int) -> None:
        if not 0 <= value <= 0xff:
            raise ValueError(f'byte out of range: {value}')
        self._buf.append(value)

    def write_unsigned(self, value: int, *, max_bytes: Optional[int] = None) -> None:
        """Write a non-negative integer as unsigned LEB128."""
        from .encoding.leb128 import encode_leb128
        encode_leb128(self, value, max_bytes=max_bytes)

    def write_signed(self, value: int, *, max_bytes: Optional[int] = None) -> None:
        """Write an integer as a zig-zag mapped unsigned LEB128 value."""
        from .encoding.zigzag import encode_zigzag
        encode_zigzag(self, value, max_bytes=max_bytes)
