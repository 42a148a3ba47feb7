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

from typing_extensions import Buffer

from .exceptions import OutOfDataError, TrailingDataError


class ByteReader:
    """Cursor over an in-memory byte sequence.

    Nothing is copied, reads only advance an integer position over a read-only memoryview.
    """

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data).cast('B')
        self._pos = 0

    def finalize(self) -> None:
        """Check that every byte was consumed, the reader cannot be used after this."""
        if not self.is_empty():
            raise TrailingDataError(f'trailing data: {self.remaining()} bytes left')
        del self._view

    def is_empty(self) -> bool:
        return self._pos >= len(self._view)

    def remaining(self) -> int:
        return len(self._view) - self._pos

    def read_byte(self) -> int:
        if self.is_empty():
            raise OutOfDataError('not enough bytes to read')
        b = self._view[self._pos]
        self._pos += 1
        return b

    def read_unsigned(self, *, max_bytes: Optional[int] = None) -> int:
        from .encoding.leb128 import decode_leb128
        return decode_leb128(self, max_bytes=max_bytes)

    def read_signed(self, *, max_bytes: Optional[int] = None) -> int:
        from .encoding.zigzag import decode_zigzag
        return decode_zigzag(self, max_bytes=max_bytes)
