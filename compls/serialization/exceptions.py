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


class SerializationError(Exception):
    """Base class for errors raised while reading or writing a byte sequence."""


class OutOfDataError(SerializationError):
    """Raised when there are not enough bytes left to read."""


class TruncatedError(OutOfDataError):
    """Raised when the data ends in the middle of a variable-length value.

    This is a more specific version of `OutOfDataError`: at least one byte of the value was read and it announced that
    more bytes would follow, but the data ended before them.
    """


class TrailingDataError(SerializationError):
    """Raised on `finalize()` when there are unconsumed bytes left."""


class TooLongError(SerializationError):
    """Raised when a value needs more bytes than allowed."""
