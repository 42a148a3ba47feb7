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

# These values are part of the byte format, changing any of them makes existing encodings unreadable or lets this
# version write encodings that older readers reject.

# Highest number of decimal digits a coordinate can be stored with. The precision is stored in a single header byte,
# but 10**9 already takes a planet-sized metric coordinate (4e7 m) to 4e16, past MAX_QUANTIZED_VALUE.
MAX_PRECISION = 9

# Largest magnitude of a quantized coordinate: 2**53 - 1 is the largest integer that a double holds exactly, so any
# value in range can be scaled, rounded and scaled back without leaving the integer grid.
MAX_QUANTIZED_VALUE = 2**53 - 1

# zigzag(±MAX_QUANTIZED_VALUE) fits in 54 bits, which is 8 groups of 7 bits. A delta is the difference of two
# quantized values and can be twice as large, 55 bits, still 8 groups.
MAX_DELTA_VARINT_BYTES = 8

# The point count is an unsigned LEB128 value, 10 bytes cover any 64-bit count.
MAX_COUNT_VARINT_BYTES = 10
