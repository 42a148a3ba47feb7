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
Compact, lossy encoding of 2D line strings.

>>> ls = parse_linestring('76.9615707 43.2746200, 76.9616699 43.2747688')
>>> compact = ls.try_compact7()
>>> len(bytes(compact))
16
>>> compact.linestring() == ls
True
"""

from compls.container import CompactLineString
from compls.exceptions import (
    CompLsError,
    CorruptData,
    InvalidPrecision,
    LineStringParseError,
    NonFiniteCoordinate,
    PrecisionOverflow,
    TruncatedError,
)
from compls.geometry import Coord, LineString
from compls.quantizer import Precision
from compls.strategies import COMPLS_P2, COMPLS_P7, CompactStrategy, CompLs2, CompLs7
from compls.version import __version__
from compls.wkt import parse_linestring, to_wkt

__all__ = [
    'COMPLS_P2',
    'COMPLS_P7',
    'CompactLineString',
    'CompactStrategy',
    'CompLs2',
    'CompLs7',
    'CompLsError',
    'Coord',
    'CorruptData',
    'InvalidPrecision',
    'LineString',
    'LineStringParseError',
    'NonFiniteCoordinate',
    'Precision',
    'PrecisionOverflow',
    'TruncatedError',
    'parse_linestring',
    'to_wkt',
    '__version__',
]
