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
Build line strings from text in WKT-like notation, mostly for fixtures and examples.

Both the bare coordinate list and the full WKT form are accepted:

>>> parse_linestring('76.8936157 43.2443809, 76.8936309 43.2442245')
LineString([(76.8936157, 43.2443809), (76.8936309, 43.2442245)])
>>> parse_linestring('LINESTRING (30 10, 10 30)')
LineString([(30.0, 10.0), (10.0, 30.0)])
>>> parse_linestring('LINESTRING EMPTY')
LineString([])
>>> to_wkt(LineString([(30, 10), (10, 30)]))
'LINESTRING (30.0 10.0, 10.0 30.0)'
"""

import re

from compls.exceptions import LineStringParseError
from compls.geometry import Coord, LineString

_WKT_RE = re.compile(r'^\s*LINESTRING\s*(?:(?P<empty>EMPTY)|\((?P<body>.*)\))\s*$', re.IGNORECASE | re.DOTALL)


def parse_linestring(text: str) -> LineString:
    """Parse a comma separated list of "x y" pairs, optionally wrapped in `LINESTRING (...)`."""
    match = _WKT_RE.match(text)
    if match is not None:
        if match.group('empty'):
            return LineString()
        body = match.group('body')
        if not body.strip():
            raise LineStringParseError('empty coordinate list, use LINESTRING EMPTY')
    else:
        body = text
        if not body.strip():
            return LineString()
    return LineString(_parse_coord(part, i) for i, part in enumerate(body.split(',')))


def _parse_coord(text: str, index: int) -> Coord:
    tokens = text.split()
    if len(tokens) != 2:
        raise LineStringParseError(f'point {index}: expected "x y", got {text.strip()!r}')
    try:
        x, y = (float(token) for token in tokens)
    except ValueError as e:
        raise LineStringParseError(f'point {index}: invalid number in {text.strip()!r}') from e
    return Coord(x, y)


def to_wkt(line_string: LineString) -> str:
    if line_string.is_empty():
        return 'LINESTRING EMPTY'
    return 'LINESTRING ({})'.format(', '.join(f'{c.x!r} {c.y!r}' for c in line_string))
