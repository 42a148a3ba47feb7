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

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, NamedTuple, Optional, overload

if TYPE_CHECKING:
    from compls.container import CompactLineString


class Coord(NamedTuple):
    """A point in some planar coordinate reference system, degrees or metres."""
    x: float
    y: float


@dataclass(frozen=True, slots=True, repr=False)
class LineString:
    """Ordered, immutable sequence of coordinates.

    Any iterable of `(x, y)` pairs is accepted, each pair is converted to a `Coord` of floats:

    >>> ls = LineString([(76.9615707, 43.27462), (76.9616699, 43.2747688)])
    >>> len(ls)
    2
    >>> ls[1]
    Coord(x=76.9616699, y=43.2747688)
    """
    coords: tuple[Coord, ...] = ()

    def __init__(self, coords: Iterable[tuple[float, float]] = ()) -> None:
        object.__setattr__(self, 'coords', tuple(Coord(float(x), float(y)) for x, y in coords))

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.coords)

    @overload
    def __getitem__(self, index: int) -> Coord:
        ...

    @overload
    def __getitem__(self, index: slice) -> LineString:
        ...

    def __getitem__(self, index: int | slice) -> Coord | LineString:
        if isinstance(index, slice):
            return LineString(self.coords[index])
        return self.coords[index]

    def __repr__(self) -> str:
        return f'LineString({[tuple(c) for c in self.coords]!r})'

    def is_empty(self) -> bool:
        return not self.coords

    @classmethod
    def from_wkt(cls, text: str) -> LineString:
        from compls.wkt import parse_linestring
        return parse_linestring(text)

    def to_wkt(self) -> str:
        from compls.wkt import to_wkt
        return to_wkt(self)

    def try_compact(self, precision: Optional[int] = None) -> CompactLineString:
        """Encode this line string, see `CompactLineString.try_compact`."""
        from compls.container import CompactLineString
        return CompactLineString.try_compact(self, precision)

    def try_compact2(self) -> CompactLineString:
        from compls.container import CompactLineString
        return CompactLineString.try_compact2(self)

    def try_compact7(self) -> CompactLineString:
        from compls.container import CompactLineString
        return CompactLineString.try_compact7(self)
