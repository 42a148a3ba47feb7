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
Fixed-precision strategies that let a serialization framework store a line string field compactly.

The strategies themselves are framework-agnostic, `serialize`/`deserialize` pairs over bytes. `CompLs7` and `CompLs2`
register them with pydantic as annotated types:

    class Track(BaseModel):
        path: CompLs7

A `CompLs7` field accepts a `LineString`, the compact bytes or their hex string. It is dumped as bytes in python mode
and as a hex string in JSON mode.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import PlainSerializer, PlainValidator, SerializationInfo
from typing_extensions import Buffer

from compls.container import CompactLineString
from compls.geometry import LineString
from compls.quantizer import Precision


@dataclass(frozen=True)
class CompactStrategy:
    """Encodes line strings at one fixed precision."""

    precision: Precision

    def serialize(self, line_string: LineString) -> bytes:
        return bytes(CompactLineString.try_compact(line_string, self.precision))

    def deserialize(self, data: Buffer) -> LineString:
        compact = CompactLineString.from_bytes(data)
        if compact.precision != self.precision:
            raise ValueError(f'expected precision {int(self.precision)}, got {compact.precision}')
        return compact.linestring()

    def validate(self, value: Any) -> LineString:
        if isinstance(value, LineString):
            return value
        if isinstance(value, str):
            return self.deserialize(bytes.fromhex(value))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.deserialize(value)
        raise ValueError(f'expected LineString, bytes or hex str, got {type(value).__name__}')

    def dump(self, value: LineString, info: SerializationInfo) -> bytes | str:
        data = self.serialize(value)
        if info.mode_is_json():
            return data.hex()
        return data


# lat/lon in degrees
COMPLS_P7 = CompactStrategy(Precision.SEVEN)

# metric CRS
COMPLS_P2 = CompactStrategy(Precision.TWO)


if TYPE_CHECKING:
    CompLs7 = LineString
    CompLs2 = LineString
else:
    # XXX: Any as the base type, pydantic has no schema for LineString and PlainValidator replaces validation anyway
    CompLs7 = Annotated[
        Any,
        PlainValidator(COMPLS_P7.validate),
        PlainSerializer(COMPLS_P7.dump, return_type=Any),
    ]
    CompLs2 = Annotated[
        Any,
        PlainValidator(COMPLS_P2.validate),
        PlainSerializer(COMPLS_P2.dump, return_type=Any),
    ]
