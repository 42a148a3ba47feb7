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

from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from compls.constants import MAX_PRECISION


class CodecSettings(BaseModel):
    """Process-wide codec options, see `compls.conf.get_settings` for how they are loaded.

    Unknown keys are rejected and instances cannot be changed after they are built.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    # Number of digits used by `CompactLineString.try_compact` when no precision is given. The named variants
    # (`try_compact2`, `try_compact7`) ignore it.
    DEFAULT_PRECISION: int = 7

    # Upper bound on the number of points accepted when decoding, `None` means only the buffer size limits it.
    MAX_POINTS: Optional[int] = None

    @field_validator('DEFAULT_PRECISION')
    @classmethod
    def _validate_default_precision(cls, precision: int) -> int:
        if not 0 <= precision <= MAX_PRECISION:
            raise ValueError(f'DEFAULT_PRECISION must be between 0 and {MAX_PRECISION}')
        return precision

    @field_validator('MAX_POINTS')
    @classmethod
    def _validate_max_points(cls, max_points: Optional[int]) -> Optional[int]:
        if max_points is not None and max_points < 0:
            raise ValueError('MAX_POINTS cannot be negative')
        return max_points

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Build the settings from a yaml file, an empty file gives the defaults."""
        return cls.model_validate(_read_yaml_mapping(Path(filepath)))


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ValueError(f"'{path}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{path}' cannot be parsed as a dictionary")
    return contents
