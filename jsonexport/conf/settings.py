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

import os
from pathlib import Path
from typing import Any, Union

import yaml

from jsonexport.utils import pydantic

# a settings file can inherit from another one, the path is relative to the file that extends
EXTENDS_KEY = 'extends'


class ExportSettings(pydantic.BaseModel):
    # Encoding used for the bytes written by JsonSerializer.write_to_stream and JsonSerializer.write_to_file
    ENCODING: str = 'utf-8'

    # Escape every non-ASCII character in keys and text values as \uXXXX
    ENSURE_ASCII: bool = False

    # Each element of a collection of exported objects is written as `"TypeName":{...}`, setting this to False writes
    # plain object literals instead, which makes the output a valid JSON array
    TAG_COLLECTION_ELEMENTS: bool = True

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'ExportSettings':
        """Takes a filepath to a yaml file and returns the validated ExportSettings object."""
        return cls.model_validate(_settings_dict_from_yaml(Path(filepath)))


def _read_yaml_dict(filepath: Path) -> dict[str, Any]:
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a file")

    with open(filepath, 'r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def _settings_dict_from_yaml(filepath: Path, _seen: frozenset[Path] = frozenset()) -> dict[str, Any]:
    """ Read a settings file, following the chain of 'extends' keys, the extending file's values win.
    """
    resolved = filepath.resolve()
    if resolved in _seen:
        raise ValueError(f"'{filepath}' extends itself")

    contents = _read_yaml_dict(filepath)
    base_file = contents.pop(EXTENDS_KEY, None)
    if not base_file:
        return contents

    base = _settings_dict_from_yaml(filepath.parent / str(base_file), _seen | {resolved})
    base.update(contents)
    return base
