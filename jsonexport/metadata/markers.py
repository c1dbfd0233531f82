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
Markers used to declare how a class is exported to JSON.

A class is made eligible for encoding with the `exported` decorator, which also sets its null handling policy. Fields
are configured by attaching markers with `typing.Annotated`:

    @exported(null_handling=NullHandling.INCLUDE)
    @dataclass
    class Person:
        name: Annotated[str | None, PropertyName('full name')] = None
        password: Annotated[str, Ignored()] = ''
        born: Annotated[date | None, DateFormat('%d/%m/%Y')] = None

None of the markers have any logic, they are only read by the metadata provider.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, TypeVar, overload

T = TypeVar('T', bound=type)

# name of the class attribute that holds the ExportedConfig of a class
EXPORTED_ATTR = '__jsonexport_exported__'


class NullHandling(Enum):
    """Sets handling of null (`None`) values of a class's fields."""

    # null fields are left out of the JSON object
    EXCLUDE = 'exclude'

    # null fields are written as `"name":null`
    INCLUDE = 'include'

    def is_included(self) -> bool:
        return self is NullHandling.INCLUDE


@dataclass(frozen=True, slots=True)
class ExportedConfig:
    """Type-level configuration stored on a class by the `exported` decorator."""
    null_handling: NullHandling = NullHandling.EXCLUDE


@dataclass(frozen=True, slots=True)
class Ignored:
    """Field marker, the field is never written."""


@dataclass(frozen=True, slots=True)
class PropertyName:
    """Field marker, the field is written with the given property name instead of its attribute name."""
    value: str


@dataclass(frozen=True, slots=True)
class DateFormat:
    """Field marker for `date`, `time` and `datetime` fields (or collections of them).

    The pattern uses `strftime` directives, the formatted value is written as a JSON string.
    """
    pattern: str


@overload
def exported(cls: T, /) -> T:
    ...


@overload
def exported(*, null_handling: NullHandling = NullHandling.EXCLUDE) -> Callable[[T], T]:
    ...


def exported(cls=None, /, *, null_handling=NullHandling.EXCLUDE):
    """ Mark a class as eligible for encoding, can be used as `@exported` or `@exported(null_handling=...)`.

    The marker is stored in the class's own namespace, subclasses of an exported class are not exported unless they
    are decorated too.
    """
    config = ExportedConfig(null_handling=null_handling)

    def wrap(cls_: T) -> T:
        if not isinstance(cls_, type):
            raise TypeError('@exported can only be applied to classes')
        setattr(cls_, EXPORTED_ATTR, config)
        return cls_

    if cls is None:
        return wrap
    return wrap(cls)


def get_exported_config(cls: type) -> ExportedConfig | None:
    """ Get the configuration set by `exported` on exactly this class, inherited configurations are ignored.
    """
    if not isinstance(cls, type):
        return None
    config = vars(cls).get(EXPORTED_ATTR)
    if isinstance(config, ExportedConfig):
        return config
    return None
