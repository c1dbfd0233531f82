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
The metadata provider is the only part of jsonexport that knows how export metadata is declared.

The encoder and the validator only talk to a `MetadataProvider`: they ask for the configuration of a type, for the
descriptors of its fields, and for the value of a field. The default provider, `AnnotationMetadataProvider`, reads the
`exported` decorator and the `typing.Annotated` markers defined in `jsonexport.metadata.markers`.
"""

from abc import ABC, abstractmethod
from dataclasses import InitVar
from typing import Any, ClassVar, NamedTuple, get_type_hints

from structlog import get_logger

from jsonexport.exception import FieldAccessError
from jsonexport.metadata.markers import DateFormat, ExportedConfig, Ignored, PropertyName, get_exported_config
from jsonexport.utils.typing import get_origin, strip_annotated, unwrap_optional

logger = get_logger()


class FieldDescriptor(NamedTuple):
    """Describes a single declared field of an exported type."""

    # name as declared in the class body
    name: str

    # name used with getattr, differs from name for private (name-mangled) fields
    attr_name: str

    # declared type, with Annotated and Optional already removed
    type_: Any

    # name used as the JSON property, PropertyName or the declared name
    property_name: str

    ignored: bool = False
    date_pattern: str | None = None

    # ClassVar fields
    is_static: bool = False

    # InitVar pseudo-fields and dunder names
    is_synthetic: bool = False

    def is_skipped(self) -> bool:
        """ Whether this field is never written, regardless of the null handling policy.
        """
        return self.is_synthetic or self.is_static or self.ignored


class TypeMetadata(NamedTuple):
    """Everything the encoder needs to know about an exported type."""
    type_: type
    config: ExportedConfig
    fields: tuple[FieldDescriptor, ...]


class MetadataProvider(ABC):
    """Read-only lookups of export metadata, keyed by type and field."""

    @abstractmethod
    def get_config(self, type_: Any) -> ExportedConfig | None:
        """ Return the type-level configuration, or `None` if the type is not marked as exported.
        """
        raise NotImplementedError

    @abstractmethod
    def get_fields(self, type_: type) -> tuple[FieldDescriptor, ...]:
        """ Return the descriptors of all fields declared in the type (and its bases), in declaration order.

        Static and synthetic fields are included, with the respective flags set, it's the encoder that skips them.
        """
        raise NotImplementedError

    def read_field(self, value: object, field: FieldDescriptor) -> Any:
        """ Read a field's value regardless of its visibility, a missing attribute reads as `None`.
        """
        try:
            return getattr(value, field.attr_name)
        except AttributeError:
            return None
        except Exception as e:
            raise FieldAccessError(type(value).__name__, field.name, repr(e)) from e

    def get_type_metadata(self, type_: type) -> TypeMetadata:
        """ Shortcut to get both the config and the fields of an exported type.
        """
        config = self.get_config(type_)
        assert config is not None, 'type must be validated first'
        return TypeMetadata(type_, config, self.get_fields(type_))


class AnnotationMetadataProvider(MetadataProvider):
    """Provider that reads `@exported` and `Annotated[T, marker]` declarations."""

    def __init__(self) -> None:
        self.log = logger.new()
        self._fields_cache: dict[type, tuple[FieldDescriptor, ...]] = {}

    def get_config(self, type_: Any) -> ExportedConfig | None:
        return get_exported_config(type_)

    def get_fields(self, type_: type) -> tuple[FieldDescriptor, ...]:
        # annotations are resolved once per type
        fields = self._fields_cache.get(type_)
        if fields is None:
            hints = get_type_hints(type_, include_extras=True)
            fields = tuple(self._make_descriptor(type_, name, hint) for name, hint in hints.items())
            self.log.debug('fields collected', type=type_.__name__, fields=[f.name for f in fields])
            self._fields_cache[type_] = fields
        return fields

    def _make_descriptor(self, type_: type, attr_name: str, hint: Any) -> FieldDescriptor:
        name = _unmangle(type_, attr_name)

        if get_origin(hint) is ClassVar or hint is ClassVar:
            return FieldDescriptor(name, attr_name, hint, name, is_static=True)

        if isinstance(hint, InitVar) or hint is InitVar or _is_dunder(name):
            return FieldDescriptor(name, attr_name, hint, name, is_synthetic=True)

        # both Annotated[T | None, ...] and Annotated[T, ...] | None are accepted
        inner, extras = strip_annotated(hint)
        inner, more_extras = strip_annotated(unwrap_optional(inner))
        markers = extras + more_extras

        property_name = name
        ignored = False
        date_pattern: str | None = None
        for marker in markers:
            match marker:
                case Ignored():
                    ignored = True
                case PropertyName(value=value):
                    property_name = value
                case DateFormat(pattern=pattern):
                    date_pattern = pattern
                case _:
                    # markers from other libraries are not our business
                    pass

        return FieldDescriptor(
            name=name,
            attr_name=attr_name,
            type_=inner,
            property_name=property_name,
            ignored=ignored,
            date_pattern=date_pattern,
        )


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith('__') and name.endswith('__')


def _unmangle(type_: type, attr_name: str) -> str:
    """ Recover the declared name of a private field, `_Foo__bar` declared in `Foo` is `__bar`.

    >>> class Foo:
    ...     __bar: int
    >>> _unmangle(Foo, '_Foo__bar')
    '__bar'
    >>> _unmangle(Foo, 'baz')
    'baz'
    """
    for klass in type_.__mro__:
        prefix = '_' + klass.__name__.lstrip('_') + '__'
        if attr_name.startswith(prefix) and len(attr_name) > len(prefix):
            return attr_name[len(prefix) - 2:]
    return attr_name
