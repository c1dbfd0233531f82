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
The recursive encoder walks the declared fields of an exported value and writes each of them according to its
classification (see `jsonexport.kinds`), recursing into nested exported values and into collections of them.

The encoder never validates the root value, that's up to the caller (see `jsonexport.serializer`), but it does
validate every nested type it finds. No cycle detection is made, a value that references itself will recurse until
Python's recursion limit is reached.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from jsonexport.compound_encoding.collection import encode_collection
from jsonexport.compound_encoding.object import encode_member, encode_object, encode_tagged_object
from jsonexport.encoding.leaf import encode_leaf
from jsonexport.encoding.null import encode_null
from jsonexport.kinds import FieldKind, classify_type
from jsonexport.metadata.provider import FieldDescriptor, MetadataProvider, TypeMetadata
from jsonexport.utils.typing import pretty_type
from jsonexport.validator import validate_type
from jsonexport.writer import Writer


class ObjectEncoder:
    """Writes exported values as JSON object literals.

    :param provider: where the metadata of every type is looked up
    :param ensure_ascii: escape non-ASCII characters in strings and keys
    :param tag_collection_elements: write each element of a collection of objects as `"TypeName":{...}` instead of
        a plain `{...}`
    """

    def __init__(
        self,
        provider: MetadataProvider,
        *,
        ensure_ascii: bool = False,
        tag_collection_elements: bool = True,
    ) -> None:
        self.provider = provider
        self.ensure_ascii = ensure_ascii
        self.tag_collection_elements = tag_collection_elements

    def encode_object(self, writer: Writer, value: object) -> None:
        """ Write `{...}` for an exported value, using the metadata of the value's own type.
        """
        metadata = self.provider.get_type_metadata(type(value))
        encode_object(writer, lambda w: self.encode_fields(w, value, metadata))

    def encode_fields(self, writer: Writer, value: object, metadata: TypeMetadata) -> None:
        """ Write every field of the value, without the surrounding braces.

        The null handling policy of `metadata` only applies to the fields of this value, nested values use their own.
        """
        include_nulls = metadata.config.null_handling.is_included()
        for field in metadata.fields:
            if field.is_skipped():
                continue

            field_value = self.provider.read_field(value, field)
            if field_value is None:
                if include_nulls:
                    encode_member(writer, field.property_name, encode_null, ensure_ascii=self.ensure_ascii)
                continue

            match classify_type(field.type_):
                case FieldKind.LEAF:
                    self._encode_leaf_field(writer, field, field_value)
                case FieldKind.COLLECTION_OF_LEAF:
                    self._encode_leaf_collection_field(writer, field, field_value)
                case FieldKind.COLLECTION_OF_OBJECT:
                    self._encode_object_collection_field(writer, field, field_value, include_nulls=include_nulls)
                case FieldKind.NESTED_OBJECT:
                    self._encode_nested_field(writer, field, field_value)

    def _encode_leaf_field(self, writer: Writer, field: FieldDescriptor, value: Any) -> None:
        encode_member(
            writer,
            field.property_name,
            lambda w: self._encode_leaf(w, value, field),
            ensure_ascii=self.ensure_ascii,
        )

    def _encode_leaf(self, writer: Writer, value: Any, field: FieldDescriptor) -> None:
        encode_leaf(writer, value, date_pattern=field.date_pattern, ensure_ascii=self.ensure_ascii)

    def _encode_leaf_collection_field(self, writer: Writer, field: FieldDescriptor, values: Any) -> None:
        _check_collection(field, values)
        # null elements are always written, the policy is only about fields
        encode_member(
            writer,
            field.property_name,
            lambda w: encode_collection(w, values, lambda w2, v: self._encode_leaf(w2, v, field)),
            ensure_ascii=self.ensure_ascii,
        )

    def _encode_object_collection_field(
        self,
        writer: Writer,
        field: FieldDescriptor,
        values: Any,
        *,
        include_nulls: bool,
    ) -> None:
        _check_collection(field, values)
        encode_member(
            writer,
            field.property_name,
            lambda w: encode_collection(
                w,
                values,
                self._encode_collection_element,
                skip_element=lambda v: v is None and not include_nulls,
            ),
            ensure_ascii=self.ensure_ascii,
        )

    def _encode_collection_element(self, writer: Writer, value: object) -> None:
        if value is None:
            encode_null(writer)
            return

        element_type = type(value)
        validate_type(element_type, provider=self.provider)
        metadata = self.provider.get_type_metadata(element_type)

        if self.tag_collection_elements:
            # XXX: every element is tagged with its type name as a key, elements of the same type repeat the key
            encode_tagged_object(
                writer,
                element_type.__name__,
                lambda w: self.encode_fields(w, value, metadata),
                ensure_ascii=self.ensure_ascii,
            )
        else:
            encode_object(writer, lambda w: self.encode_fields(w, value, metadata))

    def _encode_nested_field(self, writer: Writer, field: FieldDescriptor, value: object) -> None:
        declared_type = field.type_
        if _is_concrete_class(declared_type):
            validate_type(declared_type, provider=self.provider)
        if type(value) is not declared_type:
            validate_type(type(value), provider=self.provider)

        encode_member(
            writer,
            field.property_name,
            lambda w: self.encode_object(w, value),
            ensure_ascii=self.ensure_ascii,
        )


def _is_concrete_class(type_: Any) -> bool:
    """ Declared types like `Any` or `object` say nothing about the value, only the runtime type can be validated.
    """
    return isinstance(type_, type) and type_ is not object and type_ is not Any


def _check_collection(field: FieldDescriptor, value: Any) -> None:
    if isinstance(value, (str, bytes, bytearray, Mapping)) or not isinstance(value, Iterable):
        raise TypeError(f'field {field.name} expected a collection, got {pretty_type(type(value))}')
