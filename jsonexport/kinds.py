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
Classification of declared field types into the four shapes the encoder knows how to write.

Each declared type is classified exactly once per field, before anything is written:

- LEAF: a value with a direct textual representation, see `LeafKind`
- COLLECTION_OF_LEAF: a list/set/... whose element type is a leaf kind, or a union of them
- COLLECTION_OF_OBJECT: a list/set/... of anything else (or of unknown element type)
- NESTED_OBJECT: anything else, it must be an exported type

>>> classify_type(int)
<FieldKind.LEAF: 'leaf'>
>>> classify_type(int | str)
<FieldKind.LEAF: 'leaf'>
>>> classify_type(list[str])
<FieldKind.COLLECTION_OF_LEAF: 'collection_of_leaf'>
>>> classify_type(set)
<FieldKind.COLLECTION_OF_OBJECT: 'collection_of_object'>
>>> classify_type(dict[str, int])
<FieldKind.NESTED_OBJECT: 'nested_object'>
"""

from collections import deque
from collections.abc import Collection, MutableSequence, MutableSet, Sequence, Set
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from types import NoneType, UnionType
from typing import Any, Literal, NewType, Union

from jsonexport.utils.typing import get_args, get_origin, is_subclass, strip_annotated, unwrap_optional


class FieldKind(Enum):
    LEAF = 'leaf'
    COLLECTION_OF_LEAF = 'collection_of_leaf'
    COLLECTION_OF_OBJECT = 'collection_of_object'
    NESTED_OBJECT = 'nested_object'


class LeafKind(Enum):
    BOOL = 'bool'
    ENUM = 'enum'
    INTEGER = 'integer'
    FLOAT = 'float'
    DECIMAL = 'decimal'
    TEXT = 'text'
    DATETIME = 'datetime'
    DATE = 'date'
    TIME = 'time'


# XXX: the order is important, the first match wins: bool and IntEnum are int subclasses, datetime is a date subclass
TYPE_TO_LEAF_KIND: tuple[tuple[type, LeafKind], ...] = (
    (bool, LeafKind.BOOL),
    (Enum, LeafKind.ENUM),
    (int, LeafKind.INTEGER),
    (float, LeafKind.FLOAT),
    (Decimal, LeafKind.DECIMAL),
    (str, LeafKind.TEXT),
    (datetime, LeafKind.DATETIME),
    (date, LeafKind.DATE),
    (time, LeafKind.TIME),
)

# origin types that are written as JSON arrays, `tuple` only when used as `tuple[T, ...]`
COLLECTION_TYPES: frozenset[type] = frozenset({
    list,
    set,
    frozenset,
    deque,
    tuple,
    Collection,
    Sequence,
    MutableSequence,
    Set,
    MutableSet,
})



def get_leaf_kind(type_: Any) -> LeafKind | None:
    """ Return the leaf kind of a class, or `None` if it's not a leaf.

    >>> get_leaf_kind(bool)
    <LeafKind.BOOL: 'bool'>
    >>> get_leaf_kind(datetime)
    <LeafKind.DATETIME: 'datetime'>
    >>> get_leaf_kind(bytes) is None
    True
    """
    for leaf_type, leaf_kind in TYPE_TO_LEAF_KIND:
        if is_subclass(type_, leaf_type):
            return leaf_kind
    return None


def get_value_leaf_kind(value: object) -> LeafKind | None:
    """ Same as `get_leaf_kind` but for a runtime value."""
    return get_leaf_kind(type(value))


def _resolve_new_type(type_: Any) -> Any:
    while isinstance(type_, NewType):
        type_ = type_.__supertype__
    return type_


def get_value_types(type_: Any) -> tuple[Any, ...]:
    """ Expand a declared type into the types its non-null values can have.

    `NewType` is replaced by its supertype, a `Literal` by the types of its values and a union by its members:

    >>> get_value_types(int | None)
    (<class 'int'>,)
    >>> get_value_types(Literal['a', 1, None])
    (<class 'str'>, <class 'int'>)
    >>> get_value_types(NewType('UserId', int))
    (<class 'int'>,)
    """
    type_, _ = strip_annotated(type_)
    type_ = _resolve_new_type(type_)
    origin = get_origin(type_)
    if origin is Literal:
        return tuple(type(arg) for arg in get_args(type_) if arg is not None)
    if origin is Union or origin is UnionType:
        return tuple(member for arg in get_args(type_) if arg is not NoneType for member in get_value_types(arg))
    return (type_,)


def is_leaf_type(type_: Any) -> bool:
    """ Whether every non-null value of the declared type is a leaf.

    >>> is_leaf_type(int | str)
    True
    >>> is_leaf_type(int | list[int])
    False
    """
    value_types = get_value_types(type_)
    return bool(value_types) and all(get_leaf_kind(value_type) is not None for value_type in value_types)


def _get_element_type(type_: Any) -> tuple[bool, Any]:
    """ Return `(is_collection, element_type)` for a declared type.
    """
    origin = get_origin(type_) or type_
    if not isinstance(origin, type) or origin not in COLLECTION_TYPES:
        return False, None
    args = get_args(type_)
    if not args:
        return True, Any
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return True, args[0]
        # fixed-length heterogeneous tuples are not collections
        return False, None
    if len(args) != 1:
        return False, None
    return True, args[0]


def classify_type(type_: Any) -> FieldKind:
    """ Classify a declared type into exactly one `FieldKind`.

    `Annotated`, `Optional` and `NewType` wrappers are removed before classifying. A union, or a `Literal`, is a leaf
    when all of its members are leaves, the encoder picks the leaf encoder from the runtime value.
    """
    type_, _ = strip_annotated(type_)
    type_ = _resolve_new_type(unwrap_optional(type_))

    is_collection, element_type = _get_element_type(type_)
    if is_collection:
        if is_leaf_type(element_type):
            return FieldKind.COLLECTION_OF_LEAF
        return FieldKind.COLLECTION_OF_OBJECT

    if is_leaf_type(type_):
        return FieldKind.LEAF

    return FieldKind.NESTED_OBJECT
