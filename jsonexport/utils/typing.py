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

from types import NoneType, UnionType
from typing import Annotated, Any, Union, get_args as _get_args, get_origin as _get_origin


def get_origin(type_: Any) -> Any:
    """Same as `typing.get_origin`, kept here so every typing helper is imported from a single place."""
    return _get_origin(type_)


def get_args(type_: Any) -> tuple[Any, ...]:
    """Same as `typing.get_args`, kept here so every typing helper is imported from a single place."""
    return _get_args(type_)


def is_subclass(cls: Any, class_or_tuple: type | tuple[type, ...]) -> bool:
    """ Like `issubclass` but returns `False` instead of raising when `cls` is not a class.

    >>> is_subclass(bool, int)
    True
    >>> is_subclass(list[int], list)
    False
    >>> is_subclass('foo', str)
    False
    """
    if not isinstance(cls, type) or get_origin(cls) is not None:
        return False
    return issubclass(cls, class_or_tuple)


def strip_annotated(type_: Any) -> tuple[Any, tuple[Any, ...]]:
    """ Split an `Annotated[T, x, y]` into `(T, (x, y))`, other types are returned with no extras.

    >>> strip_annotated(Annotated[int, 'foo'])
    (<class 'int'>, ('foo',))
    >>> strip_annotated(str)
    (<class 'str'>, ())
    """
    if get_origin(type_) is Annotated:
        inner, *extras = get_args(type_)
        return inner, tuple(extras)
    return type_, ()


def unwrap_optional(type_: Any) -> Any:
    """ Remove `None` from an `Optional[T]` or `T | None`, any other type is returned as is.

    Unions with more than one non-None member are not unwrapped.

    >>> unwrap_optional(int | None)
    <class 'int'>
    >>> unwrap_optional(int)
    <class 'int'>
    """
    origin = get_origin(type_)
    if origin is Union or origin is UnionType:
        args = [arg for arg in get_args(type_) if arg is not NoneType]
        if len(args) == 1:
            return args[0]
    return type_


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    elif hasattr(type_, '__name__'):
        return type_.__name__
    else:
        return repr(type_)
