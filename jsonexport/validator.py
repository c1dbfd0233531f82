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

import inspect
from dataclasses import is_dataclass
from typing import Any

from jsonexport.exception import ConstructionError, EligibilityError
from jsonexport.metadata.provider import MetadataProvider
from jsonexport.utils.typing import pretty_type


def is_fixed_field_aggregate(type_: type) -> bool:
    """ Whether the type is an immutable record, all fields set at construction: frozen dataclasses and named tuples.

    >>> from typing import NamedTuple
    >>> class Point(NamedTuple):
    ...     x: int
    >>> is_fixed_field_aggregate(Point)
    True
    >>> is_fixed_field_aggregate(tuple)
    False
    """
    if is_dataclass(type_):
        params = getattr(type_, '__dataclass_params__', None)
        return bool(params is not None and params.frozen)
    return issubclass(type_, tuple) and hasattr(type_, '_fields')


def has_default_constructor(type_: type) -> bool:
    """ Whether the type can be instantiated without arguments.

    Abstract classes can't be instantiated at all, and every parameter of the constructor must have a default value.
    """
    if inspect.isabstract(type_):
        return False
    if type_.__init__ is object.__init__ and type_.__new__ is object.__new__:
        return True
    try:
        signature = inspect.signature(type_)
    except (TypeError, ValueError):
        # no signature available (some builtins and extension types)
        return False
    for param in signature.parameters.values():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        if param.default is inspect.Parameter.empty:
            return False
    return True


def validate_type(type_: Any, *, provider: MetadataProvider) -> None:
    """ Check whether a type can be encoded, raise the appropriate error if it can't.

    The type must be marked as exported, and must be either default constructible or a fixed-field aggregate.
    """
    if provider.get_config(type_) is None:
        raise EligibilityError(f'The object {pretty_type(type_)} you want to write is not @exported')

    if not is_fixed_field_aggregate(type_) and not has_default_constructor(type_):
        raise ConstructionError(f'There is no constructor with no parameters for class {pretty_type(type_)}')
