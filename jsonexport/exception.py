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

class JsonExportError(Exception):
    """Base class for exceptions in jsonexport."""
    pass


class EligibilityError(JsonExportError):
    """Raised when a type that is not marked with `@exported` is found while encoding.

    It can be the root value's type, the declared type of a nested field or the runtime type of an element of a
    collection.
    """
    pass


class ConstructionError(JsonExportError):
    """Raised when an exported type has no constructor that can be called without arguments and it is not a
    fixed-field aggregate (frozen dataclass or named tuple).
    """
    pass


class FieldAccessError(JsonExportError):
    """Raised when reading a declared field fails unexpectedly.

    This is an internal fault, a missing attribute is not an error and is read as `None`.
    """

    def __init__(self, type_name: str, field_name: str, message: str):
        self.type_name = type_name
        self.field_name = field_name
        self.message = message
        super().__init__(f'Error reading field {field_name} of {type_name}: {message}')
