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

from abc import ABC, abstractmethod
from typing import final

from typing_extensions import override

# separator written after every field and every collection element, the finalizer removes the ones that end up
# right before a closing bracket
SEPARATOR = ','


class Writer(ABC):
    """Sink for JSON text fragments.

    Encoders only append to a writer, they never look back at what was written. This is what allows every field to be
    written followed by a separator.
    """

    @abstractmethod
    def _write(self, data: str) -> None:
        raise NotImplementedError

    @final
    def write(self, data: str) -> None:
        """Write a text fragment."""
        assert isinstance(data, str)
        if data:
            self._write(data)

    @final
    def write_separator(self) -> None:
        self._write(SEPARATOR)

    @staticmethod
    def build_string_writer() -> 'StringWriter':
        return StringWriter()


class StringWriter(Writer):
    """Simple implementation of Writer to write to memory.

    This implementation defers joining everything until finalize is called, before that every write is stored in a
    list.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def finalize(self) -> str:
        """Get the resulting text, trailing separators are not removed here."""
        return ''.join(self._parts)

    @override
    def _write(self, data: str) -> None:
        self._parts.append(data)
