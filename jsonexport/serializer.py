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
Entry point of jsonexport: write an exported value as a JSON object literal to a string, a binary stream or a file.

>>> from jsonexport.metadata import exported
>>> @exported
... class Foo:
...     bar: int = 1
>>> write_to_string(Foo())
'{"bar":1}'
"""

from os import PathLike
from typing import BinaryIO, Optional

from structlog import get_logger

from jsonexport.conf.settings import ExportSettings
from jsonexport.encoder import ObjectEncoder
from jsonexport.finalizer import strip_trailing_separators
from jsonexport.metadata.provider import AnnotationMetadataProvider, MetadataProvider
from jsonexport.validator import validate_type
from jsonexport.writer import Writer

logger = get_logger()


class JsonSerializer:
    """Validates the root value, encodes it and writes the result to the requested sink.

    When `settings` is not given the global settings are used, see `jsonexport.conf.get_settings`.
    """

    def __init__(
        self,
        provider: Optional[MetadataProvider] = None,
        settings: Optional[ExportSettings] = None,
    ) -> None:
        if settings is None:
            from jsonexport.conf.get_settings import get_global_settings
            settings = get_global_settings()
        self.log = logger.new()
        self.settings = settings
        self.provider = provider if provider is not None else AnnotationMetadataProvider()
        self.encoder = ObjectEncoder(
            self.provider,
            ensure_ascii=settings.ENSURE_ASCII,
            tag_collection_elements=settings.TAG_COLLECTION_ELEMENTS,
        )

    def write_to_string(self, value: object) -> str:
        """ Encode the value and return the JSON text.
        """
        validate_type(type(value), provider=self.provider)
        self.log.debug('encoding value', type=type(value).__name__)
        writer = Writer.build_string_writer()
        self.encoder.encode_object(writer, value)
        return strip_trailing_separators(writer.finalize())

    def write_to_bytes(self, value: object) -> bytes:
        return self.write_to_string(value).encode(self.settings.ENCODING)

    def write_to_stream(self, value: object, stream: BinaryIO) -> None:
        """ Encode the value and write it to a binary stream, the stream is always closed.

        If encoding fails nothing is written to the stream.
        """
        with stream:
            data = self.write_to_bytes(value)
            stream.write(data)
            stream.flush()
        self.log.debug('json written', type=type(value).__name__, sink='stream', size=len(data))

    def write_to_file(self, value: object, path: str | PathLike[str]) -> None:
        """ Encode the value and write it to `path`, creating or truncating the file.

        The value is encoded before the file is opened, so an encoding error leaves the file untouched.
        """
        data = self.write_to_bytes(value)
        with open(path, 'wb') as fp:
            fp.write(data)
        self.log.debug('json written', type=type(value).__name__, sink=str(path), size=len(data))


def write_to_string(value: object) -> str:
    return JsonSerializer().write_to_string(value)


def write_to_stream(value: object, stream: BinaryIO) -> None:
    JsonSerializer().write_to_stream(value, stream)


def write_to_file(value: object, path: str | PathLike[str]) -> None:
    JsonSerializer().write_to_file(value, path)
