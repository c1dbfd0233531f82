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

r"""
Encoding of JSON object literals and of their members.

An object is written as braces around a body, the body encoder is expected to write members with `encode_member`:

Layout: {"name_0":value_0,"name_1":value_1,...}

>>> from jsonexport.encoding.bool import encode_bool
>>> se = Writer.build_string_writer()
>>> encode_object(se, lambda w: encode_member(w, 'bool', lambda w2: encode_bool(w2, False)))
>>> se.finalize()
'{"bool":false,}'

A tagged object is an object literal preceded by a literal key, as in `"Tag":{...}`:

>>> se = Writer.build_string_writer()
>>> encode_tagged_object(se, 'Foo', lambda w: None)
>>> se.finalize()
'"Foo":{}'
"""

from typing import Callable

from jsonexport.encoding.text import encode_text
from jsonexport.writer import Writer

BodyEncoder = Callable[[Writer], None]


def encode_key(writer: Writer, name: str, *, ensure_ascii: bool = False) -> None:
    """ Write a quoted key followed by a colon.
    """
    encode_text(writer, name, ensure_ascii=ensure_ascii)
    writer.write(':')


def encode_member(writer: Writer, name: str, value_encoder: BodyEncoder, *, ensure_ascii: bool = False) -> None:
    """ Write a `"name":value` pair followed by a separator.
    """
    encode_key(writer, name, ensure_ascii=ensure_ascii)
    value_encoder(writer)
    writer.write_separator()


def encode_object(writer: Writer, body_encoder: BodyEncoder) -> None:
    """ Write an object literal, the body encoder writes the members.
    """
    writer.write('{')
    body_encoder(writer)
    writer.write('}')


def encode_tagged_object(writer: Writer, tag: str, body_encoder: BodyEncoder, *, ensure_ascii: bool = False) -> None:
    """ Write `"tag":{...}`, this is how elements of collections of objects are written by default.
    """
    encode_key(writer, tag, ensure_ascii=ensure_ascii)
    encode_object(writer, body_encoder)
