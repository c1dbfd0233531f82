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
A collection is any iterable value, it's written as a JSON array in iteration order.

Layout: [value_0,value_1,...value_N,]

>>> from jsonexport.encoding.leaf import encode_leaf
>>> se = Writer.build_string_writer()
>>> encode_collection(se, ['foo', None, 'bar'], encode_leaf)
>>> se.finalize()
'["foo",null,"bar",]'

The trailing separator is removed by the finalizer. An empty collection has no separator at all:

>>> se = Writer.build_string_writer()
>>> encode_collection(se, [], encode_leaf)
>>> se.finalize()
'[]'
"""

from collections.abc import Iterable
from typing import Callable, TypeVar

from jsonexport.writer import Writer

from . import Encoder

T = TypeVar('T')


def encode_collection(
    writer: Writer,
    values: Iterable[T],
    encoder: Encoder[T],
    *,
    skip_element: Callable[[T], bool] | None = None,
) -> None:
    writer.write('[')
    for value in values:
        if skip_element is not None and skip_element(value):
            continue
        encoder(writer, value)
        writer.write_separator()
    writer.write(']')
