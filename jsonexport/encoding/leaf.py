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

from typing import Any

from jsonexport.encoding.bool import encode_bool
from jsonexport.encoding.enum import encode_enum
from jsonexport.encoding.null import encode_null
from jsonexport.encoding.number import encode_decimal, encode_float, encode_int
from jsonexport.encoding.temporal import encode_temporal
from jsonexport.encoding.text import encode_text
from jsonexport.kinds import LeafKind, get_value_leaf_kind
from jsonexport.utils.typing import pretty_type
from jsonexport.writer import Writer


def encode_leaf(writer: Writer, value: Any, *, date_pattern: str | None = None, ensure_ascii: bool = False) -> None:
    """ Encode any leaf value, `None` included, choosing the encoder by the runtime kind of the value.

    The date pattern is only used for date/time values, it's ignored for any other kind.

    >>> se = Writer.build_string_writer()
    >>> encode_leaf(se, None)
    >>> se.write(' ')
    >>> encode_leaf(se, 'x', date_pattern='%Y')
    >>> se.finalize()
    'null "x"'
    """
    if value is None:
        encode_null(writer)
        return

    leaf_kind = get_value_leaf_kind(value)
    match leaf_kind:
        case LeafKind.BOOL:
            encode_bool(writer, value)
        case LeafKind.ENUM:
            encode_enum(writer, value)
        case LeafKind.INTEGER:
            encode_int(writer, value)
        case LeafKind.FLOAT:
            encode_float(writer, value)
        case LeafKind.DECIMAL:
            encode_decimal(writer, value)
        case LeafKind.TEXT:
            encode_text(writer, value, ensure_ascii=ensure_ascii)
        case LeafKind.DATETIME | LeafKind.DATE | LeafKind.TIME:
            encode_temporal(writer, value, pattern=date_pattern, ensure_ascii=ensure_ascii)
        case None:
            raise TypeError(f'expected a leaf value, got {pretty_type(type(value))}')
