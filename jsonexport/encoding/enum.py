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
This module implements encoding of enum members.

Members are written unquoted in their natural textual form: the integer value for `IntEnum` and `IntFlag` members,
the member name for any other enum.

>>> from enum import Enum, IntEnum
>>> class Color(Enum):
...     RED = 'red'
>>> class Side(IntEnum):
...     CT = 2
>>> se = Writer.build_string_writer()
>>> encode_enum(se, Color.RED)
>>> encode_enum(se, Side.CT)
>>> se.finalize()
'RED2'
"""

from enum import Enum

from jsonexport.writer import Writer


def encode_enum(writer: Writer, value: Enum) -> None:
    assert isinstance(value, Enum)
    if isinstance(value, int):
        writer.write(str(int(value)))
    else:
        writer.write(str(value.name))
