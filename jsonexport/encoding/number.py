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
This module implements encoding of numbers: `int`, `float` and `Decimal`.

Numbers are written unquoted in their natural textual form. Non-finite floats are written as `NaN`, `Infinity` and
`-Infinity`, the same convention used by the `json` module, even though they are not part of the JSON standard.

>>> se = Writer.build_string_writer()
>>> encode_int(se, -42)
>>> encode_float(se, 1.5)
>>> encode_float(se, float('inf'))
>>> encode_decimal(se, Decimal('3.14'))
>>> se.finalize()
'-421.5Infinity3.14'
"""

import json
from decimal import Decimal

from jsonexport.writer import Writer


def encode_int(writer: Writer, value: int) -> None:
    assert isinstance(value, int) and not isinstance(value, bool)
    writer.write(str(int(value)))


def encode_float(writer: Writer, value: float) -> None:
    assert isinstance(value, float)
    writer.write(json.dumps(value))


def encode_decimal(writer: Writer, value: Decimal) -> None:
    assert isinstance(value, Decimal)
    writer.write(str(value))
