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
This module implements encoding of `date`, `time` and `datetime` values as JSON strings.

When a pattern is given it's used with `strftime`, otherwise the ISO 8601 representation is used.

>>> from datetime import date, datetime, time
>>> se = Writer.build_string_writer()
>>> encode_temporal(se, datetime.max, pattern='%d/%m/%Y %I:%M:%S')
>>> se.write(' ')
>>> encode_temporal(se, time.min, pattern='%I:%M:%S')
>>> se.write(' ')
>>> encode_temporal(se, date(2020, 2, 29))
>>> se.finalize()
'"31/12/9999 11:59:59" "12:00:00" "2020-02-29"'
"""

from datetime import date, time

from jsonexport.encoding.text import encode_text
from jsonexport.writer import Writer


def format_temporal(value: date | time, pattern: str | None = None) -> str:
    """ Format a date, time or datetime, `datetime` is a subclass of `date` so it's covered as well.
    """
    assert isinstance(value, (date, time))
    if pattern is None:
        return value.isoformat()
    return value.strftime(pattern)


def encode_temporal(writer: Writer, value: date | time, *, pattern: str | None = None,
                    ensure_ascii: bool = False) -> None:
    encode_text(writer, format_temporal(value, pattern), ensure_ascii=ensure_ascii)
