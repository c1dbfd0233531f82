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
This module implements encoding of text as a quoted JSON string.

Quotes, backslashes and control characters are escaped. Non-ASCII characters are kept as is unless `ensure_ascii` is
set.

>>> se = Writer.build_string_writer()
>>> encode_text(se, 'foobar')
>>> encode_text(se, 'say "hi"')
>>> encode_text(se, 'π')
>>> encode_text(se, 'π', ensure_ascii=True)
>>> print(se.finalize())
"foobar""say \"hi\"""π""\u03c0"
"""

import json

from jsonexport.writer import Writer


def encode_text(writer: Writer, value: str, *, ensure_ascii: bool = False) -> None:
    """ Encodes a string as a quoted and escaped JSON string.
    """
    assert isinstance(value, str)
    writer.write(json.dumps(value, ensure_ascii=ensure_ascii))
