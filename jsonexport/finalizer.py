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
Removal of the separators that the encoders leave right before closing brackets.

Every field and every collection element is written followed by a separator, so the assembled text always has a
separator before the closing bracket of any non-empty object or array. A single left-to-right pass removes them:

>>> strip_trailing_separators('{"a":1,"b":[1,2,],"c":{"d":null,},}')
'{"a":1,"b":[1,2],"c":{"d":null}}'

String literals are copied untouched, a text value can contain anything:

>>> strip_trailing_separators('{"a":"x,}","b":"\\",]",}')
'{"a":"x,}","b":"\\",]"}'
"""

from jsonexport.writer import SEPARATOR

CLOSING_BRACKETS = frozenset('}]')


def strip_trailing_separators(text: str) -> str:
    result: list[str] = []
    in_string = False
    escaped = False
    for i, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            result.append(char)
            continue

        if char == '"':
            in_string = True
        elif char == SEPARATOR and i + 1 < len(text) and text[i + 1] in CLOSING_BRACKETS:
            continue
        result.append(char)
    return ''.join(result)
