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
This module implements encoding of a boolean value.

>>> se = Writer.build_string_writer()
>>> encode_bool(se, False)
>>> se.finalize()
'false'

>>> se = Writer.build_string_writer()
>>> encode_bool(se, True)
>>> se.finalize()
'true'
"""

from jsonexport.writer import Writer


def encode_bool(writer: Writer, value: bool) -> None:
    """ Encodes a boolean value as a JSON literal.
    """
    assert isinstance(value, bool)
    writer.write('true' if value else 'false')
