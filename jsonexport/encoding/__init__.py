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
This module was made to hold the encoders of leaf values.

Leaf in this context means a value with a direct textual representation, one that doesn't need a recursive walk. For
collections and objects the encoder should be in the `compound_encoding` module.

The general organization should be that each submodule `x` deals with a single kind of value and look like this:

    def encode_x(writer: Writer, value: ValueType, ...config params...) -> None:
        ...

The "config params" are optional and specific to each encoder. Submodules should not have to take into consideration
how field types are mapped to encoders, that's done by `jsonexport.kinds` and `jsonexport.encoding.leaf`.
"""
