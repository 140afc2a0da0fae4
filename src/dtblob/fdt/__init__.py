# Copyright 2025 Multikernel Technologies, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Flattened devicetree binary format decoding.

Internal module providing header, strings block and structure block
decoding, plus typed property value decoders.
"""

from .header import parse_header
from .strings import StringTable
from .parser import StructTreeBuilder, parse
from .values import as_strings, as_uint32s

__all__ = [
    'parse',
    'parse_header',
    'StringTable',
    'StructTreeBuilder',
    'as_strings',
    'as_uint32s',
]
