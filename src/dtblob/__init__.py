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
dtblob: Flattened Devicetree blob decoder

Decodes a DTB into an immutable tree of nodes and raw property values, with
path lookup, compatible-string search and typed value decoding on top.
"""

import logging

__version__ = "0.1.0"

from .models import Header, Node, Leaf, Entry, Tree
from .fdt import parse, parse_header, StringTable, as_strings, as_uint32s
from .query import get_property, find_compatible_nodes, walk
from .exceptions import (
    DtbError,
    ParseError,
    MalformedHeaderError,
    DecodeError,
    NotFoundError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Decoding
    'parse',
    'parse_header',
    # Queries
    'get_property',
    'find_compatible_nodes',
    'walk',
    # Value decoders
    'as_strings',
    'as_uint32s',
    # Models
    'Header',
    'StringTable',
    'Node',
    'Leaf',
    'Entry',
    'Tree',
    # Exceptions
    'DtbError',
    'ParseError',
    'MalformedHeaderError',
    'DecodeError',
    'NotFoundError',
]
