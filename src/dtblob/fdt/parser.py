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
Device tree blob parsing and tree building.
"""

import logging
from typing import Dict, List, Tuple, Union

from .constants import FDT_BEGIN_NODE, FDT_END, FDT_END_NODE, FDT_NOP, FDT_PROP
from .cursor import Cursor
from .header import parse_header
from .strings import StringTable
from .values import decode_text
from ..exceptions import DecodeError
from ..models import Entries, Entry, Header, Leaf, Node, Tree

logger = logging.getLogger(__name__)


class _EntryList:
    """
    Ordered (name, entry) accumulator for one node level.

    Re-inserting an existing name overwrites the value in place: the entry
    keeps the position of its first occurrence.
    """

    def __init__(self):
        self._names: List[str] = []
        self._values: List[Entry] = []
        self._index: Dict[str, int] = {}

    def insert(self, name: str, entry: Entry):
        index = self._index.get(name)
        if index is None:
            self._index[name] = len(self._names)
            self._names.append(name)
            self._values.append(entry)
        else:
            logger.debug("Duplicate entry '%s' replaces earlier value", name)
            self._values[index] = entry

    def extend(self, entries: Entries):
        for name, entry in entries:
            self.insert(name, entry)

    def freeze(self) -> Entries:
        return tuple(zip(self._names, self._values))


class StructTreeBuilder:
    """Recursive-descent decoder for the structure block."""

    def __init__(self, blob: bytes, header: Header, strings: StringTable):
        start = header.off_dt_struct
        end = start + header.size_dt_struct
        if end > len(blob):
            raise DecodeError(
                f"Structure block [{start:#x}, {end:#x}) exceeds {len(blob)} byte blob"
            )
        self.cursor = Cursor(blob, start, end)
        self.strings = strings

    def build(self) -> Entries:
        """
        Decode the whole structure block into the top-level entries.

        Each node level takes one Python stack frame, so nesting deeper than
        the interpreter's recursion limit raises DecodeError.
        """
        start = self.cursor.offset
        try:
            entries, terminator = self._decode_level(depth=0)
        except RecursionError as e:
            raise DecodeError("Nodes nested too deeply to decode", start) from e
        if terminator == FDT_END and self.cursor.remaining():
            logger.debug("Ignoring %d bytes after FDT_END", self.cursor.remaining())
        return entries

    def _decode_level(self, depth: int) -> Tuple[Entries, int]:
        """
        Decode tokens until the level is closed.

        Returns the level's entries and the token that closed it.
        """
        level = _EntryList()
        cursor = self.cursor

        while True:
            token_offset = cursor.offset
            if not cursor.remaining():
                raise DecodeError("Structure block ended without FDT_END", token_offset)
            tag = cursor.read_u32("token")

            if tag == FDT_BEGIN_NODE:
                raw_name = cursor.read_cstring("node name")
                cursor.skip_padding(len(raw_name) + 1)
                name = decode_text(raw_name)
                children, closer = self._decode_level(depth + 1)
                if closer != FDT_END_NODE:
                    raise DecodeError(f"Node '{name}' is not closed by FDT_END_NODE", token_offset)
                if name:
                    level.insert(name, Node(children))
                else:
                    # unnamed root wrapper
                    level.extend(children)

            elif tag == FDT_PROP:
                length = cursor.read_u32("property length")
                nameoff = cursor.read_u32("property name offset")
                value = cursor.read_bytes(length, "property value")
                cursor.skip_padding(length)
                level.insert(self.strings.name_at(nameoff), Leaf(value))

            elif tag == FDT_NOP:
                continue

            elif tag == FDT_END_NODE:
                if depth == 0:
                    logger.debug("FDT_END_NODE closes the top level at %#x", token_offset)
                return level.freeze(), tag

            elif tag == FDT_END:
                # inside a node this surfaces as an unclosed node in the caller
                return level.freeze(), tag

            else:
                raise DecodeError(f"Unknown structure token {tag:#010x}", token_offset)


def parse(blob: Union[bytes, bytearray, memoryview]) -> Tree:
    """
    Parse a device tree blob into a Tree.

    Args:
        blob: the complete DTB contents

    Returns:
        The decoded Tree. It keeps its own copies of everything it needs.

    Raises:
        MalformedHeaderError: the header is too short or has a bad magic.
        DecodeError: the strings or structure block is malformed.
    """
    blob = bytes(blob)
    header = parse_header(blob)
    strings = StringTable.from_blob(blob, header)
    root = StructTreeBuilder(blob, header, strings).build()
    logger.debug("Decoded %d top-level entries", len(root))
    return Tree(header=header, strings=strings, root=root)
