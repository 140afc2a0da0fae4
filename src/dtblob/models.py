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
Data models for decoded device tree blobs.

A decoded tree is built from two entry kinds: a Node holds an ordered tuple
of (name, entry) pairs, a Leaf holds the raw bytes of a property value.
Everything here is immutable once parse() returns.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Tuple, Union

if TYPE_CHECKING:
    from .fdt.strings import StringTable


@dataclass(frozen=True)
class Header:
    """Fixed FDT header fields (the magic is validated, not stored)."""
    total_size: int
    off_dt_struct: int
    off_dt_strings: int
    off_mem_rsvmap: int
    version: int
    last_comp_version: int
    boot_cpuid_phys: int
    size_dt_strings: int
    size_dt_struct: int


@dataclass(frozen=True)
class Leaf:
    """A property value, kept as undecoded bytes."""
    value: bytes


@dataclass(frozen=True)
class Node:
    """A device tree node: ordered (name, entry) pairs with unique names."""
    entries: Tuple[Tuple[str, "Entry"], ...] = ()

    def __iter__(self) -> Iterator[Tuple[str, "Entry"]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, name: str) -> Optional["Entry"]:
        """Return the entry called name, or None."""
        for entry_name, entry in self.entries:
            if entry_name == name:
                return entry
        return None

    def names(self) -> List[str]:
        return [name for name, _ in self.entries]

    def subnodes(self) -> List[Tuple[str, "Node"]]:
        return [(name, entry) for name, entry in self.entries if isinstance(entry, Node)]

    def properties(self) -> List[Tuple[str, bytes]]:
        return [(name, entry.value) for name, entry in self.entries if isinstance(entry, Leaf)]


Entry = Union[Node, Leaf]
Entries = Tuple[Tuple[str, Entry], ...]


@dataclass(frozen=True)
class Tree:
    """
    Decoded device tree.

    root holds the children of the unnamed top-level node; the wrapper
    node itself is not represented.
    """
    header: Header
    strings: "StringTable"
    root: Entries

    def get_property(self, path: Union[str, Sequence[str]]) -> Union[bytes, Entries]:
        """Shortcut for dtblob.query.get_property(self, path)."""
        from .query import get_property
        return get_property(self, path)

    def find_compatible_nodes(self, target: str) -> List[List[str]]:
        """Shortcut for dtblob.query.find_compatible_nodes(self, target)."""
        from .query import find_compatible_nodes
        return find_compatible_nodes(self, target)
