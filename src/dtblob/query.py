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
Read-only queries over a decoded Tree.
"""

from typing import Iterator, List, Sequence, Tuple, Union

from .exceptions import NotFoundError
from .fdt.values import as_strings
from .models import Entries, Entry, Leaf, Node, Tree


def split_path(path: Union[str, Sequence[str]]) -> List[str]:
    """Normalize a path to a list of segments; '/' strings drop empty segments."""
    if isinstance(path, str):
        return [segment for segment in path.split("/") if segment]
    return list(path)


def get_property(tree: Tree, path: Union[str, Sequence[str]]) -> Union[bytes, Entries]:
    """
    Look up a node or property by path.

    A path is either a list of segments or a '/'-separated string, so
    ["node2", "child-node1", "uint32-property"] and
    "node2/child-node1/uint32-property" are equivalent.

    Returns:
        The raw bytes of a property, or the ordered (name, entry) pairs of a
        node. An empty path returns the top-level entries.

    Raises:
        NotFoundError: a segment does not exist, or the path continues past
            a property.
    """
    segments = split_path(path)
    current: Entry = Node(tree.root)

    for depth, segment in enumerate(segments):
        if not isinstance(current, Node):
            raise NotFoundError(segments[:depth + 1])
        found = current.get(segment)
        if found is None:
            raise NotFoundError(segments[:depth + 1])
        current = found

    if isinstance(current, Leaf):
        return current.value
    return current.entries


def walk(entries: Entries, prefix: Sequence[str] = ()) -> Iterator[Tuple[List[str], str, Entry]]:
    """
    Depth-first traversal yielding (path to owning node, name, entry).

    Nodes are yielded before their children. Traversal keeps its own stack,
    so nesting depth is not limited by the interpreter's recursion limit.
    """
    stack = [(list(prefix), iter(entries))]
    while stack:
        path, pending = stack[-1]
        for name, entry in pending:
            yield list(path), name, entry
            if isinstance(entry, Node):
                stack.append(([*path, name], iter(entry.entries)))
                break
        else:
            stack.pop()


def find_compatible_nodes(tree: Tree, target: str) -> List[List[str]]:
    """
    Find the paths of all nodes whose 'compatible' list contains target.

    Paths are returned without duplicates, in the order they are found.
    """
    matches = {}
    for prefix, name, entry in walk(tree.root):
        if name == "compatible" and isinstance(entry, Leaf):
            if target in as_strings(entry.value):
                matches.setdefault(tuple(prefix), None)
    return [list(path) for path in matches]
