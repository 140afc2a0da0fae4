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
Exception classes for devicetree blob decoding and queries.
"""

from typing import List, Optional


class DtbError(Exception):
    """Base exception for all dtblob errors."""


class ParseError(DtbError):
    """Raised when decoding a DTB fails."""


class MalformedHeaderError(ParseError):
    """Raised when the blob is too short for the header or the magic is wrong."""


class DecodeError(ParseError):
    """Raised when the structure block, string block or a property value cannot be decoded."""

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f"{message} (at offset {offset:#x})"
        super().__init__(message)
        self.offset = offset


class NotFoundError(DtbError, KeyError):
    """Raised when a path does not resolve to a node or property."""

    def __init__(self, path: List[str]):
        self.path = list(path)
        super().__init__(f"No such node or property: /{'/'.join(self.path)}")

    def __str__(self):
        # KeyError quotes its argument
        return self.args[0]
