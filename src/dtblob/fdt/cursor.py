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
Bounds-checked read cursor over a region of a byte buffer.
"""

import struct
from typing import Optional

from .constants import align4
from ..exceptions import DecodeError

_U32 = struct.Struct(">I")


class Cursor:
    """
    Sequential reader over data[start:end].

    The cursor never slices the underlying buffer to advance; it only moves
    pos. Any read that would cross end raises DecodeError.
    """

    def __init__(self, data: bytes, start: int = 0, end: Optional[int] = None):
        if end is None:
            end = len(data)
        if start < 0 or start > end or end > len(data):
            raise DecodeError(
                f"Region [{start:#x}, {end:#x}) lies outside a {len(data)} byte buffer"
            )
        self.data = data
        self.start = start
        self.end = end
        self.pos = start

    @property
    def offset(self) -> int:
        """Position relative to the start of the region."""
        return self.pos - self.start

    def remaining(self) -> int:
        return self.end - self.pos

    def _require(self, count: int, what: str):
        if count > self.remaining():
            raise DecodeError(
                f"Truncated {what}: need {count} bytes, {self.remaining()} left",
                self.offset,
            )

    def read_u32(self, what: str = "u32") -> int:
        self._require(4, what)
        (value,) = _U32.unpack_from(self.data, self.pos)
        self.pos += 4
        return value

    def read_bytes(self, count: int, what: str = "data") -> bytes:
        self._require(count, what)
        value = self.data[self.pos:self.pos + count]
        self.pos += count
        return value

    def read_cstring(self, what: str = "string") -> bytes:
        """Read up to a NUL byte; the NUL is consumed but not returned."""
        nul = self.data.find(b"\0", self.pos, self.end)
        if nul < 0:
            raise DecodeError(f"Unterminated {what}", self.offset)
        value = self.data[self.pos:nul]
        self.pos = nul + 1
        return value

    def skip(self, count: int, what: str = "padding"):
        self._require(count, what)
        self.pos += count

    def skip_padding(self, length: int):
        """Skip the filler after a field of length bytes, whatever its content."""
        self.skip(align4(length) - length)
