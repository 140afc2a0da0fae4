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
Strings block access.
"""

from dataclasses import dataclass

from .values import decode_text
from ..exceptions import DecodeError
from ..models import Header


@dataclass(frozen=True)
class StringTable:
    """The raw strings block, addressed by byte offset from property tokens."""
    data: bytes

    @classmethod
    def from_blob(cls, blob: bytes, header: Header) -> "StringTable":
        start = header.off_dt_strings
        end = start + header.size_dt_strings
        if end > len(blob):
            raise DecodeError(
                f"Strings block [{start:#x}, {end:#x}) exceeds {len(blob)} byte blob"
            )
        return cls(bytes(blob[start:end]))

    def __len__(self) -> int:
        return len(self.data)

    def name_at(self, offset: int) -> str:
        """
        Return the name starting at offset.

        The name runs up to the next NUL byte, or to the end of the block
        when there is no terminator.
        """
        if offset >= len(self.data):
            raise DecodeError(
                f"Name offset {offset:#x} outside {len(self.data)} byte strings block"
            )
        nul = self.data.find(b"\0", offset)
        if nul < 0:
            nul = len(self.data)
        return decode_text(self.data[offset:nul])
