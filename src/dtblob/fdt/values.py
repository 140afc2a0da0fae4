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
Typed decoding of raw property values.

Values are decoded on demand. Callers are expected to know from the
binding which type a property holds; a value of the wrong shape raises
DecodeError instead of being coerced.

Text is never rejected for its content: bytes that are not valid UTF-8
map to lone surrogates, so text.encode("utf-8", "surrogateescape")
always gives back the original bytes.
"""

import struct
from typing import List

from ..exceptions import DecodeError


def decode_text(raw: bytes) -> str:
    """Decode names and string values losslessly."""
    return raw.decode("utf-8", errors="surrogateescape")


def as_uint32s(data: bytes) -> List[int]:
    """Decode a property value as a list of big-endian u32 cells."""
    if len(data) % 4:
        raise DecodeError(f"Value of {len(data)} bytes is not a whole number of u32 cells")
    return list(struct.unpack(f">{len(data) // 4}I", data))


def as_strings(data: bytes) -> List[str]:
    """
    Decode a property value as a list of NUL-terminated strings.

    A trailing run without a terminator is returned as the last string.
    """
    strings = []
    pos = 0
    while pos < len(data):
        nul = data.find(b"\0", pos)
        if nul < 0:
            nul = len(data)
        strings.append(decode_text(data[pos:nul]))
        pos = nul + 1
    return strings
