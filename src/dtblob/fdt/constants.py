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
Flattened devicetree format constants.
"""

# FDT magic number
FDT_MAGIC = 0xD00DFEED

# Header is ten big-endian u32 words
FDT_HEADER_FORMAT = ">10I"
FDT_HEADER_SIZE = 40

# Newest format version this decoder understands
FDT_SUPPORTED_VERSION = 17

# Structure block tokens
FDT_BEGIN_NODE = 0x00000001
FDT_END_NODE = 0x00000002
FDT_PROP = 0x00000003
FDT_NOP = 0x00000004
FDT_END = 0x00000009

FDT_TAG_SIZE = 4
FDT_ALIGNMENT = 4


def align4(size: int) -> int:
    """Round up to the next multiple of 4."""
    return ((size + FDT_ALIGNMENT - 1) // FDT_ALIGNMENT) * FDT_ALIGNMENT
