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
Pytest configuration and fixtures for dtblob tests.
"""

import struct
import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from dtblob import parse
from dtblob.fdt.constants import (
    FDT_BEGIN_NODE, FDT_END, FDT_END_NODE, FDT_MAGIC, FDT_NOP, FDT_PROP, align4
)

HEADER_SIZE = 40
RSVMAP_SIZE = 16


def _raw_name(name):
    return name if isinstance(name, bytes) else name.encode("ascii")


def u32(value):
    return struct.pack(">I", value)


def u32s(*values):
    return struct.pack(">" + "I" * len(values), *values)


class BlobBuilder:
    """
    Token-level DTB writer for tests.

    Unlike libfdt it lets tests emit duplicate names, odd padding bytes and
    broken token streams.
    """

    def __init__(self, pad=b"\0"):
        self.pad = pad
        self.struct = bytearray()
        self.strings = bytearray()
        self._offsets = {}

    def _padding(self, length):
        return self.pad * (align4(length) - length)

    def string_offset(self, name):
        if name not in self._offsets:
            self._offsets[name] = len(self.strings)
            self.strings += _raw_name(name) + b"\0"
        return self._offsets[name]

    def begin_node(self, name):
        raw = _raw_name(name) + b"\0"
        self.struct += u32(FDT_BEGIN_NODE) + raw + self._padding(len(raw))
        return self

    def end_node(self):
        self.struct += u32(FDT_END_NODE)
        return self

    def prop(self, name, value):
        self.struct += u32(FDT_PROP) + u32(len(value)) + u32(self.string_offset(name))
        self.struct += value + self._padding(len(value))
        return self

    def prop_string(self, name, *strings):
        return self.prop(name, b"".join(s.encode() + b"\0" for s in strings))

    def prop_u32(self, name, *values):
        return self.prop(name, u32s(*values))

    def nop(self):
        self.struct += u32(FDT_NOP)
        return self

    def end(self):
        self.struct += u32(FDT_END)
        return self

    def raw(self, data):
        self.struct += data
        return self

    def build(self, **overrides):
        """Assemble header, empty reservation map, structure and strings blocks."""
        off_dt_struct = HEADER_SIZE + RSVMAP_SIZE
        off_dt_strings = off_dt_struct + len(self.struct)
        fields = dict(
            magic=FDT_MAGIC,
            total_size=off_dt_strings + len(self.strings),
            off_dt_struct=off_dt_struct,
            off_dt_strings=off_dt_strings,
            off_mem_rsvmap=HEADER_SIZE,
            version=17,
            last_comp_version=16,
            boot_cpuid_phys=0,
            size_dt_strings=len(self.strings),
            size_dt_struct=len(self.struct),
        )
        fields.update(overrides)
        header = u32s(*fields.values())
        return header + bytes(RSVMAP_SIZE) + bytes(self.struct) + bytes(self.strings)


def build_manifest(pad=b"\0"):
    """
    Build the reference manifest:

        / {
            node1 {
                a-string-property = "A string";
                child-node1 {
                    first-child-property;
                    string_list = "first string", "second string";
                };
            };
            node2 {
                child-node1 {
                    compatible = "vendor,test", "test_device";
                    uint32-property = <1 2 3 4>;
                };
            };
        };
    """
    b = BlobBuilder(pad=pad)
    b.begin_node("")
    b.begin_node("node1")
    b.prop_string("a-string-property", "A string")
    b.begin_node("child-node1")
    b.prop("first-child-property", b"")
    b.prop_string("string_list", "first string", "second string")
    b.end_node()
    b.end_node()
    b.begin_node("node2")
    b.begin_node("child-node1")
    b.prop_string("compatible", "vendor,test", "test_device")
    b.prop_u32("uint32-property", 1, 2, 3, 4)
    b.end_node()
    b.end_node()
    b.end_node()
    b.end()
    return b.build()


@pytest.fixture
def blob_builder():
    """Fresh token-level blob builder."""
    return BlobBuilder()


@pytest.fixture
def manifest_blob():
    """Reference manifest DTB with zero padding."""
    return build_manifest()


@pytest.fixture
def manifest_tree(manifest_blob):
    """Decoded reference manifest."""
    return parse(manifest_blob)
