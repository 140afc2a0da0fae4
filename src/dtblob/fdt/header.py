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
FDT header decoding.
"""

import logging
import struct

from .constants import FDT_HEADER_FORMAT, FDT_HEADER_SIZE, FDT_MAGIC, FDT_SUPPORTED_VERSION
from ..exceptions import MalformedHeaderError
from ..models import Header

logger = logging.getLogger(__name__)


def parse_header(blob: bytes) -> Header:
    """
    Decode the fixed 40-byte header at the start of blob.

    Block offsets are not checked against the buffer length here; a header
    pointing outside the blob fails later when the blocks are decoded.

    Raises:
        MalformedHeaderError: blob is shorter than the header or the magic
            number does not match.
    """
    if len(blob) < FDT_HEADER_SIZE:
        raise MalformedHeaderError(
            f"Blob is {len(blob)} bytes, header needs {FDT_HEADER_SIZE}"
        )

    magic, *fields = struct.unpack_from(FDT_HEADER_FORMAT, blob, 0)
    if magic != FDT_MAGIC:
        raise MalformedHeaderError(f"Bad magic {magic:#010x} (expected {FDT_MAGIC:#010x})")

    header = Header(*fields)
    logger.debug(
        "FDT header: version %d (last compatible %d), total size %d, "
        "struct block %#x+%d, strings block %#x+%d",
        header.version, header.last_comp_version, header.total_size,
        header.off_dt_struct, header.size_dt_struct,
        header.off_dt_strings, header.size_dt_strings,
    )

    if header.total_size != len(blob):
        logger.warning(
            "Header total size %d differs from blob length %d", header.total_size, len(blob)
        )
    if header.last_comp_version > FDT_SUPPORTED_VERSION:
        logger.warning(
            "Blob requires FDT version %d, newest supported is %d",
            header.last_comp_version, FDT_SUPPORTED_VERSION,
        )

    return header
