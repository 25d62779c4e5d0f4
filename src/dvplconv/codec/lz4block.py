"""Thin wrapper over the ``lz4.block`` primitive.

DVPL payloads are raw LZ4 blocks without the size prefix ``lz4.block``
writes by default; the decompressed size travels in the footer instead.
"""

from __future__ import annotations

import lz4.block

__all__ = ["LZ4BlockError", "compress_block", "decompress_block"]

LZ4BlockError = lz4.block.LZ4BlockError


def compress_block(data: bytes) -> bytes:
    return lz4.block.compress(data, mode="default", store_size=False)


def decompress_block(data: bytes, expected_size: int) -> bytes:
    # uncompressed_size is an upper bound for lz4, the caller checks the
    # actual length against the footer.
    return lz4.block.decompress(data, uncompressed_size=expected_size)
