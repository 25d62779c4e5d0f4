"""DVPL encode/decode.

Pure functions over byte buffers; no file-system access happens here.
"""

from __future__ import annotations

from ..logging import get_logger
from .constants import FOOTER_SIZE, LZ4_TYPES, TYPE_LZ4, TYPE_NONE, UINT32_MAX
from .errors import (
    E_CRC32_MISMATCH,
    E_DECODE_SIZE_MISMATCH,
    E_FIELD_RANGE,
    E_LZ4_COMPRESS,
    E_LZ4_DECOMPRESS,
    E_SIZE_MISMATCH,
    E_TYPE_SIZE_MISMATCH,
    E_UNKNOWN_FORMAT,
    BinaryFormatError,
    CompressionError,
    Crc32MismatchError,
    DecodeSizeMismatchError,
    DecompressionError,
    SizeMismatchError,
    TypeSizeMismatchError,
    UnknownFormatError,
)
from .footer import DvplFooter, compute_crc32
from .lz4block import LZ4BlockError, compress_block, decompress_block

__all__ = ["encode_dvpl", "decode_dvpl"]

_LZ4_ERRORS = (LZ4BlockError, ValueError, OverflowError)


def _try_compress(payload: bytes, *, strict: bool) -> bytes | None:
    try:
        return compress_block(payload)
    except _LZ4_ERRORS as e:
        if strict:
            raise CompressionError(
                code=E_LZ4_COMPRESS,
                message=f"LZ4 compression failed: {e}",
                context={"length": len(payload)},
            ) from e
        get_logger().debug(
            "lz4 compression failed (%s), storing %d bytes raw", e, len(payload)
        )
        return None


def encode_dvpl(payload: bytes, *, strict: bool = False) -> bytes:
    """Wrap ``payload`` into a DVPL buffer.

    The payload is LZ4 compressed when that makes it strictly smaller;
    otherwise it is stored verbatim with type 0. With ``strict`` a failing
    compressor raises CompressionError instead of degrading to raw storage.
    """
    payload = bytes(payload)
    if len(payload) > UINT32_MAX:
        raise BinaryFormatError(
            code=E_FIELD_RANGE,
            message="Payload too large for a DVPL footer",
            context={"length": len(payload)},
        )
    compressed = _try_compress(payload, strict=strict)
    if not compressed or len(compressed) >= len(payload):
        footer = DvplFooter(
            original_size=len(payload),
            compressed_size=len(payload),
            crc32=compute_crc32(payload),
            type=TYPE_NONE,
        )
        return payload + footer.pack()
    footer = DvplFooter(
        original_size=len(payload),
        compressed_size=len(compressed),
        crc32=compute_crc32(compressed),
        type=TYPE_LZ4,
    )
    return compressed + footer.pack()


def decode_dvpl(buffer: bytes) -> bytes:
    """Validate a DVPL buffer and return the original payload.

    Checks run in a fixed order (footer, stored size, CRC-32, then the
    type specific decoding) so that a damaged footer is reported as such.
    """
    buffer = bytes(buffer)
    footer = DvplFooter.unpack(buffer)
    target = buffer[: len(buffer) - FOOTER_SIZE]

    if len(target) != footer.compressed_size:
        raise SizeMismatchError(
            code=E_SIZE_MISMATCH,
            message="Stored payload size does not match footer",
            context={"expected": footer.compressed_size, "actual": len(target)},
        )

    crc = compute_crc32(target)
    if crc != footer.crc32:
        raise Crc32MismatchError(
            code=E_CRC32_MISMATCH,
            message="Payload CRC-32 does not match footer",
            context={"expected": f"{footer.crc32:08x}", "actual": f"{crc:08x}"},
        )

    if footer.type == TYPE_NONE:
        if footer.original_size != footer.compressed_size:
            raise TypeSizeMismatchError(
                code=E_TYPE_SIZE_MISMATCH,
                message="Raw payload with differing original/stored sizes",
                context={
                    "original_size": footer.original_size,
                    "compressed_size": footer.compressed_size,
                },
            )
        return target

    if footer.type in LZ4_TYPES:
        try:
            decoded = decompress_block(target, footer.original_size)
        except _LZ4_ERRORS as e:
            raise DecompressionError(
                code=E_LZ4_DECOMPRESS,
                message=f"LZ4 decompression failed: {e}",
                context={"type": footer.type},
            ) from e
        if len(decoded) != footer.original_size:
            raise DecodeSizeMismatchError(
                code=E_DECODE_SIZE_MISMATCH,
                message="Decompressed size does not match footer",
                context={"expected": footer.original_size, "actual": len(decoded)},
            )
        return decoded

    raise UnknownFormatError(
        code=E_UNKNOWN_FORMAT,
        message=f"Unknown DVPL type {footer.type}",
        context={"type": footer.type},
    )
