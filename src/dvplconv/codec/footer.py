"""DVPL footer (de)serialization.

The footer is the fixed 20 byte trailer of every DVPL file::

    offset  size  field
    0       4     original_size    (uint32, little-endian)
    4       4     compressed_size  (uint32)
    8       4     crc32            (uint32, IEEE, over the stored payload)
    12      4     type             (uint32, 0 raw / 1,2 LZ4)
    16      4     magic            (b"DVPL")
"""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass

from .constants import (
    FOOTER_FORMAT,
    FOOTER_MAGIC,
    FOOTER_SIZE,
    TYPE_NAMES,
    UINT32_MAX,
)
from .errors import E_FIELD_RANGE, BinaryFormatError, invalid_footer

__all__ = ["DvplFooter", "compute_crc32"]


def compute_crc32(data: bytes) -> int:
    return zlib.crc32(data) & 0xFFFFFFFF


@dataclass(slots=True, frozen=True)
class DvplFooter:
    original_size: int
    compressed_size: int
    crc32: int
    type: int

    @property
    def type_name(self) -> str:
        return TYPE_NAMES.get(self.type, f"unknown({self.type})")

    def pack(self) -> bytes:
        for name in ("original_size", "compressed_size", "crc32", "type"):
            value = getattr(self, name)
            if not 0 <= value <= UINT32_MAX:
                raise BinaryFormatError(
                    code=E_FIELD_RANGE,
                    message=f"Footer field {name} out of uint32 range",
                    context={"field": name, "value": value},
                )
        return struct.pack(
            FOOTER_FORMAT,
            self.original_size,
            self.compressed_size,
            self.crc32,
            self.type,
            FOOTER_MAGIC,
        )

    @classmethod
    def unpack(cls, buffer: bytes) -> "DvplFooter":
        """Parse the footer trailing ``buffer``.

        Raises InvalidFooterError when the buffer is too short to carry a
        footer or when the trailing magic is not ``DVPL``.
        """
        if len(buffer) < FOOTER_SIZE:
            raise invalid_footer(
                f"Buffer too small for footer: {len(buffer)}<{FOOTER_SIZE}",
                {"length": len(buffer)},
            )
        original_size, compressed_size, crc32, type_, magic = (
            struct.unpack_from(FOOTER_FORMAT, buffer, len(buffer) - FOOTER_SIZE)
        )
        if magic != FOOTER_MAGIC:
            raise invalid_footer(
                "Footer magic mismatch", {"magic": magic.hex()}
            )
        return cls(original_size, compressed_size, crc32, type_)

    def to_dict(self) -> dict[str, int | str]:
        return {
            "original_size": self.original_size,
            "compressed_size": self.compressed_size,
            "crc32": f"{self.crc32:08x}",
            "type": self.type,
            "type_name": self.type_name,
        }
