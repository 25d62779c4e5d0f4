"""Binary layout constants for the DVPL container."""

from __future__ import annotations

FOOTER_MAGIC = b"DVPL"
FOOTER_FORMAT = "<IIII4s"
FOOTER_SIZE = 20

TYPE_NONE = 0
TYPE_LZ4_LEGACY = 1
TYPE_LZ4 = 2
LZ4_TYPES = (TYPE_LZ4_LEGACY, TYPE_LZ4)

TYPE_NAMES = {
    TYPE_NONE: "none",
    TYPE_LZ4_LEGACY: "lz4-legacy",
    TYPE_LZ4: "lz4",
}

UINT32_MAX = 0xFFFFFFFF

DVPL_SUFFIX = ".dvpl"

__all__ = [
    "FOOTER_MAGIC",
    "FOOTER_FORMAT",
    "FOOTER_SIZE",
    "TYPE_NONE",
    "TYPE_LZ4_LEGACY",
    "TYPE_LZ4",
    "LZ4_TYPES",
    "TYPE_NAMES",
    "UINT32_MAX",
    "DVPL_SUFFIX",
]
