from .codec import decode_dvpl, encode_dvpl
from .constants import (
    DVPL_SUFFIX,
    FOOTER_MAGIC,
    FOOTER_SIZE,
    TYPE_LZ4,
    TYPE_LZ4_LEGACY,
    TYPE_NONE,
)
from .footer import DvplFooter, compute_crc32
from .inspector import inspect_dvpl, inspect_dvpl_file

__all__ = [
    "encode_dvpl",
    "decode_dvpl",
    "inspect_dvpl",
    "inspect_dvpl_file",
    "DvplFooter",
    "compute_crc32",
    "DVPL_SUFFIX",
    "FOOTER_MAGIC",
    "FOOTER_SIZE",
    "TYPE_NONE",
    "TYPE_LZ4_LEGACY",
    "TYPE_LZ4",
]
