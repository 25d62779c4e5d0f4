"""DVPL footer inspection.

Public functions:
- inspect_dvpl(buffer) -> dict
- inspect_dvpl_file(path) -> dict

Inspection parses the footer and checks stored size and CRC-32 but never
decompresses the payload; use decode_dvpl for a full verification.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from .constants import FOOTER_SIZE, LZ4_TYPES, TYPE_NONE
from .footer import DvplFooter, compute_crc32

__all__ = ["inspect_dvpl", "inspect_dvpl_file"]


def inspect_dvpl(buffer: bytes) -> Dict[str, Any]:
    footer = DvplFooter.unpack(buffer)
    payload = buffer[: len(buffer) - FOOTER_SIZE]
    crc_calc = compute_crc32(payload)
    type_ok = footer.type in LZ4_TYPES or (
        footer.type == TYPE_NONE
        and footer.original_size == footer.compressed_size
    )
    ratio = (
        footer.original_size / footer.compressed_size
        if footer.compressed_size
        else 1.0
    )
    return {
        "file_size": len(buffer),
        "payload_size": len(payload),
        "footer": footer.to_dict(),
        "size_ok": len(payload) == footer.compressed_size,
        "crc_calculated": f"{crc_calc:08x}",
        "crc_ok": crc_calc == footer.crc32,
        "type_ok": type_ok,
        "ratio": round(ratio, 3),
    }


def inspect_dvpl_file(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    info = inspect_dvpl(p.read_bytes())
    info["path"] = str(p)
    return info
