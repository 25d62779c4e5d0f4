"""File-system helpers for the batch driver.

Every helper converts ``OSError`` into a FileIOError carrying the path, so
callers can record the failure per file and move on.
"""

from __future__ import annotations
from pathlib import Path
from typing import List

from ..codec.constants import UINT32_MAX
from ..codec.errors import (
    E_DELETE_IO,
    E_LIST_IO,
    E_READ_IO,
    E_WRITE_IO,
    io_error,
)

__all__ = ["safe_read_file", "write_file", "remove_file", "list_dir"]


def safe_read_file(path: Path, max_size: int = UINT32_MAX) -> bytes:
    try:
        size = path.stat().st_size
        if size > max_size:
            raise io_error(
                E_READ_IO,
                f"File too large: {size}>{max_size}",
                {"path": str(path)},
            )
        return path.read_bytes()
    except OSError as e:
        raise io_error(
            E_READ_IO, f"Cannot read {path}: {e}", {"path": str(path)}
        ) from e


def write_file(path: Path, data: bytes) -> int:
    try:
        with path.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise io_error(
            E_WRITE_IO, f"Cannot write {path}: {e}", {"path": str(path)}
        ) from e
    return len(data)


def remove_file(path: Path) -> None:
    try:
        path.unlink()
    except OSError as e:
        raise io_error(
            E_DELETE_IO, f"Cannot delete {path}: {e}", {"path": str(path)}
        ) from e


def list_dir(path: Path) -> List[Path]:
    """Directory entries sorted by name."""
    try:
        return sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise io_error(
            E_LIST_IO, f"Cannot list {path}: {e}", {"path": str(path)}
        ) from e
