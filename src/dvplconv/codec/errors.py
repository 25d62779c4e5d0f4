"""Error definitions for the DVPL codec and batch driver."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_INVALID_FOOTER = "E_INVALID_FOOTER"
E_SIZE_MISMATCH = "E_SIZE_MISMATCH"
E_CRC32_MISMATCH = "E_CRC32_MISMATCH"
E_TYPE_SIZE_MISMATCH = "E_TYPE_SIZE_MISMATCH"
E_DECODE_SIZE_MISMATCH = "E_DECODE_SIZE_MISMATCH"
E_UNKNOWN_FORMAT = "E_UNKNOWN_FORMAT"
E_LZ4_DECOMPRESS = "E_LZ4_DECOMPRESS"
E_LZ4_COMPRESS = "E_LZ4_COMPRESS"
E_FIELD_RANGE = "E_FIELD_RANGE"
E_PATH_MISSING = "E_PATH_MISSING"
E_LIST_IO = "E_LIST_IO"
E_READ_IO = "E_READ_IO"
E_WRITE_IO = "E_WRITE_IO"
E_DELETE_IO = "E_DELETE_IO"
E_CONFIG = "E_CONFIG"


@dataclass
class DvplError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class DecodeError(DvplError):
    """Base for every data-integrity failure raised while decoding."""


class InvalidFooterError(DecodeError):
    pass


class SizeMismatchError(DecodeError):
    pass


class Crc32MismatchError(DecodeError):
    pass


class TypeSizeMismatchError(DecodeError):
    pass


class DecodeSizeMismatchError(DecodeError):
    pass


class UnknownFormatError(DecodeError):
    pass


class DecompressionError(DecodeError):
    pass


class CompressionError(DvplError):
    pass


class BinaryFormatError(DvplError):
    pass


class FileIOError(DvplError):
    pass


class ConfigError(DvplError):
    pass


def invalid_footer(
    message: str, context: Optional[Dict[str, Any]] = None
) -> InvalidFooterError:
    return InvalidFooterError(
        code=E_INVALID_FOOTER, message=message, context=context
    )


def io_error(
    code: str, message: str, context: Optional[Dict[str, Any]] = None
) -> FileIOError:
    return FileIOError(code=code, message=message, context=context)


def config_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> ConfigError:
    return ConfigError(code=E_CONFIG, message=message, context=context)


__all__ = [
    "DvplError",
    "DecodeError",
    "InvalidFooterError",
    "SizeMismatchError",
    "Crc32MismatchError",
    "TypeSizeMismatchError",
    "DecodeSizeMismatchError",
    "UnknownFormatError",
    "DecompressionError",
    "CompressionError",
    "BinaryFormatError",
    "FileIOError",
    "ConfigError",
    "invalid_footer",
    "io_error",
    "config_error",
    "E_INVALID_FOOTER",
    "E_SIZE_MISMATCH",
    "E_CRC32_MISMATCH",
    "E_TYPE_SIZE_MISMATCH",
    "E_DECODE_SIZE_MISMATCH",
    "E_UNKNOWN_FORMAT",
    "E_LZ4_DECOMPRESS",
    "E_LZ4_COMPRESS",
    "E_FIELD_RANGE",
    "E_PATH_MISSING",
    "E_LIST_IO",
    "E_READ_IO",
    "E_WRITE_IO",
    "E_DELETE_IO",
    "E_CONFIG",
]
