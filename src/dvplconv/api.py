"""Batch driver: apply the DVPL codec across a file tree.

Each file goes through ``UNPROCESSED -> READ -> ENCODED|DECODED -> WRITTEN
-> DELETED|KEPT``; a failure at any stage stops that file only and is
recorded in its FileResult. The source is deleted only after the output
has been written completely. A crash between the write and the delete
can leave both files on disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, Dict, List

from .codec import DVPL_SUFFIX, decode_dvpl, encode_dvpl
from .codec.errors import E_PATH_MISSING, DvplError, io_error
from .logging import get_logger
from .reporting import TaskStatus, get_reporter, task
from .utils.io import list_dir, remove_file, safe_read_file, write_file

__all__ = [
    "Mode",
    "FileStatus",
    "FileStage",
    "ProcessConfig",
    "FileResult",
    "BatchResult",
    "is_eligible",
    "output_path_for",
    "process_file",
    "process_path",
    "run_batch",
]


class Mode(Enum):
    COMPRESS = "compress"
    DECOMPRESS = "decompress"
    VERIFY = "verify"

    @property
    def past_tense(self) -> str:
        return {
            Mode.COMPRESS: "compressed",
            Mode.DECOMPRESS: "decompressed",
            Mode.VERIFY: "verified",
        }[self]


class FileStatus(Enum):
    PROCESSED = auto()
    SKIPPED = auto()
    FAILED = auto()


class FileStage(Enum):
    UNPROCESSED = auto()
    READ = auto()
    ENCODED = auto()
    DECODED = auto()
    WRITTEN = auto()
    DELETED = auto()
    KEPT = auto()
    VERIFIED = auto()


@dataclass(slots=True, frozen=True)
class ProcessConfig:
    mode: Mode
    keep_originals: bool = False
    path: Path = Path(".")
    # Raise on LZ4 compressor failure instead of storing the file raw.
    strict_compression: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.mode, Mode):
            object.__setattr__(self, "mode", Mode(self.mode))
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))


@dataclass(slots=True)
class FileResult:
    source: Path
    status: FileStatus = FileStatus.PROCESSED
    stage: FileStage = FileStage.UNPROCESSED
    output: Path | None = None
    error: DvplError | None = None
    bytes_in: int = 0
    bytes_out: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": str(self.source),
            "output": str(self.output) if self.output else None,
            "status": self.status.name.lower(),
            "stage": self.stage.name.lower(),
            "error": self.error.to_dict() if self.error else None,
            "bytes_in": self.bytes_in,
            "bytes_out": self.bytes_out,
        }


@dataclass(slots=True)
class BatchResult:
    mode: Mode
    results: List[FileResult] = field(default_factory=list)

    def _count(self, status: FileStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def processed(self) -> int:
        return self._count(FileStatus.PROCESSED)

    @property
    def skipped(self) -> int:
        return self._count(FileStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(FileStatus.FAILED)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def failures(self) -> List[FileResult]:
        return [r for r in self.results if r.status is FileStatus.FAILED]

    def stats(self) -> Dict[str, int]:
        return {
            "processed": self.processed,
            "skipped": self.skipped,
            "failed": self.failed,
            "bytes_in": sum(r.bytes_in for r in self.results),
            "bytes_out": sum(r.bytes_out for r in self.results),
        }


def is_eligible(path: Path, mode: Mode) -> bool:
    has_suffix = path.name.endswith(DVPL_SUFFIX)
    if mode is Mode.COMPRESS:
        return not has_suffix
    # A bare ".dvpl" has no counterpart name to decode into.
    return has_suffix and len(path.name) > len(DVPL_SUFFIX)


def output_path_for(path: Path, mode: Mode) -> Path | None:
    if mode is Mode.COMPRESS:
        return path.with_name(path.name + DVPL_SUFFIX)
    if mode is Mode.DECOMPRESS:
        return path.with_name(path.name[: -len(DVPL_SUFFIX)])
    return None


def process_file(path: Path, config: ProcessConfig) -> FileResult:
    mode = config.mode
    result = FileResult(source=path)
    if not is_eligible(path, mode):
        result.status = FileStatus.SKIPPED
        return result
    try:
        data = safe_read_file(path)
        result.stage = FileStage.READ
        result.bytes_in = len(data)

        if mode is Mode.COMPRESS:
            block = encode_dvpl(data, strict=config.strict_compression)
            result.stage = FileStage.ENCODED
        else:
            block = decode_dvpl(data)
            result.stage = FileStage.DECODED
        result.bytes_out = len(block)

        if mode is Mode.VERIFY:
            result.stage = FileStage.VERIFIED
            return result

        target = output_path_for(path, mode)
        assert target is not None
        write_file(target, block)
        result.output = target
        result.stage = FileStage.WRITTEN

        if config.keep_originals:
            result.stage = FileStage.KEPT
        else:
            remove_file(path)
            result.stage = FileStage.DELETED
    except DvplError as e:
        result.status = FileStatus.FAILED
        result.error = e
    return result


def _collect(root: Path) -> List[Path | FileResult]:
    """Depth-first list of files under ``root``.

    A directory that cannot be listed becomes a failed FileResult in place
    of its entries; its siblings are still visited. Symlinked directories
    are recorded as skipped.
    """
    items: List[Path | FileResult] = []
    if not root.is_dir():
        items.append(root)
        return items
    try:
        entries = list_dir(root)
    except DvplError as e:
        items.append(
            FileResult(source=root, status=FileStatus.FAILED, error=e)
        )
        return items
    for entry in entries:
        if entry.is_dir() and entry.is_symlink():
            # Not followed; a link to an ancestor would never terminate.
            items.append(FileResult(source=entry, status=FileStatus.SKIPPED))
        elif entry.is_dir():
            items.extend(_collect(entry))
        else:
            items.append(entry)
    return items


def _report(result: FileResult, mode: Mode) -> None:
    logger = get_logger()
    if result.status is FileStatus.FAILED:
        assert result.error is not None
        logger.error(
            "File %s failed to %s: %s",
            result.source,
            mode.value,
            result.error,
        )
    elif result.status is FileStatus.SKIPPED:
        logger.debug("Ignoring file %s", result.source)
    elif result.output is not None:
        logger.info(
            "File %s has been successfully %s into %s",
            result.source,
            mode.past_tense,
            result.output,
        )
    else:
        logger.info("File %s %s", result.source, mode.past_tense)


def process_path(path: str | Path, config: ProcessConfig) -> BatchResult:
    """Process a single file or a whole directory tree.

    Per-file failures are collected in the returned BatchResult; only a
    missing ``path`` aborts the run.
    """
    root = Path(path)
    if not root.exists():
        raise io_error(
            E_PATH_MISSING, f"Path not found: {root}", {"path": str(root)}
        )
    mode = config.mode
    items = _collect(root)
    batch = BatchResult(mode=mode)
    rep = get_reporter()
    task_id = f"batch.{mode.value}"
    name = f"{mode.value.capitalize()} {root}"
    with task(task_id, name, total=len(items)) as final:
        for item in items:
            if isinstance(item, FileResult):
                result = item
            else:
                result = process_file(item, config)
            batch.results.append(result)
            _report(result, mode)
            rep.advance(task_id, current_item=str(result.source))
        final.update(batch.stats())
        if not batch.ok:
            final["status"] = TaskStatus.FAILED
    kind = "Verify" if mode is Mode.VERIFY else "Convert"
    rep.status(
        f"{kind} summary: mode={mode.value} "
        + " ".join(f"{k}={v}" for k, v in batch.stats().items())
    )
    return batch


def run_batch(config: ProcessConfig) -> BatchResult:
    return process_path(config.path, config)
