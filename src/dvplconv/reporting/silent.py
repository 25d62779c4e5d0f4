from __future__ import annotations

from typing import Any, List

from .base import Reporter, TaskStatus


class SilentReporter(Reporter):
    """Reporter that writes nothing (``-r silent`` and library use).

    Error and warning messages are still kept in ``errors`` and
    ``warnings`` so a caller of ``run_batch`` can show them its own way.
    """

    def __init__(self) -> None:
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def start_task(
        self, task_id: str, name: str, total: int | None = None, **meta: Any
    ) -> None:
        pass

    def advance(self, task_id: str, step: int = 1, **meta: Any) -> None:
        pass

    def end_task(
        self,
        task_id: str,
        status: TaskStatus = TaskStatus.SUCCESS,
        **final_meta: Any,
    ) -> None:
        pass

    def status(self, message: str, **fields: Any) -> None:
        pass

    def error(self, message: str, **fields: Any) -> None:
        self.errors.append(message)

    def warning(self, message: str, **fields: Any) -> None:
        self.warnings.append(message)

    def section(self, title: str) -> None:
        pass
