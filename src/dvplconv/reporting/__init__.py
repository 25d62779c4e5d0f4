"""Reporter backends for dvplconv.

``make_reporter`` maps the ``--reporter`` choice to a backend; ``rich``
degrades to plain output when stderr is not a terminal.
"""

from __future__ import annotations

import sys

from .base import (
    Reporter,
    TaskStatus,
    get_reporter,
    get_verbosity,
    set_reporter,
    set_verbosity,
    task,
)
from .jsonl import JsonLinesReporter
from .plain import PlainReporter
from .rich_reporter import RichReporter
from .silent import SilentReporter

REPORTER_CHOICES = ("plain", "rich", "json", "silent")


def make_reporter(name: str) -> Reporter:
    if name == "json":
        return JsonLinesReporter()
    if name == "silent":
        return SilentReporter()
    if name == "rich" and sys.stderr.isatty():
        return RichReporter()
    if name not in REPORTER_CHOICES:
        raise ValueError(f"Unknown reporter: {name}")
    return PlainReporter()


__all__ = [
    "Reporter",
    "TaskStatus",
    "REPORTER_CHOICES",
    "make_reporter",
    "get_reporter",
    "set_reporter",
    "task",
    "set_verbosity",
    "get_verbosity",
    "PlainReporter",
    "JsonLinesReporter",
    "SilentReporter",
    "RichReporter",
]
