"""Command line interface for dvplconv."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from ._version import __version__
from .api import Mode, ProcessConfig, run_batch
from .codec import inspect_dvpl
from .codec.errors import DvplError
from .config import CliDefaults, load_defaults
from .logging import configure_logging, section, step
from .reporting import (
    REPORTER_CHOICES,
    get_reporter,
    make_reporter,
    set_reporter,
    set_verbosity,
)
from .utils.io import safe_read_file


def _batch_cmd(args: argparse.Namespace, defaults: CliDefaults) -> int:
    config = ProcessConfig(
        mode=Mode(args.cmd),
        keep_originals=args.keep_originals or defaults.keep_originals,
        path=args.path,
        strict_compression=(
            getattr(args, "strict_compression", False)
            or defaults.strict_compression
        ),
    )
    with section(f"dvplconv {config.mode.value}"):
        step(f"{config.mode.value} {config.path}")
        result = run_batch(config)
    rep = get_reporter()
    if result.ok:
        rep.status(f"{config.mode.value.upper()} FINISHED.")
    else:
        rep.warning(
            f"{config.mode.value.upper()} FINISHED with {result.failed} "
            "failed file(s)."
        )
    fail_on_error = args.fail_on_error or defaults.fail_on_error
    return 1 if (fail_on_error and not result.ok) else 0


def _inspect_cmd(args: argparse.Namespace, defaults: CliDefaults) -> int:
    info = inspect_dvpl(safe_read_file(args.file))
    info["path"] = str(args.file)
    ok = info["size_ok"] and info["crc_ok"] and info["type_ok"]
    if args.json:
        print(json.dumps(info, indent=2, sort_keys=True))
    else:
        footer = info["footer"]
        get_reporter().status(
            "Inspect summary: "
            + f"file_size={info['file_size']} "
            + f"original_size={footer['original_size']} "
            + f"compressed_size={footer['compressed_size']} "
            + f"type={footer['type_name']} crc32={footer['crc32']} "
            + f"size_ok={info['size_ok']} crc_ok={info['crc_ok']} "
            + f"type_ok={info['type_ok']}"
        )
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dvplconv",
        description="Convert files to and from the DVPL container format",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"dvplconv {__version__}",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=None,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=REPORTER_CHOICES,
        default=None,
        help="Select reporter backend: plain (default), rich, json (JSONL events), silent",
    )
    p.add_argument(
        "--config",
        type=Path,
        help="Defaults file (YAML or JSON); command-line flags win",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_batch(name: str, help_text: str) -> argparse.ArgumentParser:
        b = sub.add_parser(name, help=help_text)
        b.add_argument(
            "path",
            nargs="?",
            type=Path,
            default=Path("."),
            help="File or directory to process (default: current directory)",
        )
        b.add_argument(
            "--fail-on-error",
            action="store_true",
            help="Exit with status 1 when any file fails",
        )
        b.set_defaults(func=_batch_cmd)
        return b

    c = add_batch("compress", "Compress files into .dvpl")
    c.add_argument(
        "--keep-originals",
        action="store_true",
        help="Keep the source files after conversion",
    )
    c.add_argument(
        "--strict-compression",
        action="store_true",
        help="Fail a file when LZ4 compression fails instead of storing it raw",
    )

    d = add_batch("decompress", "Decompress .dvpl files")
    d.add_argument(
        "--keep-originals",
        action="store_true",
        help="Keep the .dvpl files after conversion",
    )

    v = add_batch("verify", "Check .dvpl files without writing anything")
    v.set_defaults(keep_originals=True)

    i = sub.add_parser("inspect", help="Show the footer of a .dvpl file")
    i.add_argument("file", type=Path)
    i.add_argument("--json", action="store_true", help="Emit JSON")
    i.set_defaults(func=_inspect_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        defaults = load_defaults(args.config)
    except DvplError as e:
        set_reporter(make_reporter(args.reporter or "plain"))
        get_reporter().error(str(e))
        return 1
    set_reporter(make_reporter(args.reporter or defaults.reporter))
    verbosity = args.verbose if args.verbose is not None else defaults.verbose
    set_verbosity(verbosity)
    configure_logging(verbosity)
    rep = get_reporter()
    try:
        return args.func(args, defaults)
    except DvplError as e:
        rep.error(str(e))
        return 1
    finally:
        rep.flush()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
