"""Find files by exact name and print their paths."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from file_processor.config import load_config, scan_ignore_fail
from file_processor.errors import FileProcessorError, MissingFiles
from file_processor.scanner import find_and_then


def resolve_ignore_fail(args: Namespace, directory: Path) -> bool:
    """--ignore-fail from the command line, else scan.ignore_fail from config."""
    flag = getattr(args, "ignore_fail", None)
    if flag is not None:
        return bool(flag)
    return scan_ignore_fail(load_config(directory))


def report_missing(names: list[str], exc: MissingFiles) -> None:
    """Print the requested names behind MissingFiles indexes to stderr."""
    missing = ", ".join(names[i] for i in exc.indexes)
    print(f"Error: could not find: {missing}", file=sys.stderr)


def run(args: Namespace) -> None:
    """Run the find command: print every matched path, fail if any name is missing."""
    directory: Path = args.path
    names: list[str] = list(args.names)
    ignore_fail = resolve_ignore_fail(args, directory)

    try:
        find_and_then(directory, names, lambda p: print(p.as_posix()), ignore_fail)
    except MissingFiles as e:
        report_missing(names, e)
        sys.exit(1)
    except FileProcessorError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
