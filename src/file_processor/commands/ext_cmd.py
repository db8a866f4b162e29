"""List files whose extension is one of the requested extensions."""

from __future__ import annotations

import sys
from argparse import Namespace

from file_processor.commands.find_cmd import resolve_ignore_fail
from file_processor.errors import FileProcessorError
from file_processor.scanner import find_by_extension_and_then


def run(args: Namespace) -> None:
    """Run the ext command. Extensions may be given with or without the leading dot."""
    extensions = [e.lstrip(".") for e in args.extensions]
    ignore_fail = resolve_ignore_fail(args, args.path)
    try:
        find_by_extension_and_then(args.path, extensions, lambda p: print(p.as_posix()), ignore_fail)
    except FileProcessorError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
