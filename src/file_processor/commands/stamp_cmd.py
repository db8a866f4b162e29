"""Record modification times of named files and write them in a save format."""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from file_processor.commands.find_cmd import report_missing, resolve_ignore_fail
from file_processor.config import load_config, records_format
from file_processor.errors import FileProcessorError, MissingFiles
from file_processor.models import FileModify, SaveFileFormat
from file_processor.scanner import find_and_then
from file_processor.serialize import dumps_records, save_records

logger = logging.getLogger(__name__)


def run(args: Namespace) -> None:
    """Run the stamp command: one FileModify per requested name, written to --output or stdout."""
    directory: Path = args.path
    names: list[str] = list(args.names)
    ignore_fail = resolve_ignore_fail(args, directory)

    fmt_name = getattr(args, "format", None)
    if not fmt_name:
        fmt_name = records_format(load_config(directory))

    records: list[FileModify] = []
    try:
        fmt = SaveFileFormat.from_name(fmt_name)
        find_and_then(directory, names, lambda p: records.append(FileModify.from_path(p)), ignore_fail)
    except MissingFiles as e:
        report_missing(names, e)
        sys.exit(1)
    except (FileProcessorError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output: Path | None = getattr(args, "output", None)
    try:
        if output is not None:
            save_records(output, records, fmt)
            logger.info("Saved %d records to %s", len(records), output)
        else:
            sys.stdout.buffer.write(dumps_records(records, fmt))
            sys.stdout.flush()
    except (FileProcessorError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
