"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from file_processor import __version__
from file_processor.config import load_config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _log_level(verbose: bool, quiet: bool, configured: str | None) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    level = logging.getLevelName((configured or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False, directory: Path | None = None) -> None:
    """
    Set the file_processor logger level from -v/-q or logging.level in the config
    seen from directory. Handlers (stderr, plus logging.file) are attached once.
    """
    log_cfg = load_config(directory).get("logging") or {}
    logger = logging.getLogger("file_processor")
    logger.setLevel(_log_level(verbose, quiet, log_cfg.get("level")))
    if logger.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = log_cfg.get("file")
    if log_file:
        try:
            handlers.append(logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8"))
        except OSError:
            logger.warning("Could not open log file %s", log_file)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-processor",
        description="Find files in a directory by name or extension.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Shared by every subcommand
    scan_flags = argparse.ArgumentParser(add_help=False)
    scan_flags.add_argument(
        "--ignore-fail",
        action="store_true",
        default=None,
        help="Skip unreadable entries and invalid names instead of failing (default: from config).",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # find
    p_find = subparsers.add_parser("find", help="Find files by exact name.", parents=[scan_flags])
    p_find.add_argument("path", type=Path, help="Directory to search.")
    p_find.add_argument("names", nargs="+", help="Filenames that must all be present.")
    p_find.set_defaults(run="find")

    # ext
    p_ext = subparsers.add_parser("ext", help="List files with the given extensions.", parents=[scan_flags])
    p_ext.add_argument("path", type=Path, help="Directory to search.")
    p_ext.add_argument("extensions", nargs="+", help="Extensions without the dot (e.g. txt csv).")
    p_ext.set_defaults(run="ext")

    # stamp
    p_stamp = subparsers.add_parser(
        "stamp",
        help="Record modification times of named files.",
        parents=[scan_flags],
    )
    p_stamp.add_argument("path", type=Path, help="Directory to search.")
    p_stamp.add_argument("names", nargs="+", help="Filenames to record.")
    p_stamp.add_argument(
        "--format",
        "-f",
        help="json, yaml, toml, cbor, messagepack or bincode (default: from config).",
    )
    p_stamp.add_argument("--output", "-o", type=Path, help="Write to this file instead of stdout.")
    p_stamp.set_defaults(run="stamp")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
        directory=getattr(args, "path", None),
    )
    run = getattr(args, "run", None)

    if run == "find":
        from file_processor.commands.find_cmd import run as cmd_run
    elif run == "ext":
        from file_processor.commands.ext_cmd import run as cmd_run
    elif run == "stamp":
        from file_processor.commands.stamp_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
