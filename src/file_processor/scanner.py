"""
Directory scanner: match the immediate children of one directory by exact name or
by extension and hand each match to a caller-supplied process function.

Only one directory level is listed, once, in whatever order the filesystem
yields entries. Name-based scans track which requested names are still pending
and raise MissingFiles with their indexes when the listing ends early.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path
from typing import Union

from file_processor.errors import (
    CouldNotOpenEntry,
    CouldNotReadDirectory,
    DirectoryDoesNotExist,
    InvalidProcessedPath,
    InvalidUnicodeData,
    MissingFiles,
    NullDirectory,
)

logger = logging.getLogger(__name__)

DirectoryArg = Union[str, bytes, os.PathLike, None]


def _as_text(value: str | bytes) -> str | None:
    """Return value as valid text, or None if it holds undecodable bytes."""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return None
    try:
        # Undecodable filesystem bytes surface as lone surrogates
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


def _directory_text(directory: DirectoryArg) -> str:
    """Resolve the directory argument to text and check that it exists."""
    if directory is None:
        raise NullDirectory()
    try:
        raw = os.fspath(directory)
    except TypeError as e:
        raise NullDirectory() from e
    text = _as_text(raw)
    if text is None:
        raise NullDirectory()
    if not os.path.exists(text):
        raise DirectoryDoesNotExist(Path(text))
    return text


def _iter_entries(directory: str, ignore_fail: bool) -> Iterator[os.DirEntry[str]]:
    """
    Yield the immediate entries of directory. An entry that fails to list raises
    CouldNotOpenEntry unless ignore_fail is set, in which case it is skipped.
    The scandir handle is closed when iteration ends or aborts.
    """
    try:
        scan = os.scandir(directory)
    except OSError as e:
        raise CouldNotReadDirectory(Path(directory)) from e
    with scan:
        while True:
            try:
                entry = next(scan)
            except StopIteration:
                return
            except OSError as e:
                if not ignore_fail:
                    raise CouldNotOpenEntry(Path(directory)) from e
                logger.debug("Skipping unreadable entry in %s: %s", directory, e)
                continue
            yield entry


def _entry_name(entry: os.DirEntry[str], ignore_fail: bool) -> str | None:
    """Return the entry's filename as text; None means skip it."""
    name = _as_text(entry.name)
    if name is None:
        if not ignore_fail:
            raise InvalidUnicodeData(entry.name)
        logger.debug("Skipping entry with invalid unicode name: %r", entry.name)
    return name


def _extension(name: str) -> str | None:
    """Text after the final dot; None for 'README', '.bashrc' or 'name.'."""
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem or not ext:
        return None
    return ext


def _scan_names(
    directory: DirectoryArg,
    filenames: Sequence[str],
    on_match: Callable[[Path], None],
    ignore_fail: bool,
) -> None:
    """
    Shared name-matching pass. Each matching entry consumes the first pending
    request with that name; raises MissingFiles with leftover indexes.
    """
    dir_text = _directory_text(directory)
    requested = list(filenames)
    pending = list(range(len(requested)))

    for entry in _iter_entries(dir_text, ignore_fail):
        name = _entry_name(entry, ignore_fail)
        if name is None:
            continue
        for i in pending:
            if requested[i] == name:
                logger.debug("Matched %s (request %d) in %s", name, i, dir_text)
                on_match(Path(entry.path))
                pending.remove(i)
                break

    if pending:
        logger.debug("Missing requested files in %s: %s", dir_text, pending)
        raise MissingFiles(pending)


def _load_processed(path: object) -> bytes:
    """Read the whole file at a path returned by a process function."""
    try:
        raw = os.fspath(path)  # type: ignore[arg-type]
    except TypeError as e:
        raise InvalidProcessedPath(path) from e
    text = _as_text(raw)
    if text is None:
        raise InvalidProcessedPath(path)
    try:
        with open(text, "rb") as f:
            return f.read()
    except OSError as e:
        raise InvalidProcessedPath(path) from e


def find_and_then_and_load(
    directory: DirectoryArg,
    filenames: Sequence[str],
    process: Callable[[Path], os.PathLike[str] | str],
    ignore_fail: bool = False,
) -> list[bytes]:
    """
    Find every name in filenames inside directory, pass each match through
    process, and load the file at the path process returns.

    Args:
        directory: Directory whose immediate entries are searched.
        filenames: Exact filenames to find. Each request is satisfied at most once.
        process: Takes the matched entry's path and returns the path to load.
        ignore_fail: Skip entries that cannot be listed or whose names are not
            valid text instead of raising.

    Returns:
        File contents as bytes, in the order matches were found (not request order).

    Raises:
        NullDirectory: directory is None or not representable as text.
        DirectoryDoesNotExist: directory does not exist.
        CouldNotReadDirectory: directory exists but cannot be listed.
        CouldNotOpenEntry: an entry could not be listed (unless ignore_fail).
        InvalidUnicodeData: an entry name is not valid text (unless ignore_fail).
        InvalidProcessedPath: process returned something that cannot be loaded.
        MissingFiles: some requested names were not found; carries their indexes.
    """
    binaries: list[bytes] = []

    def load(path: Path) -> None:
        binaries.append(_load_processed(process(path)))

    _scan_names(directory, filenames, load, ignore_fail)
    return binaries


def find_by_extension_and_then(
    directory: DirectoryArg,
    extensions: Iterable[str],
    process: Callable[[Path], object],
    ignore_fail: bool = False,
) -> None:
    """
    Run process on every entry of directory whose extension is in extensions.

    Extensions are given without the dot and compared case-sensitively; a single
    str is taken as one extension. Entries without an extension, or whose
    extension is not valid text, are skipped. Only the extension has to be
    valid text. There is no required set, so nothing is reported missing.

    Raises:
        NullDirectory, DirectoryDoesNotExist, CouldNotReadDirectory: as for
            find_and_then.
        CouldNotOpenEntry: an entry could not be listed (unless ignore_fail).
    """
    dir_text = _directory_text(directory)
    wanted = frozenset([extensions] if isinstance(extensions, str) else extensions)

    for entry in _iter_entries(dir_text, ignore_fail):
        ext = _extension(entry.name)
        if ext is None or _as_text(ext) is None:
            continue
        if ext in wanted:
            logger.debug("Matched extension %s: %s", ext, entry.path)
            process(Path(entry.path))


def find_and_then(
    directory: DirectoryArg,
    filenames: Sequence[str],
    process: Callable[[Path], object],
    ignore_fail: bool = False,
) -> None:
    """
    Find every name in filenames inside directory and run process on each match.

    Same matching rules and errors as find_and_then_and_load, except that the
    return value of process is ignored and nothing is loaded.
    """
    _scan_names(directory, filenames, process, ignore_fail)
