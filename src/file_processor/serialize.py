"""Encode and decode FileModify records with the codec named by a SaveFileFormat."""

from __future__ import annotations

import json
import logging
import pickle
import tomllib
from collections.abc import Iterable
from pathlib import Path

import cbor2
import msgpack
import tomli_w
import yaml

from file_processor.errors import UnsupportedFormat
from file_processor.models import FileModify, SaveFileFormat

logger = logging.getLogger(__name__)

# TOML documents must be tables, so records live under this key
TOML_KEY = "records"


def dumps_records(records: Iterable[FileModify], fmt: SaveFileFormat) -> bytes:
    """Serialize records to bytes. Raises UnsupportedFormat for RON."""
    data = [r.to_dict() for r in records]
    if fmt is SaveFileFormat.JSON:
        return json.dumps(data, indent=2).encode("utf-8")
    if fmt is SaveFileFormat.YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).encode("utf-8")
    if fmt is SaveFileFormat.TOML:
        return tomli_w.dumps({TOML_KEY: data}).encode("utf-8")
    if fmt is SaveFileFormat.CBOR:
        return cbor2.dumps(data)
    if fmt is SaveFileFormat.MESSAGEPACK:
        return msgpack.packb(data)
    if fmt is SaveFileFormat.BINCODE:
        return pickle.dumps(data, protocol=pickle.HIGHEST_PROTOCOL)
    raise UnsupportedFormat(fmt.value)


def loads_records(data: bytes, fmt: SaveFileFormat) -> list[FileModify]:
    """Parse bytes written by dumps_records back into records."""
    if fmt is SaveFileFormat.JSON:
        items = json.loads(data.decode("utf-8"))
    elif fmt is SaveFileFormat.YAML:
        items = yaml.safe_load(data.decode("utf-8")) or []
    elif fmt is SaveFileFormat.TOML:
        items = tomllib.loads(data.decode("utf-8")).get(TOML_KEY, [])
    elif fmt is SaveFileFormat.CBOR:
        items = cbor2.loads(data)
    elif fmt is SaveFileFormat.MESSAGEPACK:
        items = msgpack.unpackb(data)
    elif fmt is SaveFileFormat.BINCODE:
        items = pickle.loads(data)
    else:
        raise UnsupportedFormat(fmt.value)
    return [FileModify.from_dict(item) for item in items]


def save_records(path: Path | str, records: Iterable[FileModify], fmt: SaveFileFormat) -> Path:
    """Write records to path in fmt. Returns the path written."""
    path = Path(path)
    payload = dumps_records(records, fmt)
    path.write_bytes(payload)
    logger.debug("Wrote %d bytes of %s records to %s", len(payload), fmt.value, path)
    return path


def load_records(path: Path | str, fmt: SaveFileFormat) -> list[FileModify]:
    """Read records previously written with save_records."""
    return loads_records(Path(path).read_bytes(), fmt)
