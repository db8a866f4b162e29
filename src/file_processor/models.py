"""Data models: FileModify records and the formats they can be saved in."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from file_processor.errors import UnsupportedFormat


@dataclass(frozen=True)
class FileModify:
    """A filename and its last modification time, used to keep record of state changes."""

    filename: Path
    date: datetime  # Timezone-aware (UTC when built by from_path)

    @classmethod
    def from_path(cls, path: Path | str) -> FileModify:
        """Stat path and record its modification time. Raises OSError if it cannot be stat'ed."""
        path = Path(path)
        mtime = os.stat(path).st_mtime
        return cls(filename=path, date=datetime.fromtimestamp(mtime, tz=timezone.utc))

    def to_dict(self) -> dict[str, str]:
        """Plain mapping understood by every codec: posix filename and ISO-8601 date."""
        return {"filename": self.filename.as_posix(), "date": self.date.isoformat()}

    @classmethod
    def from_dict(cls, data: dict) -> FileModify:
        date = data["date"]
        if not isinstance(date, datetime):
            date = datetime.fromisoformat(date)
        return cls(filename=Path(data["filename"]), date=date)


class SaveFileFormat(Enum):
    """All file types FileModify records can be saved into."""

    JSON = "json"
    BINCODE = "bincode"
    CBOR = "cbor"
    YAML = "yaml"
    TOML = "toml"
    MESSAGEPACK = "messagepack"
    RON = "ron"

    @classmethod
    def from_name(cls, name: str) -> SaveFileFormat:
        """Parse a format name case-insensitively ('yaml', 'MessagePack', 'msgpack')."""
        key = name.strip().lower()
        if key == "msgpack":
            key = "messagepack"
        for fmt in cls:
            if fmt.value == key:
                return fmt
        raise UnsupportedFormat(name)

    @property
    def extension(self) -> str:
        """Conventional file suffix, including the dot."""
        return _EXTENSIONS[self]


_EXTENSIONS = {
    SaveFileFormat.JSON: ".json",
    SaveFileFormat.BINCODE: ".bin",
    SaveFileFormat.CBOR: ".cbor",
    SaveFileFormat.YAML: ".yaml",
    SaveFileFormat.TOML: ".toml",
    SaveFileFormat.MESSAGEPACK: ".msgpack",
    SaveFileFormat.RON: ".ron",
}
