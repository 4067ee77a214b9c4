"""Saving and loading character sheets as JSON files."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import platformdirs

SAVE_SUFFIX = ".sav"
DEFAULT_SAVE_NAME = "save.sav"


def _simplified(text: str) -> str:
    return " ".join(text.split())


def save_file_name(name: str) -> str:
    """The file name a save typed as ``name`` is stored under."""
    if _simplified(name) == "":
        return DEFAULT_SAVE_NAME
    return _simplified(name + SAVE_SUFFIX)


def default_directory() -> Path:
    """The shared data directory where saves live by default."""
    return platformdirs.user_data_path()


class SaveStore:
    """A directory of save files."""

    def __init__(self, directory: Path | str | None = None) -> None:
        self.directory = Path(directory) if directory is not None else default_directory()

    def _ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def names(self) -> list[str]:
        """File names of the saves present, in name order."""
        self._ensure_directory()
        return sorted(
            entry.name
            for entry in self.directory.iterdir()
            if entry.is_file() and SAVE_SUFFIX in entry.name
        )

    def save(self, data: dict[str, Any], name: str) -> str:
        """Write ``data`` under the save ``name``; return the file name used."""
        self._ensure_directory()
        file_name = save_file_name(name)
        (self.directory / file_name).write_text(json.dumps(data, indent=4), encoding="utf-8")
        return file_name

    def load(self, name: str) -> dict[str, Any]:
        """Read a save; a file that holds no JSON object loads as empty."""
        file_name = name if SAVE_SUFFIX in name else name + SAVE_SUFFIX
        raw = (self.directory / file_name).read_text(encoding="utf-8")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}

    def delete(self, names: Iterable[str]) -> None:
        """Remove the named save files; missing ones are ignored."""
        for name in names:
            (self.directory / name).unlink(missing_ok=True)