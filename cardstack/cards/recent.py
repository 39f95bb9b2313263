"""
Recently opened decks.

Stored as a JSON list of absolute paths, most recent first, in the data
directory (``~/.cardstack/recents.json`` by default).
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger


class RecentFiles:
    """Most-recently-used list of deck paths."""

    def __init__(self, path: Path, limit: int = 5):
        self.path = path
        self.limit = limit

    def _read(self) -> list[str]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable recents file {}: {}", self.path, e)
            return []
        if not isinstance(data, list):
            return []
        return [entry for entry in data if isinstance(entry, str)]

    def _write(self, entries: list[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(entries, f, indent=2)

    def add(self, deck: Path) -> None:
        """Move ``deck`` to the front of the list."""
        entry = str(deck.resolve())
        entries = [e for e in self._read() if e != entry]
        entries.insert(0, entry)
        self._write(entries[: self.limit])

    def list(self) -> list[Path]:
        """Remembered decks that still exist, most recent first."""
        return [Path(e) for e in self._read() if Path(e).is_file()]

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
