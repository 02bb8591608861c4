"""
High-score table and its persistence.

Responsibilities:
- Keep up to MAX_HIGH_SCORES entries sorted by score, best first
- Decide whether a new score earns a place
- Load/save the table through a small key-value store (JSON file on disk)
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import config as C


class JsonStore:
    """Key-value store backed by a single JSON object on disk."""

    def __init__(self, path: Path = C.HIGH_SCORES_PATH):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open() as f:
                data = json.load(f)
        except (OSError, ValueError) as ex:
            print(f"⚠️ Failed to read {self.path}: {ex}")
            return {}
        if not isinstance(data, dict):
            print(f"⚠️ Ignoring {self.path}: expected a JSON object")
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._read_all().get(key, default)

    def set(self, key: str, value: Any) -> bool:
        data = self._read_all()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w") as f:
                json.dump(data, f, indent=2)
        except OSError as ex:
            print(f"⚠️ Failed to save high scores to {self.path}: {ex}")
            return False
        return True


@dataclass(frozen=True)
class HighScoreEntry:
    initials: str
    score: float

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> Optional["HighScoreEntry"]:
        try:
            initials = str(row["initials"])
            score = float(row["score"])
        except (KeyError, TypeError, ValueError):
            return None
        if len(initials) != C.INITIALS_LENGTH or not initials.isalpha() or score < 0:
            return None
        return cls(initials.upper(), score)


class HighScoreTable:
    def __init__(self, store: Optional[JsonStore] = None, entries: Optional[List[HighScoreEntry]] = None):
        self.store = store
        self.entries: List[HighScoreEntry] = []
        if entries is not None:
            self.entries = self._ranked(entries)
        elif store is not None:
            self.load()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @staticmethod
    def _ranked(entries: List[HighScoreEntry]) -> List[HighScoreEntry]:
        return sorted(entries, key=lambda e: e.score, reverse=True)[: C.MAX_HIGH_SCORES]

    def load(self) -> None:
        rows = self.store.get(C.HIGH_SCORES_KEY, []) if self.store else []
        if not isinstance(rows, list):
            print(f"⚠️ Ignoring malformed high-score table: {rows!r}")
            rows = []
        entries = []
        for row in rows:
            entry = HighScoreEntry.from_dict(row) if isinstance(row, dict) else None
            if entry is not None:
                entries.append(entry)
        self.entries = self._ranked(entries)

    def save(self) -> None:
        if self.store is None:
            return
        self.store.set(C.HIGH_SCORES_KEY, [asdict(e) for e in self.entries])

    @property
    def minimum(self) -> float:
        return min((e.score for e in self.entries), default=0.0)

    def qualifies(self, score: float) -> bool:
        return len(self.entries) < C.MAX_HIGH_SCORES or score > self.minimum

    def insert(self, initials: str, score: float) -> bool:
        """Add an entry if it earns a place, then re-rank, truncate and persist."""
        if not self.qualifies(score):
            return False
        self.entries = self._ranked(self.entries + [HighScoreEntry(initials, score)])
        self.save()
        return True
