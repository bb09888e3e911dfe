"""The "best ever" suggestion ranking game."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass
from typing import Any, Protocol

REQUIRED_CHANGES = 3


class Store(Protocol):
    """A JSON tree store: ``get`` returns raw JSON, ``set_data`` writes a value."""

    def get(self, path: str) -> str | bytes: ...

    def set_data(self, path: str, value: Any) -> None: ...


@dataclass
class Suggestion:
    """A ranked suggestion."""

    name: str
    votes: int = 0

    def to_json(self) -> dict[str, Any]:
        return {"Votes": self.votes, "Name": self.name}

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> "Suggestion":
        return cls(name=raw.get("Name", ""), votes=raw.get("Votes", 0))


def _parse(raw: Any) -> list[Suggestion]:
    if not raw:
        return []
    return [Suggestion.from_json(item) for item in raw]


class BestEver:
    """Suggestions kept sorted by votes and saved to a store every few changes."""

    def __init__(self, store: Store, rng: random.Random | None = None):
        self.store = store
        self.rng = rng if rng is not None else random.Random()
        self.data: list[Suggestion] = []
        self.changes = 0

    def _changed(self) -> None:
        self.changes += 1
        if self.changes > REQUIRED_CHANGES:
            self.store.set_data("", {"data": [s.to_json() for s in self.data]})

    def load(self) -> None:
        """Load the suggestion list from the store's ``data`` key."""
        self.data = _parse(json.loads(self.store.get("data")))

    def new_suggestion(self, name: str) -> bool:
        """Add a suggestion unless one with the same name exists (ignoring case)."""
        lowered = name.lower()
        if any(s.name.lower() == lowered for s in self.data):
            return False
        self.data.append(Suggestion(name=name))
        self.changes = REQUIRED_CHANGES
        self._changed()
        return True

    def get_suggestion(self) -> dict[int, str]:
        """Pick two distinct suggestions, weighting later entries more heavily."""
        if len(self.data) < 2:
            raise ValueError("at least two suggestions are needed")
        indices = range(len(self.data))
        weights = [i + 1 for i in indices]
        first = self.rng.choices(indices, weights)[0]
        second = self.rng.choices(indices, weights)[0]
        while second == first:
            second = self.rng.choices(indices, weights)[0]
        return {first: self.data[first].name, second: self.data[second].name}

    def vote(self, item: int) -> None:
        """Vote for the suggestion at ``item`` and move it up past lower-voted ones."""
        if not 0 <= item < len(self.data):
            raise IndexError(f"no suggestion at index {item}")
        self.data[item].votes += 1
        while item > 0 and self.data[item].votes > self.data[item - 1].votes:
            self.data[item - 1], self.data[item] = self.data[item], self.data[item - 1]
            item -= 1
            self.changes = REQUIRED_CHANGES
        self._changed()

    def leaderboard(self, length: int) -> list[str]:
        """Return the names of the top ``length`` suggestions."""
        if length < 0:
            raise ValueError("length must not be negative")
        return [s.name for s in self.data[:length]]

    def refresh(self) -> None:
        """Reload the suggestion list from the store's root."""
        root = json.loads(self.store.get(""))
        self.data = _parse((root or {}).get("data"))

    def delete_bad(self) -> list[str]:
        """Remove suggestions with negative votes and return their names."""
        deleted = [s.name for s in self.data if s.votes < 0]
        self.data = [s for s in self.data if s.votes >= 0]
        self.changes = REQUIRED_CHANGES
        self._changed()
        return deleted