"""An idea board where visitors vote ideas up or down once per address."""

from __future__ import annotations

import json
import random
import time
from dataclasses import dataclass
from typing import Any

MAX_IDEA_ID = 1000000


@dataclass(frozen=True)
class Idea:
    """An idea as shown to one visitor."""

    id: int
    created_on: int
    yes: int
    no: int
    title: str
    has_voted: bool


def _load_votes(raw: str | None) -> dict[str, Any]:
    votes = json.loads(raw) if raw else None
    return dict(votes) if votes else {}


def _dump_votes(votes: dict[str, Any]) -> str:
    return json.dumps({ip: {} for ip in sorted(votes)}, separators=(",", ":"))


class IdeaBoard:
    """Ideas stored in the ``ideas`` table of a DB-API connection."""

    def __init__(self, conn: Any, rng: random.Random | None = None):
        self.conn = conn
        self.rng = rng if rng is not None else random.Random()

    def list_ideas(self, sort: str, ip: str) -> list[Idea]:
        """List ideas newest first for ``"new"``, otherwise by votes."""
        order = "createdOn DESC" if sort == "new" else "votes DESC"
        rows = self.conn.execute(
            "SELECT id, createdOn, yes, no, text, voted FROM ideas WHERE 1 ORDER BY "
            + order
        ).fetchall()
        return [
            Idea(idea_id, created_on, yes, no, title, ip in _load_votes(voted))
            for idea_id, created_on, yes, no, title, voted in rows
        ]

    def new_idea(self, title: str) -> int:
        """Add an idea with no votes and return its random id."""
        idea_id = self.rng.randrange(MAX_IDEA_ID)
        self.conn.execute(
            "INSERT INTO ideas VALUES (?, ?, ?, ?, ?, ?, ?)",
            (idea_id, int(time.time()), 0, 0, 0, "{}", title),
        )
        self.conn.commit()
        return idea_id

    def vote(self, idea_id: int, ip: str, vote: bool) -> tuple[int, int]:
        """Record a yes or no vote from ``ip`` and return the new (yes, no) counts."""
        row = self.conn.execute(
            "SELECT yes, no, voted FROM ideas WHERE id=?", (idea_id,)
        ).fetchone()
        if row is None:
            raise LookupError(f"no idea with id {idea_id}")
        yes, no, voted = row
        votes = _load_votes(voted)
        if ip in votes:
            raise ValueError("You already voted!")
        votes[ip] = {}
        if vote:
            yes += 1
        else:
            no += 1
        self.conn.execute(
            "UPDATE ideas SET yes=?, no=?, votes=?, voted=? WHERE id=?",
            (yes, no, yes + no, _dump_votes(votes), idea_id),
        )
        self.conn.commit()
        return yes, no