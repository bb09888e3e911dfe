"""Paged leaderboards over players and element colours."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PAGE_LENGTH = 50

QUERIES = {
    "player": "SELECT name, JSON_LENGTH(found) AS found FROM `users` ORDER BY JSON_LENGTH(found) %s LIMIT ? OFFSET ?",
    "color": 'SELECT a.col AS col, (SELECT COUNT(1) AS cnt FROM elements WHERE SUBSTRING_INDEX(color, "_", 1)=a.col) FROM (SELECT DISTINCT SUBSTRING_INDEX(elements.color, "_", 1) AS col FROM elements) a ORDER BY (SELECT COUNT(1) FROM elements WHERE SUBSTRING_INDEX(color, "_", 1)=a.col) %s LIMIT ? OFFSET ? ',
}


@dataclass(frozen=True)
class LeaderboardItem:
    """One ranked entry."""

    title: str
    value: int


@dataclass
class LeaderboardPage:
    """One page of a leaderboard."""

    page_length: int = PAGE_LENGTH
    items: list[LeaderboardItem] = field(default_factory=list)


def build_query(kind: str, order: str) -> str:
    """Return the SQL for ``kind``; an ``order`` of ``"1"`` sorts ascending."""
    try:
        template = QUERIES[kind]
    except KeyError:
        raise LookupError("Invalid query type!") from None
    return template % ("ASC" if order == "1" else "DESC")


def leaderboard_query(conn: Any, kind: str, order: str, page: int | str) -> LeaderboardPage:
    """Fetch page ``page`` (counting from 0) of the ``kind`` leaderboard."""
    query = build_query(kind, order)
    page_number = int(page)
    rows = conn.execute(query, (PAGE_LENGTH, page_number * PAGE_LENGTH)).fetchall()
    return LeaderboardPage(
        PAGE_LENGTH, [LeaderboardItem(title, value) for title, value in rows]
    )