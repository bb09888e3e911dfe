"""Element name search."""

from __future__ import annotations

from typing import Any


def search_elements(conn: Any, query: str) -> list[str]:
    """Return up to 100 element names matching a SQL ``LIKE`` pattern."""
    rows = conn.execute(
        "SELECT name FROM elements WHERE name LIKE ? LIMIT 100", (query,)
    ).fetchall()
    return [name for (name,) in rows]