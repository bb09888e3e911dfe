"""Baby name lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NameData:
    """A name with its more common sex and its count."""

    name: str
    is_male: bool
    population: int


@dataclass(frozen=True)
class NameCount:
    """The total count recorded for a name."""

    name: str
    count: int


def search_names(conn: Any, query: str) -> list[str]:
    """Return up to 100 names matching a ``LIKE`` pattern, most common first."""
    rows = conn.execute(
        "SELECT name FROM names WHERE name LIKE ? ORDER BY count DESC LIMIT 100",
        (query,),
    ).fetchall()
    return [name for (name,) in rows]


def get_name(conn: Any, name: str) -> NameData:
    """Return the record for ``name``; raise ``LookupError`` if there is none."""
    row = conn.execute(
        "SELECT * FROM names WHERE name=? ORDER BY count DESC LIMIT 1", (name,)
    ).fetchone()
    if row is None:
        raise LookupError(f"no such name: {name!r}")
    found, is_male, population = row
    return NameData(found, bool(is_male), population)


def name_count(conn: Any, name: str) -> int | NameCount:
    """Return the total of all names for ``"all"``, otherwise the count for ``name``."""
    if name == "all":
        row = conn.execute("SELECT SUM(`count`) AS num FROM `names`").fetchone()
        if row is None or row[0] is None:
            raise LookupError("no names recorded")
        return int(row[0])
    row = conn.execute(
        "SELECT name, SUM(`count`) AS num FROM `names` WHERE name=?", (name,)
    ).fetchone()
    if row is None or row[0] is None or row[1] is None:
        raise LookupError(f"no such name: {name!r}")
    return NameCount(row[0], int(row[1]))