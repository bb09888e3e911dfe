"""Password-protected notes kept per visitor address."""

from __future__ import annotations

from typing import Any


class NoteExistsError(Exception):
    """Raised when a note with the same name already exists for an address."""


class Notes:
    """Notes stored in the ``notes`` table (ip, name, password, note)."""

    def __init__(self, conn: Any):
        self.conn = conn

    def create(self, ip: str, name: str, password: str) -> None:
        """Create an empty note; raise ``NoteExistsError`` if the name is taken."""
        (count,) = self.conn.execute(
            "SELECT COUNT(1) FROM notes WHERE ip=? AND name=?", (ip, name)
        ).fetchone()
        if count != 0:
            raise NoteExistsError("Note already exists. Try another name?")
        self.conn.execute(
            "INSERT INTO notes VALUES ( ?, ?, ?, ? )", (ip, name, password, "")
        )
        self.conn.commit()

    def change(self, ip: str, name: str, password: str, body: str) -> None:
        """Replace a note's text when the password matches."""
        self.conn.execute(
            "UPDATE notes SET note=? WHERE name=? AND password=? AND ip=?",
            (body, name, password, ip),
        )
        self.conn.commit()

    def get(self, ip: str, name: str, password: str) -> str:
        """Return a note's text; raise ``LookupError`` if it is not found."""
        row = self.conn.execute(
            "SELECT note FROM notes WHERE ip=? AND name=? AND password=?",
            (ip, name, password),
        ).fetchone()
        if row is None:
            raise LookupError(f"no note named {name!r}")
        return row[0]

    def has_password(self, ip: str, name: str) -> bool:
        """Tell whether a note is protected by a non-empty password."""
        row = self.conn.execute(
            "SELECT password FROM notes WHERE ip=? AND name=?", (ip, name)
        ).fetchone()
        if row is None:
            raise LookupError(f"no note named {name!r}")
        return row[0] != ""

    def search(self, ip: str, query: str) -> list[str]:
        """Return the names of this address's notes matching a ``LIKE`` pattern."""
        rows = self.conn.execute(
            "SELECT name FROM notes WHERE ip=? AND name LIKE ?", (ip, query)
        ).fetchall()
        return [name for (name,) in rows]

    def delete(self, ip: str, name: str, password: str) -> None:
        """Delete a note when the password matches."""
        self.conn.execute(
            "DELETE FROM notes WHERE ip=? AND name=? AND password=?",
            (ip, name, password),
        )
        self.conn.commit()