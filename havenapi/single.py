"""Single-player element pack sharing: upload, like, list and download packs."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

LIST_LIMIT = 11

SORT_ORDERS = {
    "date": "createdOn DESC",
    "az": "title ASC",
    "likes": "likes DESC",
    "za": "title DESC",
}


@dataclass(frozen=True)
class PackData:
    """An uploaded pack with its metadata and contents."""

    id: str
    title: str = ""
    description: str = ""
    data: str = ""
    uid: str = ""

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> "PackData":
        return cls(
            id=raw.get("ID", ""),
            title=raw.get("Title", ""),
            description=raw.get("Description", ""),
            data=raw.get("Data", ""),
            uid=raw.get("UID", ""),
        )


@dataclass(frozen=True)
class ListItem:
    """A pack as shown in a listing."""

    title: str
    description: str
    uid: str
    id: str

    def to_json(self) -> dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "uid": self.uid,
            "id": self.id,
        }


def _load_liked(raw: str | bytes | None) -> dict[str, Any]:
    liked = json.loads(raw) if raw else None
    return dict(liked) if liked else {}


def _dump_liked(liked: dict[str, Any]) -> str:
    return json.dumps({ip: {} for ip in sorted(liked)}, separators=(",", ":"))


class SinglePacks:
    """Packs indexed in the ``single`` table with contents under ``packs_dir``."""

    def __init__(self, conn: Any, packs_dir: str | Path = "packs"):
        self.conn = conn
        self.packs_dir = Path(packs_dir)

    def _path(self, pack_id: str, uid: str) -> Path:
        return self.packs_dir / f"{uid}_{pack_id}.pack"

    def upload(self, pack: PackData) -> None:
        """Create or update a pack's record and replace its stored contents."""
        (count,) = self.conn.execute(
            "SELECT COUNT(1) FROM single WHERE uid=? AND id=? LIMIT 1",
            (pack.uid, pack.id),
        ).fetchone()
        now = int(time.time())
        if count == 0:
            self.conn.execute(
                "INSERT INTO single VALUES ( ?, ?, ?, ?, ?, ?, ? )",
                (pack.id, pack.title, pack.description, pack.uid, now, 0, "{}"),
            )
        else:
            self.conn.execute(
                "UPDATE single SET createdOn=?, title=?, description=? WHERE id=? AND uid=?",
                (now, pack.title, pack.description, pack.id, pack.uid),
            )
        self.conn.commit()
        self._path(pack.id, pack.uid).write_bytes(pack.data.encode("utf-8"))

    def like(self, pack_id: str, uid: str, ip: str) -> bool:
        """Like a pack once per address; return False if ``ip`` already liked it."""
        row = self.conn.execute(
            "SELECT likes, likedby FROM single WHERE id=? AND uid=?", (pack_id, uid)
        ).fetchone()
        if row is None:
            raise LookupError(f"no pack {pack_id!r} by {uid!r}")
        likes, raw = row
        liked = _load_liked(raw)
        if ip in liked:
            return False
        liked[ip] = {}
        self.conn.execute(
            "UPDATE single SET likes=?, likedby=? WHERE id=? AND uid=?",
            (likes + 1, _dump_liked(liked), pack_id, uid),
        )
        self.conn.commit()
        return True

    def list_packs(self, kind: str, query: str = "") -> list[ListItem]:
        """List up to eleven packs whose titles start with ``query``, sorted by ``kind``."""
        order = SORT_ORDERS.get(kind)
        if order is None:
            raise ValueError("invalid kind")
        cursor = self.conn.execute(
            "SELECT title, description, uid, id FROM single WHERE title LIKE ? ORDER BY "
            + order,
            (query + "%",),
        )
        return [ListItem(*row) for row in cursor.fetchmany(LIST_LIMIT)]

    def download(self, pack_id: str, uid: str) -> str:
        """Return a pack's stored contents."""
        return self._path(pack_id, uid).read_text(encoding="utf-8")