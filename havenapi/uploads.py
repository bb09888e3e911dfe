"""Temporary file hosting: uploads expire a day after they are made."""

from __future__ import annotations

import logging
import random
import time
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

LIFETIME_SECONDS = 86400
MAX_FILE_ID = 10000


def _extension(filename: str) -> str:
    parts = filename.split(".")
    return "." + parts[-1] if len(parts) > 1 else ""


class FileUploads:
    """Uploaded files under ``directory`` indexed by the ``upload`` table."""

    def __init__(self, conn: Any, directory: str | Path = "files", rng: random.Random | None = None):
        self.conn = conn
        self.directory = Path(directory)
        self.rng = rng if rng is not None else random.Random()

    def _path(self, file_id: int, ext: str) -> Path:
        return self.directory / f"file{file_id}{ext}"

    def upload(self, filename: str, content: bytes) -> int:
        """Store ``content`` and return the id it can be fetched by."""
        now = int(time.time())
        expired = {
            file_id
            for (file_id,) in self.conn.execute(
                "SELECT id FROM upload WHERE expiry<=?", (now,)
            ).fetchall()
        }
        file_id = self.rng.randrange(MAX_FILE_ID)
        while file_id in expired:
            file_id = self.rng.randrange(MAX_FILE_ID)

        ext = _extension(filename)
        self.conn.execute(
            "INSERT INTO upload VALUES ( ?, ?, ? )",
            (file_id, ext, now + LIFETIME_SECONDS),
        )
        self.conn.commit()
        self.check_dates()

        self.directory.mkdir(exist_ok=True)
        self._path(file_id, ext).write_bytes(content)
        return file_id

    def check_dates(self) -> list[int]:
        """Delete expired uploads and their files; return the removed ids."""
        now = int(time.time())
        rows = self.conn.execute(
            "SELECT id, extension FROM upload WHERE expiry<=?", (now,)
        ).fetchall()
        for file_id, ext in rows:
            try:
                self._path(file_id, ext).unlink()
            except OSError as err:
                log.warning("could not remove upload %s: %s", file_id, err)
        self.conn.execute("DELETE FROM upload WHERE expiry<=?", (now,))
        self.conn.commit()
        return [file_id for file_id, _ in rows]

    def resolve(self, name: str) -> tuple[Path, str | None]:
        """Find the file for a requested name such as ``"42"`` or ``"42.png"``.

        Returns the file's path and, when the name lacks the stored extension,
        that extension so the caller can redirect to the full name.
        """
        file_id = int(name.split(".")[0])
        row = self.conn.execute(
            "SELECT extension FROM upload WHERE id=? LIMIT 1", (file_id,)
        ).fetchone()
        if row is None:
            raise LookupError(f"no upload with id {file_id}")
        ext = row[0]
        redirect = ext if len(name.split(".")) < 2 and "." in ext else None
        return self._path(file_id, ext), redirect