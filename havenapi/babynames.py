"""Rebuild the ``names`` table from the yearly baby name statistics archive."""

from __future__ import annotations

import argparse
import csv
import io
import re
import sqlite3
import time
import zipfile
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from havenapi.youtube import http_get

ARCHIVE_URL = "https://www.ssa.gov/oact/babynames/names.zip"
YEARS_BACK = 78
BATCH_SIZE = 10000

_YEAR_FILE = re.compile(r"yob([0-9][0-9][0-9][0-9]).txt")


@dataclass
class NameStat:
    """The more common sex for a name and the count recorded for it."""

    count: int
    is_male: bool


def year_files(names: Iterable[str]) -> list[tuple[int, str]]:
    """Return ``(year, name)`` for each yearly file, newest first."""
    found = []
    for name in names:
        match = _YEAR_FILE.search(name)
        if match:
            found.append((int(match.group(1)), name))
    return sorted(found, key=lambda item: item[0], reverse=True)


def merge_rows(
    names: dict[str, NameStat], rows: Iterable[list[str]]
) -> dict[str, NameStat]:
    """Fold ``name,sex,count`` rows into ``names`` and return it."""
    for row in rows:
        if not row:
            continue
        name, sex, raw_count = row[0], row[1], row[2]
        count = int(raw_count)
        is_male = sex == "M"
        stat = names.get(name)
        if stat is None:
            names[name] = NameStat(count, is_male)
        elif stat.is_male == is_male:
            stat.count += count
        elif stat.count < count:
            stat.is_male = is_male
            stat.count = count
    return names


def collect_names(
    archive: zipfile.ZipFile, years_back: int = YEARS_BACK
) -> dict[str, NameStat]:
    """Merge the newest ``years_back + 1`` yearly files of ``archive``."""
    names: dict[str, NameStat] = {}
    for _, filename in year_files(archive.namelist())[: years_back + 1]:
        with archive.open(filename) as handle:
            text = io.TextIOWrapper(handle, encoding="utf-8", newline="")
            merge_rows(names, csv.reader(text))
    return names


def _statement(batch: list[tuple[str, bool, int]]) -> tuple[str, list[object]]:
    query = "INSERT INTO names VALUES " + ",".join(["(?,?,?)"] * len(batch))
    return query, [value for record in batch for value in record]


def insert_batches(
    names: dict[str, NameStat], batch_size: int = BATCH_SIZE
) -> Iterator[tuple[str, list[object]]]:
    """Yield ``(query, args)`` inserts; the first holds one record, then ``batch_size`` each."""
    batch: list[tuple[str, bool, int]] = []
    for times, (name, stat) in enumerate(names.items()):
        batch.append((name, stat.is_male, stat.count))
        if times % batch_size == 0:
            yield _statement(batch)
            batch = []
    if batch:
        yield _statement(batch)


class _Timer:
    def __init__(self) -> None:
        self.last = time.perf_counter()

    def lap(self, message: str) -> None:
        now = time.perf_counter()
        print(message, "in", f"{now - self.last:.3f}s")
        self.last = now


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rebuild the names table.")
    parser.add_argument("--database", default="nv7haven.db", help="SQLite database file")
    parser.add_argument("--archive", help="local names.zip instead of downloading it")
    parser.add_argument("--years-back", type=int, default=YEARS_BACK)
    args = parser.parse_args(argv)

    timer = _Timer()
    conn = sqlite3.connect(args.database)
    try:
        conn.execute(
            "CREATE TABLE IF NOT EXISTS names (name TEXT, isMale INTEGER, count INTEGER)"
        )
        conn.execute("DELETE FROM names WHERE 1")
        timer.lap("Connected to SQL database and cleared data")

        if args.archive:
            with open(args.archive, "rb") as handle:
                body = handle.read()
        else:
            body = http_get(ARCHIVE_URL)
        timer.lap("Downloaded baby name statistics ZIP")

        with zipfile.ZipFile(io.BytesIO(body)) as archive:
            timer.lap("Converted baby name statistics ZIP")
            names = collect_names(archive, args.years_back)
        timer.lap("Read and processed all data")

        for query, values in insert_batches(names):
            conn.execute(query, values)
            timer.lap("Processed and wrote records to SQL database")
        conn.commit()
        timer.lap("Processed and wrote final records to SQL database")
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())