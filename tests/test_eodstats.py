import json
import re
import sqlite3
import time

import pytest

from havenapi.eodstats import EodStats


@pytest.fixture
def conn():
    db = sqlite3.connect(":memory:")
    db.execute(
        "CREATE TABLE eod_stats (time INTEGER, elemcnt INTEGER, combcnt INTEGER, "
        "usercnt INTEGER, found INTEGER, categorized INTEGER, servercnt INTEGER)"
    )
    yield db
    db.close()


def add_row(conn, tm, base):
    conn.execute(
        "INSERT INTO eod_stats VALUES (?, ?, ?, ?, ?, ?, ?)",
        (tm, base, base + 1, base + 2, base + 3, base + 4, base + 5),
    )


def test_empty_table_leaves_chart_empty(conn):
    stats = EodStats()
    assert stats.refresh(conn) is False
    assert stats.chart == ""


def test_rows_are_split_into_series_in_time_order(conn):
    add_row(conn, 1_600_100_000, 20)
    add_row(conn, 1_600_000_000, 10)
    stats = EodStats()
    assert stats.refresh(conn) is True
    assert stats.elemcnt == [10, 20]
    assert stats.combcnt == [11, 21]
    assert stats.usercnt == [12, 22]
    assert stats.found == [13, 23]
    assert stats.categorized == [14, 24]
    assert stats.servercnt == [15, 25]
    assert all(re.fullmatch(r"\d{4}-\d{2}-\d{2}", label) for label in stats.labels)
    assert stats.labels == sorted(stats.labels)


def test_chart_matches_dict(conn):
    add_row(conn, 1_600_000_000, 1)
    stats = EodStats()
    stats.refresh(conn)
    chart = json.loads(stats.chart)
    assert chart == stats.to_dict()
    assert list(chart) == [
        "labels", "found", "elemcnt", "categorized", "combcnt", "usercnt", "servercnt",
    ]


def test_second_refresh_only_adds_newer_rows(conn):
    add_row(conn, 1_600_000_000, 1)
    stats = EodStats()
    stats.refresh(conn)
    assert stats.refresh(conn) is False
    assert stats.elemcnt == [1]
    add_row(conn, int(time.time()) + 100_000, 7)
    assert stats.refresh(conn) is True
    assert stats.elemcnt == [1, 7]
    assert json.loads(stats.chart)["elemcnt"] == [1, 7]