import sqlite3

import pytest

from havenapi.wiki import search_elements


@pytest.fixture
def conn():
    db = sqlite3.connect(":memory:")
    db.execute("CREATE TABLE elements (name TEXT, color TEXT)")
    db.executemany(
        "INSERT INTO elements VALUES (?, ?)",
        [("Fire", "red"), ("Water", "blue"), ("Firework", "red"), ("Earth", "brown")],
    )
    yield db
    db.close()


def test_prefix_pattern(conn):
    assert sorted(search_elements(conn, "Fire%")) == ["Fire", "Firework"]


def test_no_match(conn):
    assert search_elements(conn, "Air%") == []


def test_limit_of_one_hundred(conn):
    conn.executemany(
        "INSERT INTO elements VALUES (?, ?)", [(f"Gen{i}", "x") for i in range(150)]
    )
    assert len(search_elements(conn, "Gen%")) == 100