import sqlite3

import pytest

from havenapi.names import NameCount, NameData, get_name, name_count, search_names


@pytest.fixture
def conn():
    db = sqlite3.connect(":memory:")
    db.execute("CREATE TABLE names (name TEXT, isMale INTEGER, count INTEGER)")
    db.executemany(
        "INSERT INTO names VALUES (?, ?, ?)",
        [("Anna", 0, 500), ("Andrew", 1, 900), ("Bob", 1, 300)],
    )
    yield db
    db.close()


def test_search_orders_by_count(conn):
    assert search_names(conn, "An%") == ["Andrew", "Anna"]


def test_search_no_match(conn):
    assert search_names(conn, "Z%") == []


def test_get_name(conn):
    assert get_name(conn, "Anna") == NameData("Anna", False, 500)
    assert get_name(conn, "Bob").is_male is True


def test_get_missing_name(conn):
    with pytest.raises(LookupError):
        get_name(conn, "Nobody")


def test_count_all_is_sum(conn):
    assert name_count(conn, "all") == 500 + 900 + 300


def test_count_single_name(conn):
    assert name_count(conn, "Bob") == NameCount("Bob", 300)


def test_count_missing_name(conn):
    with pytest.raises(LookupError):
        name_count(conn, "Nobody")


def test_count_all_on_empty_table():
    db = sqlite3.connect(":memory:")
    db.execute("CREATE TABLE names (name TEXT, isMale INTEGER, count INTEGER)")
    with pytest.raises(LookupError):
        name_count(db, "all")
    db.close()