import json
import sqlite3

import pytest

from havenapi.web import create_app


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:", check_same_thread=False)
    connection.execute(
        "CREATE TABLE single (id TEXT, title TEXT, description TEXT, uid TEXT,"
        " createdOn INTEGER, likes INTEGER, likedby TEXT)"
    )
    yield connection
    connection.close()


@pytest.fixture
def packs_dir(tmp_path):
    return tmp_path / "packs"


@pytest.fixture
def client(conn, packs_dir):
    return create_app(conn, packs_dir).test_client()


def _upload(client, pack_id="p1", title="Fire", data="stuff"):
    body = {"ID": pack_id, "Title": title, "Description": "d", "Data": data, "UID": "u1"}
    return client.post("/single_upload", data=json.dumps(body))


def test_packs_dir_created(conn, packs_dir):
    assert not packs_dir.exists()
    create_app(conn, packs_dir)
    assert packs_dir.is_dir()


def test_upload_and_download(client):
    assert _upload(client, data="pack body").status_code == 200
    response = client.get("/single_download/p1/u1")
    assert response.get_data(as_text=True) == "pack body"


def test_like_twice(client):
    _upload(client)
    headers = {"X-Forwarded-For": "10.1.1.1"}
    first = client.get("/single_like/p1/u1", headers=headers)
    second = client.get("/single_like/p1/u1", headers=headers)
    assert first.get_data(as_text=True) == ""
    assert second.get_data(as_text=True) == "You already liked this!"


def test_list_routes(client):
    _upload(client, pack_id="1", title="Water")
    _upload(client, pack_id="2", title="Earth")
    everything = client.get("/single_list/az").get_json()
    assert [item["title"] for item in everything] == ["Earth", "Water"]
    filtered = client.get("/single_list/az/Wa").get_json()
    assert filtered == [{"title": "Water", "description": "d", "uid": "u1", "id": "1"}]


def test_list_invalid_kind(client):
    response = client.get("/single_list/nope")
    assert response.status_code == 500
    assert response.get_data(as_text=True) == "invalid kind"


def test_bad_upload_body(client):
    assert client.post("/single_upload", data="not json").status_code == 500


def test_download_missing(client):
    assert client.get("/single_download/zz/u1").status_code == 500