"""HTTP routes for the single-player pack server."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from flask import Flask, jsonify, request

from havenapi.single import PackData, SinglePacks


def _client_ip() -> str:
    route = request.access_route
    return route[0] if route else (request.remote_addr or "")


def create_app(conn: Any, packs_dir: str | Path = "packs") -> Flask:
    """Build a Flask app serving the pack routes, creating ``packs_dir`` if needed."""
    Path(packs_dir).mkdir(parents=True, exist_ok=True)
    packs = SinglePacks(conn, packs_dir)
    app = Flask(__name__)

    def _failure(err: Exception):
        return str(err), 500

    for error in (ValueError, LookupError, OSError):
        app.register_error_handler(error, _failure)

    @app.post("/single_upload")
    def upload():
        packs.upload(PackData.from_json(json.loads(request.get_data())))
        return ""

    @app.get("/single_like/<pack_id>/<uid>")
    def like(pack_id: str, uid: str):
        if not packs.like(pack_id, uid, _client_ip()):
            return "You already liked this!"
        return ""

    @app.get("/single_list/<kind>")
    @app.get("/single_list/<kind>/<query>")
    def list_packs(kind: str, query: str = ""):
        return jsonify([item.to_json() for item in packs.list_packs(kind, query)])

    @app.get("/single_download/<pack_id>/<uid>")
    def download(pack_id: str, uid: str):
        return packs.download(pack_id, uid)

    return app