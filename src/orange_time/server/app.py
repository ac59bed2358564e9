# src/orange_time/server/app.py

"""
Persistence server: two endpoints over a single JSON file.

GET  /api/tasks -> 200 [..] | 500 {"error": ...}
POST /api/tasks -> 200 {"success": true} | 400 / 413 / 500 {"error": ...}
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask, jsonify, request

from .file_store import JsonFileStore, StorageError

logger = logging.getLogger(__name__)

DEFAULT_MAX_BODY_BYTES = 50 * 1024 * 1024


def create_app(
    tasks_file: str | Path,
    *,
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
) -> Flask:
    store = JsonFileStore(tasks_file)
    store.ensure_initialized()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = max_body_bytes
    app.extensions["orange_time.store"] = store

    @app.get("/api/tasks")
    def get_tasks():
        try:
            data = store.read_all()
        except StorageError:
            logger.exception("Error reading tasks")
            return jsonify({"error": "Failed to read tasks"}), 500
        return jsonify(data)

    @app.post("/api/tasks")
    def save_tasks():
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, list):
            return jsonify({"error": "Expected a JSON array of tasks"}), 400
        try:
            store.write_all(data)
        except StorageError:
            logger.exception("Error writing tasks")
            return jsonify({"error": "Failed to save tasks"}), 500
        return jsonify({"success": True})

    @app.errorhandler(413)
    def too_large(_e):
        return jsonify({"error": "Request body too large"}), 413

    return app
