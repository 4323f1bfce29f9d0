import sqlite3

import pytest
from fastapi.testclient import TestClient

from car_catalog_api.app.core import db
from car_catalog_api.app.core.config import settings
from car_catalog_api.app.main import app


def test_init_db_creates_cars_table():
    db.init_db()
    with db.get_cursor() as cursor:
        row = cursor.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'cars'"
        ).fetchone()
    assert row is not None


def test_init_db_is_idempotent():
    db.init_db()
    db.init_db()
    with db.get_cursor() as cursor:
        versions = [r["version"] for r in cursor.execute("SELECT version FROM migrations")]
    assert versions == [1]


def test_reset_cars_restarts_ids():
    db.init_db()
    assert db.reset_cars() == 3
    assert db.reset_cars() == 3
    with db.get_cursor() as cursor:
        rows = cursor.execute("SELECT id, name, year FROM cars ORDER BY id").fetchall()
    assert [tuple(r) for r in rows] == [
        (1, "ヤリス", 2020),
        (2, "キャストスタイル", 2020),
        (3, "フィット", 2019),
    ]


def test_reset_cars_with_custom_seed():
    db.init_db()
    assert db.reset_cars([("Fit", 2019)]) == 1
    with db.get_cursor() as cursor:
        assert cursor.execute("SELECT COUNT(*) FROM cars").fetchone()[0] == 1


def test_get_connection_uses_row_factory():
    conn = db.get_connection()
    try:
        assert conn.row_factory is sqlite3.Row
    finally:
        conn.close()


@pytest.mark.parametrize("url", [":memory:", "file::memory:?cache=shared", ""])
def test_in_memory_database_url_is_rejected(monkeypatch, url):
    monkeypatch.setattr(settings, "database_url", url)
    with pytest.raises(ValueError):
        db.get_database_path()


def test_in_memory_database_url_aborts_startup(monkeypatch):
    monkeypatch.setattr(settings, "database_url", ":memory:")
    with pytest.raises(ValueError):
        with TestClient(app):
            pass
