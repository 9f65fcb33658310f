"""Tests for the release step (alembic migrations)."""
import pytest
from sqlalchemy import create_engine, inspect

from scripts.release import run_release


def test_release_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        run_release()


def test_release_refuses_sqlite_in_production(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'prod.db'}")
    monkeypatch.setenv("ENV", "production")
    with pytest.raises(RuntimeError, match="Refusing"):
        run_release()


def test_release_creates_customer_table(tmp_path, monkeypatch):
    db_url = f"sqlite:///{tmp_path/'release.db'}"
    monkeypatch.setenv("DATABASE_URL", db_url)
    monkeypatch.setenv("ENV", "test")

    run_release()
    run_release()  # idempotent

    engine = create_engine(db_url)
    insp = inspect(engine)
    assert insp.has_table("Customer")
    assert {c["name"] for c in insp.get_columns("Customer")} == {"id", "name", "email"}
    engine.dispose()
