"""Unit tests for database engine setup."""

import pytest
from sqlalchemy import text

from app.adapters.outbound.persistence import Base
from app.infrastructure import db


def test_sqlite_engine_enforces_lead_cascade():
    engine = db.build_engine("sqlite://")
    Base.metadata.create_all(engine)

    with engine.begin() as connection:
        assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 1
        connection.execute(
            text(
                "INSERT INTO leads (id, full_name, email, phone, location, created_at, updated_at) "
                "VALUES ('l-1', 'Ana', 'ana@example.com', '600111222', 'Madrid', "
                "'2025-01-01 00:00:00', '2025-01-01 00:00:00')"
            )
        )
        connection.execute(
            text(
                "INSERT INTO tasks (id, lead_id, title, completed, created_at, updated_at) "
                "VALUES ('t-1', 'l-1', 'Llamar', 0, '2025-01-01 00:00:00', '2025-01-01 00:00:00')"
            )
        )
        connection.execute(text("DELETE FROM leads WHERE id = 'l-1'"))

        assert connection.execute(text("SELECT COUNT(*) FROM tasks")).scalar() == 0


def test_session_requires_database_url(monkeypatch):
    monkeypatch.setattr(db, "_engine", None)
    monkeypatch.setattr(db, "_SessionLocal", None)
    monkeypatch.setattr(db.settings, "database_url", "")

    with pytest.raises(ValueError, match="DATABASE_URL"):
        db.get_db_session()
