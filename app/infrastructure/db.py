"""Database infrastructure setup."""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.infrastructure.config.settings import settings

# Engine creation is deferred until needed so the in-memory backend never touches a database
_engine = None
_SessionLocal = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the CRM tables.

    SQLite connections get foreign keys enabled so ON DELETE CASCADE from
    leads to details, history, communications and tasks is enforced.

    Args:
        database_url: SQLAlchemy database URL
        echo: Log SQL statements

    Returns:
        SQLAlchemy engine
    """
    engine = create_engine(database_url, pool_pre_ping=True, echo=echo)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when REPOSITORY_BACKEND=postgres")
        _engine = build_engine(settings.database_url, echo=settings.debug_mode)
    return _engine


def get_db_session() -> Session:
    """
    Get a database session.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        engine = _get_engine()
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return _SessionLocal()
