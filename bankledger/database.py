"""Database connection set-up."""

from __future__ import annotations

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine


def connect(dsn: str) -> Engine:
    """Create an engine for ``dsn`` and check that the database answers."""
    engine = create_engine(dsn)
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except Exception:
        engine.dispose()
        raise
    return engine