"""Database session management with connection pooling"""

from functools import lru_cache
from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from loan_gateway.config import settings


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the shared engine on first use"""
    connect_args: Dict[str, Any] = {}
    if settings.database_url.startswith("postgresql"):
        # Bound every statement so a stalled store fails the request instead of hanging it
        connect_args = {
            "connect_timeout": max(1, int(settings.db_pool_timeout_seconds)),
            "options": f"-c statement_timeout={settings.db_statement_timeout_ms}",
        }

    # Connection pool: max 20 connections, recycle after 1 hour to avoid stale connections
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,
        max_overflow=10,
        pool_recycle=3600,
        pool_timeout=settings.db_pool_timeout_seconds,
        connect_args=connect_args,
    )


SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal(bind=get_engine())
    try:
        yield db
    finally:
        db.close()
