"""
Centralized database layer for MindPulse.

Structure:
- entities/: SQLModel table definitions, one module per aggregate
- repositories/: async data access classes over those entities
- session.py: global engine and session factory
- utils.py: engine/session helpers
- seed.py: content catalog seeding
"""

from .base import Base, utc_now
from .session import async_session_maker, engine, get_session, init_db
from .utils import create_all, create_engine, create_sessionmaker

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "utc_now",
]
