"""
Database module - engine, session handling and the data access layer.
"""
from satrecruit.db.session import get_db_session, init_db, test_db_connection

__all__ = [
    "get_db_session",
    "init_db",
    "test_db_connection",
]
