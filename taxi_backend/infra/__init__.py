# taxi_backend/infra/__init__.py
"""
Инфраструктурный слой: пул соединений PostgreSQL и схема БД.
"""

from taxi_backend.infra.database import DatabaseManager, init_db, close_db

__all__ = [
    "DatabaseManager",
    "init_db",
    "close_db",
]
