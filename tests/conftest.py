# tests/conftest.py
"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

# Устанавливаем переменные окружения перед импортом модулей
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "colored")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("DB_PASSWORD", "test_password")


CREATED_AT = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
UPDATED_AT = datetime(2024, 1, 2, 12, 30, 0, tzinfo=timezone.utc)


# =============================================================================
# ФИКСТУРЫ БД
# =============================================================================

@pytest.fixture
def mock_db() -> MagicMock:
    """Мок DatabaseManager для репозиториев."""
    db = MagicMock()
    db.fetch = AsyncMock()
    db.fetchrow = AsyncMock()
    db.fetchval = AsyncMock()
    db.execute = AsyncMock()
    return db


@pytest.fixture
def mock_conn() -> MagicMock:
    """Мок соединения asyncpg."""
    conn = MagicMock()
    conn.fetch = AsyncMock()
    conn.fetchrow = AsyncMock()
    conn.fetchval = AsyncMock()
    conn.execute = AsyncMock()
    return conn


@pytest.fixture
def mock_pool(mock_conn: MagicMock) -> MagicMock:
    """Мок пула asyncpg: pool.acquire() отдаёт mock_conn."""
    pool = MagicMock()
    pool.acquire.return_value.__aenter__.return_value = mock_conn
    pool.close = AsyncMock()
    return pool


# =============================================================================
# ПРИМЕРЫ СТРОК ИЗ БД
# =============================================================================

@pytest.fixture
def client_row() -> dict[str, Any]:
    """Строка таблицы clients."""
    return {
        "id": 1,
        "name": "John Doe",
        "phone": "+1234567890",
        "email": "john@example.com",
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }


@pytest.fixture
def driver_row() -> dict[str, Any]:
    """Строка таблицы drivers."""
    return {
        "id": 7,
        "name": "A",
        "phone": "123",
        "license_number": "L1",
        "rating": 4.5,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }


@pytest.fixture
def car_row() -> dict[str, Any]:
    """Строка таблицы cars."""
    return {
        "id": 3,
        "driver_id": 7,
        "brand": "Toyota",
        "model": "Camry",
        "year": 2018,
        "license_plate": "AA1234BC",
        "color": "black",
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
