# taxi_backend/infra/database.py
"""
Менеджер базы данных PostgreSQL.
Реализует пул соединений, повтор подключения при старте и создание схемы.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from functools import wraps
from pathlib import Path
from typing import Any, AsyncGenerator, Callable, TypeVar

import asyncpg
from asyncpg import Connection, Pool, Record

from taxi_backend.common.constants import TypeMsg
from taxi_backend.common.exceptions import StoreError
from taxi_backend.common.logger import log_debug, log_error, log_info, log_warning

T = TypeVar("T")

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

# Произвольный ID advisory-лока для создания таблиц
SCHEMA_LOCK_ID = 715_300_001

CONNECTION_ERRORS = (
    asyncpg.PostgresConnectionError,
    asyncpg.InterfaceError,
    ConnectionRefusedError,
    OSError,
)


def retry_on_connection_error(
    max_attempts: int = 3,
    delay: float = 1.0,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Декоратор для повторного подключения при ошибках соединения.
    Используется только при старте: запросы не повторяются.

    Args:
        max_attempts: Максимальное количество попыток
        delay: Базовая задержка между попытками (секунды)
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            last_error: Exception | None = None

            for attempt in range(1, max_attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except CONNECTION_ERRORS as e:
                    last_error = e
                    if attempt < max_attempts:
                        await log_warning(f"Ошибка подключения к БД (попытка {attempt}/{max_attempts}): {e}")
                        await asyncio.sleep(delay * attempt)
                    else:
                        await log_error(f"Не удалось подключиться к БД после {max_attempts} попыток: {e}")

            raise last_error  # type: ignore

        return wrapper  # type: ignore

    return decorator


def wrap_store_errors(func: Callable[..., T]) -> Callable[..., T]:
    """Переводит ошибки asyncpg и сети в StoreError, сохраняя исходную причину."""
    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except StoreError:
            raise
        except (asyncpg.PostgresError, *CONNECTION_ERRORS) as e:
            raise StoreError(str(e) or e.__class__.__name__) from e

    return wrapper  # type: ignore


class DatabaseManager:
    """
    Менеджер подключений к PostgreSQL.

    Экземпляр создаётся при старте приложения и передаётся в репозитории
    явно; глобального состояния нет.
    """

    def __init__(self, pool: Pool | None = None) -> None:
        self._pool = pool

    @property
    def pool(self) -> Pool:
        """Возвращает пул соединений."""
        if self._pool is None:
            raise StoreError("Пул соединений не инициализирован. Вызовите connect() сначала.")
        return self._pool

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(
        self,
        dsn: str,
        min_size: int = 1,
        max_size: int = 10,
        command_timeout: int = 60,
        attempts: int = 3,
        delay: float = 1.0,
    ) -> None:
        """
        Создаёт пул соединений к PostgreSQL.

        Args:
            dsn: DSN строка подключения
            min_size: Минимальный размер пула
            max_size: Максимальный размер пула
            command_timeout: Таймаут команд (секунды)
            attempts: Количество попыток подключения
            delay: Базовая задержка между попытками (секунды)
        """
        if self.is_connected:
            return

        await log_info("Подключение к PostgreSQL...", type_msg=TypeMsg.INFO)

        @retry_on_connection_error(max_attempts=attempts, delay=delay)
        async def _create_pool() -> Pool:
            pool = await asyncpg.create_pool(
                dsn=dsn,
                min_size=min_size,
                max_size=max_size,
                command_timeout=command_timeout,
            )
            # Проверяем соединение сразу после создания пула
            async with pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return pool

        self._pool = await _create_pool()

        await log_info("Подключение к PostgreSQL установлено", type_msg=TypeMsg.INFO)

    async def disconnect(self) -> None:
        """Закрывает пул соединений."""
        if self.is_connected:
            await self._pool.close()
            self._pool = None
            await log_info("Соединение с PostgreSQL закрыто", type_msg=TypeMsg.INFO)

    @asynccontextmanager
    async def acquire(self) -> AsyncGenerator[Connection, None]:
        """
        Контекстный менеджер для получения соединения из пула.

        Example:
            async with db.acquire() as conn:
                result = await conn.fetch("SELECT * FROM clients")
        """
        async with self.pool.acquire() as connection:
            yield connection

    @wrap_store_errors
    async def execute(self, query: str, *args: Any) -> str:
        """
        Выполняет SQL запрос без возврата данных.

        Returns:
            Статус выполнения (например, 'DELETE 1')
        """
        async with self.acquire() as conn:
            return await conn.execute(query, *args)

    @wrap_store_errors
    async def fetch(self, query: str, *args: Any) -> list[Record]:
        """Выполняет SQL запрос и возвращает все строки."""
        async with self.acquire() as conn:
            return await conn.fetch(query, *args)

    @wrap_store_errors
    async def fetchrow(self, query: str, *args: Any) -> Record | None:
        """Выполняет SQL запрос и возвращает одну строку или None."""
        async with self.acquire() as conn:
            return await conn.fetchrow(query, *args)

    @wrap_store_errors
    async def init_schema(self) -> None:
        """
        Создаёт таблицы clients, drivers, cars, если их ещё нет.
        Advisory-лок не даёт параллельно стартующим процессам гоняться за DDL.
        """
        schema_sql = SCHEMA_PATH.read_text(encoding="utf-8")

        await log_debug("Применение схемы БД...")

        async with self.acquire() as conn:
            async with conn.transaction():
                await conn.execute("SELECT pg_advisory_xact_lock($1)", SCHEMA_LOCK_ID)
                await conn.execute(schema_sql)

        await log_info("Схема БД успешно применена", type_msg=TypeMsg.INFO)


async def init_db(db: DatabaseManager) -> None:
    """
    Подключается к базе данных и создаёт схему.
    Использует настройки из конфигурации.
    """
    from taxi_backend.config import settings

    await db.connect(
        dsn=settings.database.dsn,
        min_size=settings.database.DB_MIN_POOL_SIZE,
        max_size=settings.database.DB_MAX_POOL_SIZE,
        command_timeout=settings.database.DB_COMMAND_TIMEOUT,
        attempts=settings.database.DB_CONNECT_ATTEMPTS,
        delay=settings.database.DB_CONNECT_DELAY,
    )
    await db.init_schema()


async def close_db(db: DatabaseManager) -> None:
    """Закрывает подключение к базе данных."""
    await db.disconnect()
