# taxi_backend/config/loader.py
"""
Загрузчик конфигурации проекта.
Все значения берутся из переменных окружения (и файла .env в корне проекта),
для каждого параметра задано значение по умолчанию.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from urllib.parse import quote

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУТЕЙ
# =============================================================================

def get_project_root() -> Path:
    """Возвращает корневую директорию проекта."""
    return Path(__file__).parent.parent.parent


# =============================================================================
# СЕКЦИИ КОНФИГУРАЦИИ
# =============================================================================

class _EnvSection(BaseSettings):
    """Секция настроек, читаемая из переменных окружения."""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class ServerSettings(_EnvSection):
    """Настройки HTTP-сервера."""
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8080
    GRACEFUL_SHUTDOWN_TIMEOUT: int = 5
    SERVER_TIMEOUT: int = 3

    @field_validator("SERVER_PORT", mode="before")
    @classmethod
    def strip_colon(cls, v: int | str) -> int | str:
        """Допускает формат ':8080'."""
        if isinstance(v, str):
            return v.lstrip(":")
        return v


class DatabaseSettings(_EnvSection):
    """Настройки PostgreSQL."""
    DATABASE_URL: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "taxi"
    DB_SSLMODE: str = "disable"
    DB_MIN_POOL_SIZE: int = 1
    DB_MAX_POOL_SIZE: int = 10
    DB_COMMAND_TIMEOUT: int = 60
    DB_CONNECT_ATTEMPTS: int = 3
    DB_CONNECT_DELAY: float = 1.0

    @property
    def dsn(self) -> str:
        """Возвращает DSN для подключения к PostgreSQL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{quote(self.DB_USER, safe='')}:{quote(self.DB_PASSWORD, safe='')}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?sslmode={self.DB_SSLMODE}"
        )


class LoggingSettings(_EnvSection):
    """Настройки логирования."""
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: str = "logs/app.log"
    LOG_MAX_BYTES: int = 10485760
    LOG_BACKUP_COUNT: int = 5

    @field_validator("LOG_FORMAT")
    @classmethod
    def check_format(cls, v: str) -> str:
        """Разрешены только форматы json и colored."""
        v = v.lower()
        if v not in ("json", "colored"):
            raise ValueError(f"Неизвестный формат логов: {v}")
        return v


# =============================================================================
# ГЛАВНЫЙ КЛАСС НАСТРОЕК
# =============================================================================

class Settings(BaseModel):
    """
    Главный класс настроек приложения.
    Агрегирует все секции конфигурации.
    """
    PROJECT_NAME: str = "taxi_backend"
    VERSION: str = "1.0.0"
    server: ServerSettings = Field(default_factory=ServerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache()
def get_settings() -> Settings:
    """
    Возвращает синглтон настроек приложения.
    Перед чтением окружения подгружает .env из корня проекта, если он есть.
    """
    env_path = get_project_root() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Settings()


# Экспорт синглтона для удобного импорта
settings = get_settings()
