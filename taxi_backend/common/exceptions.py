# taxi_backend/common/exceptions.py
"""
Иерархия исключений приложения.

Репозитории и DatabaseManager поднимают NotFoundError/StoreError,
сервисы пробрасывают их без изменений, а HTTP-слой (taxi_backend.api.errors)
единственный переводит их в статус-коды.
"""

from __future__ import annotations


class TaxiBackendError(Exception):
    """Базовое исключение приложения."""


class InputError(TaxiBackendError):
    """Некорректный параметр пути или тело запроса."""


class ValidationError(InputError):
    """Нарушено доменное правило проекции (рейтинг, год выпуска)."""

    def __init__(self, message: str = "validation failed") -> None:
        super().__init__(message)


class NotFoundError(TaxiBackendError):
    """Запись с указанным ID не найдена."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class StoreError(TaxiBackendError):
    """Ошибка хранилища: подключение, запрос или нарушение ограничения."""
