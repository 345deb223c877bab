# taxi_backend/shared/models/common.py
"""
Общие модели для всех сущностей.
"""

from __future__ import annotations

from pydantic import BaseModel


class EntityRequest(BaseModel):
    """
    Базовая проекция для создания/обновления сущности.

    Поля id, created_at и updated_at назначает сервер, поэтому
    неизвестные ключи в теле запроса просто игнорируются. Типы полей
    строгие: строка "2020" не считается годом.
    """

    class Config:
        strict = True

    def is_valid(self) -> bool:
        """Доменное правило проекции. По умолчанию ограничений нет."""
        return True


class ErrorResponse(BaseModel):
    """Тело ответа с ошибкой: {"errors": "<сообщение>"}."""

    errors: str
