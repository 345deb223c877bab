# taxi_backend/common/constants.py
"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ServerState(str, Enum):
    """Состояния HTTP-сервера."""
    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"


# Допустимый диапазон идентификаторов (колонки SERIAL)
MIN_ENTITY_ID = 0
MAX_ENTITY_ID = 2_147_483_647

# Доменные ограничения
MIN_DRIVER_RATING = 0.0
MIN_CAR_YEAR = 1950

# Фиксированный словарь сообщений об ошибках для клиента
ERROR_BAD_REQUEST = "bad request"
ERROR_INVALID_CREDENTIALS = "invalid credentials"
ERROR_FORBIDDEN = "forbidden"
ERROR_INTERNAL = "internal server error"
