# taxi_backend/common/__init__.py
"""
Общие утилиты, константы, исключения и логгер.
"""

from taxi_backend.common.logger import get_logger, log_info, log_error, log_warning, log_debug
from taxi_backend.common.constants import TypeMsg
from taxi_backend.common.exceptions import (
    TaxiBackendError,
    InputError,
    ValidationError,
    NotFoundError,
    StoreError,
)

__all__ = [
    "get_logger",
    "log_info",
    "log_error",
    "log_warning",
    "log_debug",
    "TypeMsg",
    "TaxiBackendError",
    "InputError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
]
