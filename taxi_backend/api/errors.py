# taxi_backend/api/errors.py
"""
Преобразование исключений в HTTP-ответы.

Единственное место, где ошибка получает статус-код. Клиент видит только
{"errors": "<сообщение>"} из фиксированного словаря, подробности пишутся в лог.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taxi_backend.common.constants import (
    ERROR_BAD_REQUEST,
    ERROR_FORBIDDEN,
    ERROR_INTERNAL,
    ERROR_INVALID_CREDENTIALS,
)
from taxi_backend.common.exceptions import InputError, NotFoundError, StoreError, TaxiBackendError
from taxi_backend.common.logger import log_error, log_warning
from taxi_backend.shared.models.common import ErrorResponse


def error_message(status_code: int) -> str:
    """Выбирает сообщение для клиента по статус-коду."""
    match status_code:
        case status.HTTP_400_BAD_REQUEST:
            return ERROR_BAD_REQUEST
        case status.HTTP_401_UNAUTHORIZED:
            return ERROR_INVALID_CREDENTIALS
        case status.HTTP_403_FORBIDDEN:
            return ERROR_FORBIDDEN
        case _:
            return ERROR_INTERNAL


def error_response(status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(errors=error_message(status_code)).model_dump(),
    )


def status_for(exc: Exception) -> int:
    """Классифицирует исключение приложения."""
    if isinstance(exc, InputError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _handler_name(request: Request) -> str:
    endpoint = request.scope.get("endpoint")
    return getattr(endpoint, "__name__", request.url.path)


async def _log_failure(request: Request, status_code: int, detail: object, exc_info: bool = False) -> None:
    extra = {
        "handler": _handler_name(request),
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
    }
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        await log_error(str(detail), extra=extra, exc_info=exc_info)
    else:
        await log_warning(str(detail), extra=extra)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TaxiBackendError)
    async def _handle_app_error(request: Request, exc: TaxiBackendError) -> JSONResponse:
        status_code = status_for(exc)
        await _log_failure(request, status_code, exc, exc_info=isinstance(exc, StoreError))
        return error_response(status_code)

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Кривой ID в пути, битый JSON или неверные типы полей
        await _log_failure(request, status.HTTP_400_BAD_REQUEST, exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        await _log_failure(request, exc.status_code, exc.detail)
        return error_response(exc.status_code)

    @app.exception_handler(Exception)
    async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        await _log_failure(request, status.HTTP_500_INTERNAL_SERVER_ERROR, repr(exc), exc_info=True)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR)
