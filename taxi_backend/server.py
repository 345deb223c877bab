# taxi_backend/server.py
"""
HTTP-сервер и протокол graceful shutdown.

Сервер живёт в двух состояниях: RUNNING и SHUTTING_DOWN. SIGINT/SIGTERM
переводят его в SHUTTING_DOWN; запрос, пришедший после этого, не доходит
до маршрутов: он ждёт окно GRACEFUL_SHUTDOWN_TIMEOUT и получает 500.
uvicorn тем временем перестаёт принимать соединения, ждёт активные
запросы то же окно и закрывает сокет.
"""

from __future__ import annotations

import asyncio
from types import FrameType
from typing import Awaitable, Callable

import uvicorn
from fastapi import FastAPI, Request, Response, status

from taxi_backend.common.constants import ServerState, TypeMsg
from taxi_backend.common.logger import get_logger, log_info


class ServerLifecycle:
    """Состояние сервера, общее для обработчика сигналов и middleware."""

    def __init__(self, grace_period: float) -> None:
        self.grace_period = grace_period
        self.state = ServerState.RUNNING

    @property
    def is_shutting_down(self) -> bool:
        return self.state is ServerState.SHUTTING_DOWN

    def begin_shutdown(self, sig: int | None = None) -> None:
        """Переход RUNNING -> SHUTTING_DOWN. Повторные вызовы ничего не делают."""
        if self.is_shutting_down:
            return
        self.state = ServerState.SHUTTING_DOWN
        # Вызывается из обработчика сигнала, поэтому логируем синхронно
        get_logger().warning("Shutting down server...", extra={"extra_data": {"signal": sig}})


async def shutdown_guard(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Не пускает запросы к маршрутам после начала остановки."""
    lifecycle: ServerLifecycle = request.app.state.lifecycle
    if lifecycle.is_shutting_down:
        await asyncio.sleep(lifecycle.grace_period)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return await call_next(request)


class TaxiServer(uvicorn.Server):
    """uvicorn.Server, который сообщает о сигнале остановки в ServerLifecycle."""

    def __init__(self, config: uvicorn.Config, lifecycle: ServerLifecycle) -> None:
        super().__init__(config)
        self.lifecycle = lifecycle

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        self.lifecycle.begin_shutdown(sig)
        super().handle_exit(sig, frame)


def build_server(app: FastAPI) -> TaxiServer:
    """Собирает uvicorn-сервер по настройкам приложения."""
    from taxi_backend.config import settings

    config = uvicorn.Config(
        app,
        host=settings.server.SERVER_HOST,
        port=settings.server.SERVER_PORT,
        timeout_keep_alive=settings.server.SERVER_TIMEOUT,
        timeout_graceful_shutdown=settings.server.GRACEFUL_SHUTDOWN_TIMEOUT,
        log_level=settings.logging.LOG_LEVEL.lower(),
    )
    return TaxiServer(config, app.state.lifecycle)


async def run_server(app: FastAPI) -> None:
    """
    Запускает сервер и ждёт завершения.
    Ошибка запуска (например, занятый порт) пробрасывается вызывающему.
    """
    server = build_server(app)

    await log_info(
        "Server running on port",
        type_msg=TypeMsg.INFO,
        extra={"port": server.config.port},
    )

    await server.serve()

    if not server.started:
        raise RuntimeError(f"Server failed to start on port {server.config.port}")

    await log_info("Server shut down", type_msg=TypeMsg.INFO)
