# taxi_backend/app.py
"""
FastAPI приложение taxi_backend.
Собирает маршруты клиентов, водителей и автомобилей, health check,
обработчики ошибок и middleware остановки сервера.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from taxi_backend.api.errors import register_exception_handlers
from taxi_backend.common.constants import TypeMsg
from taxi_backend.common.logger import log_info, setup_logging
from taxi_backend.config import settings
from taxi_backend.infra.database import DatabaseManager, close_db, init_db
from taxi_backend.server import ServerLifecycle, shutdown_guard
from taxi_backend.services.cars.routes import router as cars_router
from taxi_backend.services.clients.routes import router as clients_router
from taxi_backend.services.drivers.routes import router as drivers_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    await log_info("Starting Taxi Backend...", type_msg=TypeMsg.INFO)
    await init_db(app.state.db)
    await log_info("Database connection established", type_msg=TypeMsg.INFO)

    yield

    # Shutdown
    await log_info("Stopping Taxi Backend...", type_msg=TypeMsg.INFO)
    await close_db(app.state.db)


def create_app(db: DatabaseManager | None = None) -> FastAPI:
    """
    Создаёт приложение.

    Args:
        db: Менеджер БД; по умолчанию создаётся новый, пул открывается в lifespan
    """
    app = FastAPI(
        title="Taxi Backend",
        description="REST API для клиентов, водителей и автомобилей таксопарка",
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.state.db = db or DatabaseManager()
    app.state.lifecycle = ServerLifecycle(grace_period=settings.server.GRACEFUL_SHUTDOWN_TIMEOUT)

    register_exception_handlers(app)
    app.middleware("http")(shutdown_guard)

    app.include_router(clients_router, prefix="/api")
    app.include_router(drivers_router, prefix="/api")
    app.include_router(cars_router, prefix="/api")

    @app.get("/health", response_class=PlainTextResponse)
    async def health_check():
        # Не зависит от состояния БД
        return PlainTextResponse("OK")

    return app


app = create_app()
