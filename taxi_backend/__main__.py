#!/usr/bin/env python3
# taxi_backend/__main__.py
"""
Точка входа Taxi Backend.
Запуск: python -m taxi_backend (или консольная команда taxi-backend).
"""

from __future__ import annotations

import asyncio
import sys

from taxi_backend.app import create_app
from taxi_backend.common.constants import TypeMsg
from taxi_backend.common.logger import get_logger, log_info, setup_logging
from taxi_backend.config import settings
from taxi_backend.server import run_server


async def main() -> None:
    """Настраивает логирование, собирает приложение и запускает сервер."""
    setup_logging()
    await log_info(
        f"Configuration loaded: port={settings.server.SERVER_PORT}",
        type_msg=TypeMsg.INFO,
    )

    app = create_app()
    await run_server(app)


def run() -> None:
    try:
        asyncio.run(main())
    except Exception as e:
        get_logger().error(f"Server stopped with error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
