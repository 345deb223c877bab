from fastapi import Request
from taxi_backend.infra.database import DatabaseManager

def get_database(request: Request) -> DatabaseManager:
    # Пул создаётся в lifespan приложения и живёт в app.state
    return request.app.state.db
