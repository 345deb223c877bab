# taxi_backend/services/__init__.py
"""
Сервисы сущностей: клиенты, водители, автомобили.
Каждый пакет содержит репозиторий, use-case, зависимости и HTTP-маршруты.
"""
