# taxi_backend/api/__init__.py
"""
HTTP-слой: общие зависимости и преобразование ошибок в ответы.
"""
