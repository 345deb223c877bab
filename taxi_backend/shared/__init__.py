# taxi_backend/shared/__init__.py
"""
Общие модели, используемые всеми слоями.
"""
