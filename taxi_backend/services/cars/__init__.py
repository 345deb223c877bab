# taxi_backend/services/cars/__init__.py
"""Автомобили водителей."""
