# taxi_backend/services/drivers/__init__.py
"""Водители таксопарка."""
