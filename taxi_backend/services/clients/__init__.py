# taxi_backend/services/clients/__init__.py
"""Клиенты таксопарка."""
