# taxi_backend/__init__.py
"""
Taxi Backend: REST API для клиентов, водителей и автомобилей таксопарка.
"""

__version__ = "1.0.0"
