# Models/__init__.py
from .base import Base
from .manufacturer import Manufacturer
from .car import Car, Condition
from .price import Price

# List all models for easy access and database initialization
__all__ = [
    'Base',
    'Manufacturer',
    'Car',
    'Condition',
    'Price'
]
