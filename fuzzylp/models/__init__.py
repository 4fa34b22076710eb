"""Data models for fuzzy production planning."""

from .capacity import (
    Capacity,
    CrispCapacity,
    FuzzyCapacity,
    capacity_from_value,
    capacity_to_value,
)
from .product import Product
from .resource import Resource
from .usage_network import UsageNetwork

__all__ = [
    "Capacity",
    "CrispCapacity",
    "FuzzyCapacity",
    "capacity_from_value",
    "capacity_to_value",
    "Product",
    "Resource",
    "UsageNetwork",
]
