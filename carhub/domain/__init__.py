"""Domain package — all ORM models are imported here so the metadata knows every table.

Folder intent:
  car.py     — Vehicle registry rows (owned by the vehicles app)
  price.py   — Price rows (owned by the pricing app)
  mixins.py  — Shared TimestampMixin
"""

from carhub.domain.car import Car
from carhub.domain.price import Price

__all__ = [
    "Car",
    "Price",
]
