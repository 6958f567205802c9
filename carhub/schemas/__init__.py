"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  location.py  — Location value passed to and returned by the maps client
  car.py       — Car request DTOs and response model
  price.py     — Price request DTOs and response model
"""
