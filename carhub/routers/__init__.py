"""Routers package — HTTP endpoint definitions.

Files:
  price_lookup.py  — Inter-service price lookup (/services/price), called by the vehicles app
  v1/              — Versioned API routes (/api/v1/*)
"""
