"""Outbound HTTP clients used by the vehicles app.

Files:
  base.py    — One-method protocols the aggregation service depends on
  prices.py  — Pricing service client (raises on unknown vehicle)
  maps.py    — Address lookup client (never raises; synthesizes a fallback)
"""
