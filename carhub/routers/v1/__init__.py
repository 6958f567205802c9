"""v1 router package — all /api/v1/* endpoints live here.

Files:
  cars.py    — Vehicle registry (vehicles app)
  prices.py  — Price CRUD (pricing app)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to carhub/services/.
"""
