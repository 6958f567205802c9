"""Services package — all business logic lives here, never in routers.

Files:
  car.py    — Vehicle aggregation service (store + price client + maps client)
  price.py  — Pricing service CRUD, vehicle lookup and startup seeding

Rule: routers call services, services call repositories and clients.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
