"""Repositories package — the only layer that issues SQLAlchemy queries."""
