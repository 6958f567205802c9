"""SQLAlchemy ORM model for Prices (pricing service)."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from carhub.db.base import Base
from carhub.domain.mixins import TimestampMixin


class Price(Base, TimestampMixin):
    __tablename__ = "prices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    currency: Mapped[str] = mapped_column(String(3), default="USD", nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    vehicle_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
