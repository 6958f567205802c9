"""SQLAlchemy ORM model for Cars.

Vehicle details are kept as an opaque JSON document; the aggregation service
never looks inside them. The location is flattened into columns and exposed as
a :class:`~carhub.schemas.location.Location` value through ``Car.location``.
"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import JSON, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from carhub.db.base import Base
from carhub.domain.mixins import TimestampMixin
from carhub.schemas.location import Location


class Car(Base, TimestampMixin):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # "USED" | "NEW"
    condition: Mapped[str] = mapped_column(String(20), default="USED", nullable=False)
    details: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)

    # Location
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lon: Mapped[float] = mapped_column(Float, nullable=False)
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    zip: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # Formatted "<currency> <amount>" as returned by the pricing service
    price: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    @property
    def location(self) -> Location:
        return Location(
            lat=self.lat,
            lon=self.lon,
            address=self.address,
            city=self.city,
            state=self.state,
            zip=self.zip,
        )

    @location.setter
    def location(self, value: Location) -> None:
        self.lat = value.lat
        self.lon = value.lon
        self.address = value.address
        self.city = value.city
        self.state = value.state
        self.zip = value.zip
