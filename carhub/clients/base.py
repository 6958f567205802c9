"""Collaborator protocols consumed by :class:`carhub.services.car.CarService`."""

from __future__ import annotations

from typing import Protocol

from carhub.schemas.location import Location


class PriceLookup(Protocol):
    async def get_price(self, vehicle_id: int) -> str:
        """Return ``"<currency> <amount>"`` or raise ``PriceNotFoundError``."""
        ...


class AddressLookup(Protocol):
    async def get_address(self, location: Location) -> Location:
        """Return a copy of ``location`` with its address filled in. Never raises."""
        ...
