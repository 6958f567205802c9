"""Price service — CRUD over price rows plus the per-vehicle lookup the vehicles app calls."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from carhub.core.exceptions import NotFoundError, PriceNotFoundError
from carhub.domain.price import Price
from carhub.repositories.price import PriceRepository
from carhub.schemas.price import PriceCreate, PriceUpdate

logger = logging.getLogger(__name__)

_SEED_BASE = Decimal("5000")
_CENTS = Decimal("0.01")


def random_price(rng: random.Random) -> Decimal:
    """Amount in [5000, 25000), rounded half-up to cents."""
    factor = Decimal(str(rng.uniform(1, 5)))
    return (factor * _SEED_BASE).quantize(_CENTS, rounding=ROUND_HALF_UP)


class PriceService:
    def __init__(self, session: AsyncSession):
        self._repo = PriceRepository(session)

    async def list_prices(self) -> list[Price]:
        return await self._repo.find_all()

    async def get_price(self, price_id: int) -> Price:
        price = await self._repo.find_by_id(price_id)
        if not price:
            raise NotFoundError("Price", price_id)
        return price

    async def find_by_vehicle_id(self, vehicle_id: int) -> list[Price]:
        return await self._repo.find_by_vehicle_id(vehicle_id)

    async def lookup(self, vehicle_id: int) -> Price:
        """Return the price for a vehicle; the first row wins if several exist."""
        prices = await self._repo.find_by_vehicle_id(vehicle_id)
        if not prices:
            raise PriceNotFoundError(vehicle_id)
        return prices[0]

    async def create_price(self, data: PriceCreate) -> Price:
        return await self._repo.save(Price(**data.model_dump()))

    async def update_price(self, price_id: int, data: PriceUpdate) -> Price:
        price = await self.get_price(price_id)  # raises 404 if missing
        for field, value in data.model_dump(exclude_none=True, exclude_unset=True).items():
            setattr(price, field, value)
        return await self._repo.save(price)

    async def delete_price(self, price_id: int) -> None:
        price = await self.get_price(price_id)
        await self._repo.delete(price)

    async def seed_prices(
        self, vehicle_ids: Iterable[int], rng: random.Random | None = None
    ) -> int:
        """Give each vehicle id a random USD price, but only into an empty table."""
        if await self._repo.count():
            return 0
        rng = rng or random.Random()
        seeded = 0
        for vehicle_id in vehicle_ids:
            await self._repo.save(
                Price(currency="USD", price=random_price(rng), vehicle_id=vehicle_id)
            )
            seeded += 1
        logger.info("Seeded %d vehicle prices", seeded)
        return seeded
