"""Car service — merges stored vehicles with a price and a resolved address.

Every read (``list`` / ``find_by_id``) enriches the car through the price and
maps clients and writes the enriched copy back to the store. Creating a car
does not enrich it. Collaborator failures are not caught: they propagate to
the caller and abort whatever is in progress, including a partial ``list``.
Write-backs are committed one car at a time, so cars enriched before a fault
stay persisted.
"""

from __future__ import annotations

import logging

from carhub.clients.base import AddressLookup, PriceLookup
from carhub.core.exceptions import CarNotFoundError
from carhub.domain.car import Car
from carhub.repositories.car import CarRepository

logger = logging.getLogger(__name__)


class CarService:
    def __init__(
        self,
        repository: CarRepository,
        price_client: PriceLookup,
        maps_client: AddressLookup,
    ):
        self._repo = repository
        self._prices = price_client
        self._maps = maps_client

    async def list(self) -> list[Car]:
        cars = await self._repo.find_all()
        for car in cars:
            await self._enrich(car)
        return cars

    async def find_by_id(self, car_id: int) -> Car:
        car = await self._repo.find_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return await self._enrich(car)

    async def save(self, car: Car) -> Car:
        """Insert a new car as-is, or copy the mutable fields onto an existing one."""
        if car.id is None:
            created = await self._repo.save(car)
            logger.info("Created car %s", created.id)
            return created

        existing = await self._repo.find_by_id(car.id)
        if existing is None:
            raise CarNotFoundError(car.id)
        existing.details = car.details
        existing.location = car.location
        existing.price = car.price
        existing.condition = car.condition
        # save() stamps modified_at on persistent rows
        return await self._repo.save(existing)

    async def delete(self, car_id: int) -> None:
        car = await self._repo.find_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        await self._repo.delete(car)
        logger.info("Deleted car %s", car_id)

    async def _enrich(self, car: Car) -> Car:
        car.price = await self._prices.get_price(car.id)
        car.location = await self._maps.get_address(car.location)
        saved = await self._repo.save(car)
        # Each write-back is committed on its own: a later fault in list()
        # must not undo cars already enriched.
        await self._repo.commit()
        return saved
