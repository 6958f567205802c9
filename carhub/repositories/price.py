"""Price repository — pricing-service persistence with a keyed vehicle lookup."""


from sqlalchemy import func, select

from carhub.domain.price import Price
from carhub.repositories.base import BaseRepository


class PriceRepository(BaseRepository[Price]):
    model = Price

    async def find_by_vehicle_id(self, vehicle_id: int) -> list[Price]:
        result = await self._session.execute(
            select(Price).where(Price.vehicle_id == vehicle_id).order_by(Price.id)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(Price))
        return result.scalar_one()
