"""Price lookup endpoint — the contract the vehicles app's PriceClient depends on.

Returns the bare price object (no envelope) so the client can read
``currency`` and ``price`` directly.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from carhub.db.base import get_db
from carhub.schemas.price import PriceOut
from carhub.services.price import PriceService

router = APIRouter(prefix="/services", tags=["Price lookup"])


@router.get("/price", response_model=PriceOut)
async def lookup_price(
    vehicle_id: int = Query(alias="vehicleId", gt=0),
    session: AsyncSession = Depends(get_db),
):
    price = await PriceService(session).lookup(vehicle_id)
    return PriceOut.model_validate(price)
