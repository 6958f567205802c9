"""Price CRUD router (pricing app)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from carhub.core.response import DataResponse, ListResponse
from carhub.db.base import get_db
from carhub.schemas.price import PriceCreate, PriceOut, PriceUpdate
from carhub.services.price import PriceService

router = APIRouter(prefix="/prices", tags=["Prices"])


def _svc(session: AsyncSession) -> PriceService:
    return PriceService(session)


@router.get("", response_model=ListResponse[PriceOut])
async def list_prices(session: AsyncSession = Depends(get_db)):
    items = await _svc(session).list_prices()
    return {"data": [PriceOut.model_validate(p) for p in items]}


@router.get("/search/by-vehicle", response_model=ListResponse[PriceOut])
async def find_by_vehicle(
    vehicle_id: int = Query(alias="vehicleId", gt=0),
    session: AsyncSession = Depends(get_db),
):
    """All price rows recorded for one vehicle."""
    items = await _svc(session).find_by_vehicle_id(vehicle_id)
    return {"data": [PriceOut.model_validate(p) for p in items]}


@router.post("", response_model=DataResponse[PriceOut], status_code=status.HTTP_201_CREATED)
async def create_price(body: PriceCreate, session: AsyncSession = Depends(get_db)):
    price = await _svc(session).create_price(body)
    return {"data": PriceOut.model_validate(price)}


@router.get("/{price_id}", response_model=DataResponse[PriceOut])
async def get_price(price_id: int, session: AsyncSession = Depends(get_db)):
    price = await _svc(session).get_price(price_id)
    return {"data": PriceOut.model_validate(price)}


@router.put("/{price_id}", response_model=DataResponse[PriceOut])
async def update_price(
    price_id: int,
    body: PriceUpdate,
    session: AsyncSession = Depends(get_db),
):
    price = await _svc(session).update_price(price_id, body)
    return {"data": PriceOut.model_validate(price)}


@router.delete("/{price_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_price(price_id: int, session: AsyncSession = Depends(get_db)):
    await _svc(session).delete_price(price_id)
