"""Car router — vehicle registry endpoints.

Reads (list / get) come back enriched with price and address; creates are
stored as sent. PUT replaces details, location, price and condition of an
existing car.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from carhub.clients.maps import MapsClient
from carhub.clients.prices import PriceClient
from carhub.core.config import settings
from carhub.core.response import DataResponse, ListResponse
from carhub.db.base import get_db
from carhub.domain.car import Car
from carhub.repositories.car import CarRepository
from carhub.schemas.car import CarIn, CarOut
from carhub.services.car import CarService

router = APIRouter(prefix="/cars", tags=["Cars"])


# ------------------------------------------------------------------
# Dependencies — one shared httpx client per app (opened in lifespan)
# ------------------------------------------------------------------

def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_price_client(http: httpx.AsyncClient = Depends(get_http_client)) -> PriceClient:
    return PriceClient(http, settings.pricing_base_url)


def get_maps_client(http: httpx.AsyncClient = Depends(get_http_client)) -> MapsClient:
    return MapsClient(http, settings.maps_base_url)


def get_car_service(
    session: AsyncSession = Depends(get_db),
    price_client: PriceClient = Depends(get_price_client),
    maps_client: MapsClient = Depends(get_maps_client),
) -> CarService:
    return CarService(CarRepository(session), price_client, maps_client)


def _to_car(body: CarIn, car_id: int | None = None) -> Car:
    return Car(
        id=car_id,
        condition=body.condition.value,
        details=body.details.model_dump(exclude_none=True),
        location=body.location,
        price=body.price,
    )


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[CarOut])
async def list_cars(svc: CarService = Depends(get_car_service)):
    """List all cars, each enriched with its current price and address."""
    cars = await svc.list()
    return {"data": [CarOut.model_validate(c) for c in cars]}


@router.post("", response_model=DataResponse[CarOut], status_code=status.HTTP_201_CREATED)
async def create_car(body: CarIn, svc: CarService = Depends(get_car_service)):
    """Register a new car. Price and address are not looked up on creation."""
    car = await svc.save(_to_car(body))
    return {"data": CarOut.model_validate(car)}


@router.get("/{car_id}", response_model=DataResponse[CarOut])
async def get_car(car_id: int, svc: CarService = Depends(get_car_service)):
    car = await svc.find_by_id(car_id)
    return {"data": CarOut.model_validate(car)}


@router.put("/{car_id}", response_model=DataResponse[CarOut])
async def update_car(car_id: int, body: CarIn, svc: CarService = Depends(get_car_service)):
    car = await svc.save(_to_car(body, car_id))
    return {"data": CarOut.model_validate(car)}


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(car_id: int, svc: CarService = Depends(get_car_service)):
    await svc.delete(car_id)
