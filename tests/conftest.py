from __future__ import annotations

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import carhub.domain  # noqa: F401  (registers every table on Base.metadata)
from carhub.core.exceptions import PriceNotFoundError
from carhub.db.base import Base
from carhub.domain.car import Car
from carhub.schemas.location import Location


class FakePriceClient:
    """Deterministic price lookup; unknown ids raise like the real client."""

    def __init__(self, prices: dict[int, str] | None = None):
        self.prices = prices or {}
        self.calls: list[int] = []

    async def get_price(self, vehicle_id: int) -> str:
        self.calls.append(vehicle_id)
        if vehicle_id not in self.prices:
            raise PriceNotFoundError(vehicle_id)
        return self.prices[vehicle_id]


class FakeMapsClient:
    def __init__(self, address: str = "123 Main St"):
        self.address = address
        self.calls: list[Location] = []

    async def get_address(self, location: Location) -> Location:
        self.calls.append(location)
        return location.model_copy(update={"address": self.address})


def make_car(model: str = "Impala", lat: float = 40.73, lon: float = -73.99, **kwargs) -> Car:
    return Car(
        id=kwargs.pop("id", None),
        condition=kwargs.pop("condition", "USED"),
        details={
            "body": "sedan",
            "model": model,
            "manufacturer": {"code": 101, "name": "Chevrolet"},
        },
        location=Location(lat=lat, lon=lon),
        **kwargs,
    )


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture
def price_client() -> FakePriceClient:
    return FakePriceClient({1: "USD 5000.00", 2: "USD 7250.50", 3: "EUR 9100.00"})


@pytest.fixture
def maps_client() -> FakeMapsClient:
    return FakeMapsClient()
