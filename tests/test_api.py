from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from carhub.db.base import get_db
from carhub.main import create_pricing_app, create_vehicles_app
from carhub.repositories.car import CarRepository
from carhub.routers.v1.cars import get_maps_client, get_price_client

from conftest import FakeMapsClient, FakePriceClient

CAR_BODY = {
    "condition": "USED",
    "details": {
        "body": "sedan",
        "model": "Impala",
        "manufacturer": {"code": 101, "name": "Chevrolet"},
        "numberOfDoors": 4,
        "fuelType": "Gasoline",
        "engine": "3.6L V6",
        "mileage": 32280,
        "modelYear": 2018,
        "productionYear": 2018,
        "externalColor": "white",
    },
    "location": {"lat": 40.730610, "lon": -73.935242},
}


def _override_db(app, session_factory) -> None:
    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db


@pytest_asyncio.fixture
async def vehicles_api(session_factory):
    app = create_vehicles_app()
    _override_db(app, session_factory)
    prices = FakePriceClient({1: "USD 5000.00", 2: "USD 6100.25"})
    maps = FakeMapsClient("350 Fifth Ave")
    app.dependency_overrides[get_price_client] = lambda: prices
    app.dependency_overrides[get_maps_client] = lambda: maps
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def pricing_api(session_factory):
    app = create_pricing_app()
    _override_db(app, session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


# ---------------------------------------------------------------------------
# Vehicles app
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_car_returns_unenriched_car(vehicles_api: AsyncClient) -> None:
    resp = await vehicles_api.post("/api/v1/cars", json=CAR_BODY)

    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["id"] == 1
    assert data["price"] is None
    assert data["location"]["address"] is None
    assert data["details"]["model"] == "Impala"
    assert data["details"]["numberOfDoors"] == 4


@pytest.mark.asyncio
async def test_get_car_is_enriched(vehicles_api: AsyncClient) -> None:
    await vehicles_api.post("/api/v1/cars", json=CAR_BODY)

    resp = await vehicles_api.get("/api/v1/cars/1")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["price"] == "USD 5000.00"
    assert data["location"]["address"] == "350 Fifth Ave"
    assert "createdAt" in data and "modifiedAt" in data


@pytest.mark.asyncio
async def test_list_cars(vehicles_api: AsyncClient) -> None:
    await vehicles_api.post("/api/v1/cars", json=CAR_BODY)
    await vehicles_api.post("/api/v1/cars", json={**CAR_BODY, "condition": "NEW"})

    resp = await vehicles_api.get("/api/v1/cars")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [c["id"] for c in data] == [1, 2]
    assert [c["price"] for c in data] == ["USD 5000.00", "USD 6100.25"]
    assert data[1]["condition"] == "NEW"


@pytest.mark.asyncio
async def test_update_car_replaces_mutable_fields(vehicles_api: AsyncClient) -> None:
    await vehicles_api.post("/api/v1/cars", json=CAR_BODY)
    body = {
        **CAR_BODY,
        "condition": "NEW",
        "details": {**CAR_BODY["details"], "model": "Malibu"},
        "price": "USD 1.00",
    }

    resp = await vehicles_api.put("/api/v1/cars/1", json=body)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["id"] == 1
    assert data["details"]["model"] == "Malibu"
    assert data["condition"] == "NEW"
    assert data["price"] == "USD 1.00"


@pytest.mark.asyncio
async def test_missing_car_is_404(vehicles_api: AsyncClient) -> None:
    for method, kwargs in (("GET", {}), ("PUT", {"json": CAR_BODY}), ("DELETE", {})):
        resp = await vehicles_api.request(method, "/api/v1/cars/42", **kwargs)
        assert resp.status_code == 404
        assert resp.json() == {"error": {"code": "CAR_NOT_FOUND", "message": "Car 42 not found"}}


@pytest.mark.asyncio
async def test_delete_car(vehicles_api: AsyncClient) -> None:
    await vehicles_api.post("/api/v1/cars", json=CAR_BODY)

    assert (await vehicles_api.delete("/api/v1/cars/1")).status_code == 204
    assert (await vehicles_api.get("/api/v1/cars/1")).status_code == 404


@pytest.mark.asyncio
async def test_unknown_price_surfaces_as_error(vehicles_api: AsyncClient) -> None:
    for _ in range(3):
        await vehicles_api.post("/api/v1/cars", json=CAR_BODY)

    resp = await vehicles_api.get("/api/v1/cars/3")

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "PRICE_NOT_FOUND"


@pytest.mark.asyncio
async def test_failed_list_keeps_cars_enriched_before_the_fault(
    vehicles_api: AsyncClient, session_factory
) -> None:
    for _ in range(3):
        await vehicles_api.post("/api/v1/cars", json=CAR_BODY)

    resp = await vehicles_api.get("/api/v1/cars")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "PRICE_NOT_FOUND"

    async with session_factory() as session:
        cars = await CarRepository(session).find_all()
    assert [(c.id, c.price, c.address) for c in cars] == [
        (1, "USD 5000.00", "350 Fifth Ave"),
        (2, "USD 6100.25", "350 Fifth Ave"),
        (3, None, None),
    ]


@pytest.mark.asyncio
async def test_create_car_validates_body(vehicles_api: AsyncClient) -> None:
    resp = await vehicles_api.post("/api/v1/cars", json={"condition": "USED"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_health(vehicles_api: AsyncClient) -> None:
    resp = await vehicles_api.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# ---------------------------------------------------------------------------
# Pricing app
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_price_lookup_contract(pricing_api: AsyncClient) -> None:
    created = await pricing_api.post(
        "/api/v1/prices", json={"currency": "USD", "price": "5000.00", "vehicleId": 1}
    )
    assert created.status_code == 201

    resp = await pricing_api.get("/services/price", params={"vehicleId": 1})

    assert resp.status_code == 200
    body = resp.json()
    assert body["currency"] == "USD"
    assert body["vehicleId"] == 1
    assert float(body["price"]) == 5000.0


@pytest.mark.asyncio
async def test_price_lookup_unknown_vehicle_is_404(pricing_api: AsyncClient) -> None:
    resp = await pricing_api.get("/services/price", params={"vehicleId": 77})
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "PRICE_NOT_FOUND"


@pytest.mark.asyncio
async def test_price_crud(pricing_api: AsyncClient) -> None:
    created = (await pricing_api.post(
        "/api/v1/prices", json={"price": "12.50", "vehicleId": 3}
    )).json()["data"]

    listed = (await pricing_api.get("/api/v1/prices")).json()["data"]
    assert [p["id"] for p in listed] == [created["id"]]

    by_vehicle = await pricing_api.get("/api/v1/prices/search/by-vehicle", params={"vehicleId": 3})
    assert [p["id"] for p in by_vehicle.json()["data"]] == [created["id"]]

    updated = await pricing_api.put(f"/api/v1/prices/{created['id']}", json={"currency": "EUR"})
    assert updated.json()["data"]["currency"] == "EUR"

    assert (await pricing_api.delete(f"/api/v1/prices/{created['id']}")).status_code == 204
    assert (await pricing_api.get(f"/api/v1/prices/{created['id']}")).status_code == 404
