"""HTTP client for the pricing service."""

from __future__ import annotations

import logging
from decimal import Decimal

import httpx

from carhub.core.exceptions import PriceNotFoundError, UpstreamServiceError

logger = logging.getLogger(__name__)

# Error code the pricing service puts in its body for an unknown vehicle
PRICE_NOT_FOUND = "PRICE_NOT_FOUND"


def _error_code(response: httpx.Response) -> str | None:
    try:
        return response.json()["error"]["code"]
    except (ValueError, KeyError, TypeError):
        return None


class PriceClient:
    """Fetches a vehicle's price from ``GET /services/price?vehicleId=``.

    Errors are never swallowed: an unknown vehicle raises
    :class:`PriceNotFoundError`, anything else raises :class:`UpstreamServiceError`.
    """

    def __init__(self, http: httpx.AsyncClient, base_url: str) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def get_price(self, vehicle_id: int) -> str:
        url = f"{self._base_url}/services/price"
        try:
            response = await self._http.get(url, params={"vehicleId": vehicle_id})
        except httpx.HTTPError as exc:
            logger.error("Pricing request for vehicle %s failed: %s", vehicle_id, exc)
            raise UpstreamServiceError("pricing", str(exc)) from exc

        if response.status_code == 404 and _error_code(response) == PRICE_NOT_FOUND:
            raise PriceNotFoundError(vehicle_id)
        if response.is_error:
            # A bare 404 here is a route miss, usually a wrong PRICING_BASE_URL
            logger.error(
                "Pricing service answered %s for vehicle %s (%s)",
                response.status_code, vehicle_id, response.url,
            )
            raise UpstreamServiceError("pricing", f"HTTP {response.status_code}")

        try:
            data = response.json()
            amount = Decimal(str(data["price"]))
            currency = data["currency"]
        except (ValueError, KeyError, TypeError, ArithmeticError) as exc:
            raise UpstreamServiceError("pricing", f"malformed price payload: {exc}") from exc

        return f"{currency} {amount:.2f}"
