"""Address lookup client.

Queries a maps backend when one is configured. The lookup is not allowed to
fail: if the backend is missing, unreachable, or returns garbage, a plausible
address is synthesized instead so callers never need error handling here.
"""

from __future__ import annotations

import logging
import random

import httpx

from carhub.schemas.location import Location

logger = logging.getLogger(__name__)

# (street, city, state, zip)
MOCK_ADDRESSES: tuple[tuple[str, str, str, str], ...] = (
    ("Adams St", "Chicago", "IL", "60603"),
    ("Broadway", "New York", "NY", "10007"),
    ("Colfax Ave", "Denver", "CO", "80202"),
    ("Congress Ave", "Austin", "TX", "78701"),
    ("Market St", "San Francisco", "CA", "94103"),
    ("Peachtree St NE", "Atlanta", "GA", "30303"),
    ("Pike St", "Seattle", "WA", "98101"),
    ("Washington St", "Boston", "MA", "02108"),
    ("Main St", "Colorado Springs", "CO", "80903"),
    ("Central Ave", "Phoenix", "AZ", "85004"),
)


class MapsClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/") if base_url else None
        self._rng = rng or random.Random()

    async def get_address(self, location: Location) -> Location:
        """Return a copy of *location* with address, city, state and zip filled in."""
        if self._base_url:
            try:
                return await self._lookup(location)
            except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
                logger.warning(
                    "Maps lookup for (%s, %s) failed, synthesizing address: %s",
                    location.lat, location.lon, exc,
                )
        return self.synthesize(location)

    async def _lookup(self, location: Location) -> Location:
        response = await self._http.get(
            f"{self._base_url}/maps",
            params={"lat": location.lat, "lon": location.lon},
        )
        response.raise_for_status()
        data = response.json()
        return location.model_copy(
            update={
                "address": data["address"],
                "city": data.get("city"),
                "state": data.get("state"),
                "zip": data.get("zip"),
            }
        )

    def synthesize(self, location: Location) -> Location:
        street, city, state, zip_code = self._rng.choice(MOCK_ADDRESSES)
        number = self._rng.randint(100, 9999)
        return location.model_copy(
            update={
                "address": f"{number} {street}",
                "city": city,
                "state": state,
                "zip": zip_code,
            }
        )
