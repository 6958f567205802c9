"""Location value object: coordinates plus the address the maps client resolves."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from carhub.schemas.common import CamelModel


class Location(CamelModel):
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
