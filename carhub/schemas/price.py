"""Price Pydantic schemas (request DTOs and response models)."""


from datetime import datetime
from decimal import Decimal

from pydantic import Field

from carhub.schemas.common import CamelModel

class PriceCreate(CamelModel):
    currency: str = Field(default="USD", min_length=3, max_length=3)
    price: Decimal = Field(ge=0, decimal_places=2)
    vehicle_id: int = Field(gt=0)

class PriceUpdate(CamelModel):
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    price: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    vehicle_id: int | None = Field(default=None, gt=0)

class PriceOut(CamelModel):
    id: int
    currency: str
    price: Decimal
    vehicle_id: int
    created_at: datetime
    modified_at: datetime
