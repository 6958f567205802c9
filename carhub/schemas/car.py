"""Car Pydantic schemas (request DTOs and response models)."""


from datetime import datetime
from enum import Enum

from carhub.schemas.common import CamelModel
from carhub.schemas.location import Location

class Condition(str, Enum):
    USED = "USED"
    NEW = "NEW"

class Manufacturer(CamelModel):
    code: int
    name: str | None = None

class Details(CamelModel):
    model_config = {"protected_namespaces": ()}

    body: str
    model: str
    manufacturer: Manufacturer
    number_of_doors: int | None = None
    fuel_type: str | None = None
    engine: str | None = None
    mileage: int | None = None
    model_year: int | None = None
    production_year: int | None = None
    external_color: str | None = None

class CarIn(CamelModel):
    """Body for both create and update; update replaces details, location, price, condition."""

    condition: Condition = Condition.USED
    details: Details
    location: Location
    price: str | None = None

class CarOut(CamelModel):
    id: int
    condition: Condition
    details: Details
    location: Location
    price: str | None = None
    created_at: datetime
    modified_at: datetime
