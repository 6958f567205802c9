"""Car repository — the vehicle store used by the aggregation service."""


from carhub.domain.car import Car
from carhub.repositories.base import BaseRepository


class CarRepository(BaseRepository[Car]):
    model = Car
