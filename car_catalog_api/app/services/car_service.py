"""
Service layer for car records.

Two storage backends are supported, selected by ``settings.car_storage``:

* ``sqlite`` (default): records live in the ``cars`` table of the
  embedded database and are listed in id order;
* ``memory``: records live in a process‑local dict keyed by id, which
  the API renders as a keyed JSON object.

Both backends are truncated and reseeded with the same three cars on
startup.  Submitted cars are echoed back with a fixed identifier and
are not stored.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from car_catalog_api.app.core.config import settings
from car_catalog_api.app.core.db import SEED_CARS, get_connection, init_db, reset_cars
from car_catalog_api.app.schemas.car import CarCreate, CarRead

logger = logging.getLogger(__name__)

# Identifier given to every submitted car.
SUBMITTED_CAR_ID = 3

STORAGE_SQLITE = "sqlite"
STORAGE_MEMORY = "memory"

_memory_cars: Dict[int, CarRead] = {}


class CarService:
    """Service class for listing and submitting cars."""

    @staticmethod
    def storage() -> str:
        backend = settings.car_storage
        if backend not in {STORAGE_SQLITE, STORAGE_MEMORY}:
            raise ValueError(f"Unknown car storage backend: {backend!r}")
        return backend

    @classmethod
    def seed(cls) -> int:
        """Truncate the active backend and insert the seed cars.

        Returns the number of seeded records.
        """
        if cls.storage() == STORAGE_MEMORY:
            _memory_cars.clear()
            for car_id, (name, year) in enumerate(SEED_CARS, start=1):
                _memory_cars[car_id] = CarRead(id=car_id, name=name, year=year)
            logger.info("Seeded %d cars in memory", len(_memory_cars))
            return len(_memory_cars)
        init_db()
        return reset_cars(SEED_CARS)

    @classmethod
    async def list_cars(cls) -> List[CarRead]:
        """Return every stored car ordered by id."""
        if cls.storage() == STORAGE_MEMORY:
            return [_memory_cars[car_id] for car_id in sorted(_memory_cars)]
        conn = get_connection()
        try:
            rows = conn.execute("SELECT id, name, year FROM cars ORDER BY id").fetchall()
            return [cls._row_to_car_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def list_cars_by_id(cls) -> Dict[str, CarRead]:
        """Return every stored car keyed by its id (as a string)."""
        return {str(car.id): car for car in await cls.list_cars()}

    @classmethod
    async def submit_car(cls, data: CarCreate) -> CarRead:
        """Accept a car submission and echo it back with the fixed id."""
        car = CarRead(id=SUBMITTED_CAR_ID, name=data.name, year=data.year)
        logger.info("Accepted car submission %s (%s)", car.name, car.year)
        return car

    @staticmethod
    def _row_to_car_read(row) -> CarRead:
        return CarRead(id=row["id"], name=row["name"], year=row["year"])
