"""
Car endpoints.

``GET /api/cars`` lists the stored cars and ``POST /api/cars`` accepts a
submission and echoes it back.  Bodies that cannot be bound to
``CarCreate`` are rejected with HTTP 400 by the handler registered in
``main.create_app``.  Both paths also answer with a trailing slash,
since the static top page mounted at ``/`` would otherwise shadow them.
"""

import logging
import sqlite3
from typing import Dict, List, Union

from fastapi import APIRouter, status

from car_catalog_api.app.schemas.car import CarCreate, CarRead
from car_catalog_api.app.services.car_service import STORAGE_MEMORY, CarService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=Union[List[CarRead], Dict[str, CarRead]])
@router.get("/", response_model=Union[List[CarRead], Dict[str, CarRead]], include_in_schema=False)
async def list_cars() -> Union[List[CarRead], Dict[str, CarRead]]:
    """Return all cars.

    The SQLite backend answers with a JSON array ordered by id; the
    in‑memory backend answers with an object keyed by id.
    """
    try:
        if CarService.storage() == STORAGE_MEMORY:
            return await CarService.list_cars_by_id()
        return await CarService.list_cars()
    except sqlite3.Error:
        logger.exception("Failed to list cars")
        raise


@router.post("", response_model=CarRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=CarRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def submit_car(car_in: CarCreate) -> CarRead:
    """Accept a car and return it with the fixed identifier."""
    return await CarService.submit_car(car_in)
