"""
Pydantic schemas for car records.

A car has a storage‑assigned integer ``id``, a ``name`` and a
manufacture ``year``.  Clients submit ``CarCreate`` bodies; every
response uses ``CarRead``.

Submitted fields are bound strictly: ``"2019"`` or ``2019.0`` is not a
year.  Omitted fields take their zero value (``""`` and ``0``).
"""

from pydantic import BaseModel, Field


class CarCreate(BaseModel):
    """Schema for submitting a new car."""

    name: str = Field("", strict=True, description="Model name, e.g. ``フィット``")
    year: int = Field(0, strict=True, description="Manufacture year")


class CarRead(BaseModel):
    """Schema for reading a car record."""

    id: int
    name: str
    year: int
