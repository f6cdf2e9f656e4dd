# Models/schemas.py
"""
Wire representations for cars and prices.

JSON field names are camelCase (``externalColor``, ``vehicleId``); input
also accepts the snake_case attribute names.  The ``location`` address
fields and the car ``price`` are read-time enrichment: clients may send
them but they are never stored.
"""
from decimal import Decimal
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer, confloat, condecimal, conint, constr
from pydantic.alias_generators import to_camel

from .car import Condition

# Decimals go out as JSON numbers rather than strings
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        protected_namespaces=(),
    )


class ManufacturerSchema(CamelModel):
    code: int
    name: Optional[str] = None


class DetailsSchema(CamelModel):
    body: constr(strip_whitespace=True, min_length=1)
    model: constr(strip_whitespace=True, min_length=1)
    manufacturer: ManufacturerSchema
    number_of_doors: Optional[conint(ge=0)] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[conint(ge=0)] = None
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None


class LocationSchema(CamelModel):
    """
    A coordinate pair plus an optionally resolved postal address.

    Attributes:
        lat: Geographic latitude (-90 to 90)
        lon: Geographic longitude (-180 to 180)
        address, city, state, zip: Filled in by the maps service on read
    """
    lat: confloat(ge=-90, le=90)
    lon: confloat(ge=-180, le=180)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class CarBase(CamelModel):
    condition: Condition
    details: DetailsSchema
    location: LocationSchema


class CarRequest(CarBase):
    """Schema for creating or updating a car. Server-owned fields are ignored."""
    pass


class CarResponse(CarBase):
    id: int
    price: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None


class PriceRequest(CamelModel):
    """
    Schema for creating a price.

    Only ``vehicle_id`` is honoured; ``currency`` and ``price`` are
    replaced by the generated values.
    """
    vehicle_id: Optional[conint(ge=1)] = None
    currency: Optional[str] = None
    price: Optional[Decimal] = None


class PriceUpdate(CamelModel):
    currency: constr(min_length=3, max_length=3)
    price: condecimal(gt=0, max_digits=12, decimal_places=2)


class PriceResponse(CamelModel):
    vehicle_id: int
    currency: str
    price: JsonDecimal
