"""Pydantic schemas for the /rest/ships endpoints.

Field names on the wire are camelCase and prodDate travels as epoch
milliseconds (UTC).  Range checks live in the service layer, so every
request field here is optional.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, Field

from space_api.exceptions import ValidationError
from space_api.models.ship import Ship, ShipType
from space_api.services.ship_rules import ShipFields

EPOCH = datetime(1970, 1, 1)


def millis_to_datetime(millis: int) -> datetime:
    """Convert epoch milliseconds to a naive UTC datetime."""
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise ValidationError(f"Timestamp out of range: {millis}") from exc


def datetime_to_millis(value: datetime) -> int:
    return (value - EPOCH) // timedelta(milliseconds=1)


class ShipPayload(BaseModel):
    """Body of create and edit requests.  id and rating are ignored if sent."""

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = Field(default=None, alias="shipType")
    prod_date: Optional[int] = Field(default=None, alias="prodDate")
    is_used: Optional[bool] = Field(default=None, alias="isUsed")
    speed: Optional[float] = None
    crew_size: Optional[int] = Field(default=None, alias="crewSize")

    model_config = {"populate_by_name": True}

    def to_fields(self) -> ShipFields:
        return ShipFields(
            name=self.name,
            planet=self.planet,
            ship_type=self.ship_type,
            prod_date=millis_to_datetime(self.prod_date) if self.prod_date is not None else None,
            is_used=self.is_used,
            speed=self.speed,
            crew_size=self.crew_size,
        )


class ShipResponse(BaseModel):
    id: int
    name: str
    planet: str
    ship_type: ShipType = Field(alias="shipType")
    prod_date: int = Field(alias="prodDate")
    is_used: bool = Field(alias="isUsed")
    speed: float
    crew_size: int = Field(alias="crewSize")
    rating: float

    model_config = {"populate_by_name": True}

    @classmethod
    def from_ship(cls, ship: Ship) -> "ShipResponse":
        return cls(
            id=ship.id,
            name=ship.name,
            planet=ship.planet,
            ship_type=ship.ship_type,
            prod_date=datetime_to_millis(ship.prod_date),
            is_used=ship.is_used,
            speed=ship.speed,
            crew_size=ship.crew_size,
            rating=ship.rating,
        )
