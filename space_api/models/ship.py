"""Ship model — a registered spaceship and its derived rating."""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from space_api.models.base import Base


class ShipType(str, enum.Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class Ship(Base):
    """A ship in the registry.

    prod_date is stored as a naive UTC datetime; the API exchanges it as
    epoch milliseconds.  rating is always written by the service, never by
    the caller.
    """

    __tablename__ = "ship"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    planet: Mapped[str] = mapped_column(String(50), nullable=False)
    ship_type: Mapped[ShipType] = mapped_column(Enum(ShipType), nullable=False)
    prod_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    is_used: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    speed: Mapped[float] = mapped_column(Float, nullable=False)
    crew_size: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
