"""Ship rules: field validation, rating calculation and id parsing.

Nothing here touches the database or logs.  The
service layer calls these before anything is written to the store.
"""

import re
from dataclasses import dataclass, fields
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from space_api.exceptions import ValidationError
from space_api.models.ship import ShipType

MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019
MAX_TEXT_LENGTH = 50
MIN_SPEED = 0.01
MAX_SPEED = 0.99
MIN_CREW_SIZE = 0
MAX_CREW_SIZE = 9999

# SQLite INTEGER is a signed 64-bit value
MIN_SHIP_ID = -(2**63)
MAX_SHIP_ID = 2**63 - 1
ID_PATTERN = re.compile(r"[+-]?[0-9]+")

REQUIRED_FIELDS = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size")


@dataclass
class ShipFields:
    """Caller-settable ship fields.  None means "not supplied"."""

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    prod_date: Optional[datetime] = None
    is_used: Optional[bool] = None
    speed: Optional[float] = None
    crew_size: Optional[int] = None

    def supplied(self) -> dict:
        """Return only the fields that carry a value."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


def validate_ship(ship: ShipFields, *, creating: bool) -> None:
    """Reject a create or edit payload.

    On create every field in REQUIRED_FIELDS must be present.  On edit absent
    fields are allowed and only the supplied ones are range-checked.
    """
    if creating:
        missing = [name for name in REQUIRED_FIELDS if getattr(ship, name) is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    if ship.prod_date is not None and not MIN_PROD_YEAR <= ship.prod_date.year <= MAX_PROD_YEAR:
        raise ValidationError(
            f"prodDate year must be between {MIN_PROD_YEAR} and {MAX_PROD_YEAR}, "
            f"got {ship.prod_date.year}"
        )

    for label, value in (("name", ship.name), ("planet", ship.planet)):
        if value is not None and not 1 <= len(value) <= MAX_TEXT_LENGTH:
            raise ValidationError(f"{label} must be 1 to {MAX_TEXT_LENGTH} characters long")

    if ship.speed is not None and not MIN_SPEED <= ship.speed <= MAX_SPEED:
        raise ValidationError(f"speed must be between {MIN_SPEED} and {MAX_SPEED}")

    if ship.crew_size is not None and not MIN_CREW_SIZE <= ship.crew_size <= MAX_CREW_SIZE:
        raise ValidationError(
            f"crewSize must be between {MIN_CREW_SIZE} and {MAX_CREW_SIZE}"
        )


def compute_rating(speed: float, is_used: bool, prod_year: int) -> float:
    """Return the ship rating rounded half-up to two decimals.

    rating = 80 * speed * k / (3019 - year + 1), with k = 0.5 for used ships.
    The denominator is at least 1 because validation caps the year at 3019.
    """
    k = 0.5 if is_used else 1.0
    raw = (80.0 * speed * k) / (MAX_PROD_YEAR - prod_year + 1)
    # Decimal(float) keeps the exact binary value, so halves round the same way every time
    return float(Decimal(raw).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def parse_id(raw: Optional[str]) -> int:
    """Parse a ship id taken from a URL path segment."""
    if raw is None or raw == "" or raw.strip() == "0":
        raise ValidationError(f"Invalid ship id: {raw!r}")
    if ID_PATTERN.fullmatch(raw) is None:
        raise ValidationError(f"Invalid ship id: {raw!r}")

    ship_id = int(raw)
    if not MIN_SHIP_ID <= ship_id <= MAX_SHIP_ID:
        raise ValidationError(f"Invalid ship id: {raw!r}")
    return ship_id
