"""Build SQL predicates from the optional list/count query parameters.

Each fragment builder returns a SQLAlchemy boolean expression, or None when
its argument is absent.  build_ship_filter ANDs together whatever fragments
are present; a None result means "every ship matches".
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from space_api.models.ship import Ship, ShipType

Predicate = Optional[ColumnElement[bool]]


@dataclass
class ShipFilter:
    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    is_used: Optional[bool] = None
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    min_crew_size: Optional[int] = None
    max_crew_size: Optional[int] = None
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None


def _range(column, low, high) -> Predicate:
    if low is None and high is None:
        return None
    if low is None:
        return column <= high
    if high is None:
        return column >= low
    return column.between(low, high)


def name_contains(name: Optional[str]) -> Predicate:
    if name is None:
        return None
    return Ship.name.contains(name, autoescape=True)


def planet_contains(planet: Optional[str]) -> Predicate:
    if planet is None:
        return None
    return Ship.planet.contains(planet, autoescape=True)


def ship_type_equals(ship_type: Optional[ShipType]) -> Predicate:
    if ship_type is None:
        return None
    return Ship.ship_type == ship_type


def prod_date_between(after: Optional[datetime], before: Optional[datetime]) -> Predicate:
    return _range(Ship.prod_date, after, before)


def used_equals(is_used: Optional[bool]) -> Predicate:
    if is_used is None:
        return None
    return Ship.is_used == is_used


def speed_between(min_speed: Optional[float], max_speed: Optional[float]) -> Predicate:
    return _range(Ship.speed, min_speed, max_speed)


def crew_size_between(min_crew: Optional[int], max_crew: Optional[int]) -> Predicate:
    return _range(Ship.crew_size, min_crew, max_crew)


def rating_between(min_rating: Optional[float], max_rating: Optional[float]) -> Predicate:
    return _range(Ship.rating, min_rating, max_rating)


def build_ship_filter(params: ShipFilter) -> Predicate:
    """AND together the fragments for every parameter that was supplied."""
    fragments = [
        name_contains(params.name),
        planet_contains(params.planet),
        ship_type_equals(params.ship_type),
        prod_date_between(params.after, params.before),
        used_equals(params.is_used),
        speed_between(params.min_speed, params.max_speed),
        crew_size_between(params.min_crew_size, params.max_crew_size),
        rating_between(params.min_rating, params.max_rating),
    ]
    present = [f for f in fragments if f is not None]
    if not present:
        return None
    return and_(*present)
