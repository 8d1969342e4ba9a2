from space_api.models.base import Base  # noqa: F401
from space_api.models.ship import Ship, ShipType  # noqa: F401
