"""Unit tests for the Ship database model."""

from datetime import datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from space_api.models.ship import Ship, ShipType


class TestShipModel:
    async def test_create_ship_defaults(self, db_session):
        ship = Ship(
            name="Orion",
            planet="Saturn",
            ship_type=ShipType.MERCHANT,
            prod_date=datetime(2990, 2, 3),
            speed=0.4,
            crew_size=12,
            rating=1.07,
        )
        db_session.add(ship)
        await db_session.commit()
        await db_session.refresh(ship)

        assert ship.id is not None
        assert ship.is_used is False
        assert ship.ship_type == ShipType.MERCHANT

    async def test_read_ship(self, db_session, make_ship):
        await make_ship("Nova", planet="Pluto", ship_type=ShipType.MILITARY)
        result = await db_session.execute(select(Ship).where(Ship.name == "Nova"))
        fetched = result.scalar_one()
        assert fetched.planet == "Pluto"
        assert fetched.ship_type == ShipType.MILITARY
        assert fetched.prod_date == datetime(3000, 6, 15)

    async def test_name_is_required(self, db_session):
        ship = Ship(
            planet="Saturn",
            ship_type=ShipType.TRANSPORT,
            prod_date=datetime(2990, 2, 3),
            speed=0.4,
            crew_size=12,
            rating=1.0,
        )
        db_session.add(ship)
        with pytest.raises(IntegrityError):
            await db_session.commit()
