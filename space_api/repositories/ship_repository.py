"""Record store for ships, backed by an async SQLAlchemy session."""

import enum
from dataclasses import dataclass

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from space_api.models.ship import Ship
from space_api.services.ship_filters import Predicate


class ShipOrder(str, enum.Enum):
    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"


class SortDirection(str, enum.Enum):
    ASC = "ASC"
    DESC = "DESC"


_ORDER_COLUMNS = {
    ShipOrder.ID: Ship.id,
    ShipOrder.SPEED: Ship.speed,
    ShipOrder.DATE: Ship.prod_date,
    ShipOrder.RATING: Ship.rating,
}


@dataclass
class PageRequest:
    page_number: int = 0
    page_size: int = 3
    order: ShipOrder = ShipOrder.ID
    direction: SortDirection = SortDirection.ASC


@dataclass
class ShipPage:
    items: list[Ship]
    page_number: int
    page_size: int


class ShipRepository:
    """CRUD and predicate queries over the ship table.

    save() and delete_by_id() commit; each call is its own transaction.
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_all(self, predicate: Predicate = None) -> list[Ship]:
        stmt = select(Ship)
        if predicate is not None:
            stmt = stmt.where(predicate)
        result = await self._db.execute(stmt)
        return list(result.scalars().all())

    async def find_page(self, predicate: Predicate, page: PageRequest) -> ShipPage:
        stmt = select(Ship)
        if predicate is not None:
            stmt = stmt.where(predicate)

        column = _ORDER_COLUMNS[page.order]
        ordering = column.desc() if page.direction == SortDirection.DESC else column.asc()
        # id breaks ties so a page never shifts between requests
        stmt = (
            stmt.order_by(ordering, Ship.id.asc())
            .offset(page.page_number * page.page_size)
            .limit(page.page_size)
        )

        result = await self._db.execute(stmt)
        return ShipPage(
            items=list(result.scalars().all()),
            page_number=page.page_number,
            page_size=page.page_size,
        )

    async def count(self, predicate: Predicate = None) -> int:
        stmt = select(func.count()).select_from(Ship)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return (await self._db.execute(stmt)).scalar_one()

    async def exists_by_id(self, ship_id: int) -> bool:
        result = await self._db.execute(select(Ship.id).where(Ship.id == ship_id))
        return result.scalar_one_or_none() is not None

    async def find_by_id(self, ship_id: int) -> Ship | None:
        result = await self._db.execute(select(Ship).where(Ship.id == ship_id))
        return result.scalar_one_or_none()

    async def save(self, ship: Ship) -> Ship:
        self._db.add(ship)
        await self._db.commit()
        await self._db.refresh(ship)
        return ship

    async def delete_by_id(self, ship_id: int) -> None:
        await self._db.execute(delete(Ship).where(Ship.id == ship_id))
        await self._db.commit()
