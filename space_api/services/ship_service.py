"""Ship service — create, edit, delete, fetch and list registry ships.

Responsibilities:
  - Validate incoming payloads before anything is persisted
  - Keep the derived rating in step with speed, usage and production year
  - Gate edit/delete/get on the ship existing
  - Translate list/count parameters into a predicate for the record store
"""

import logging

from space_api.exceptions import NotFoundError, ValidationError
from space_api.models.ship import Ship
from space_api.repositories.ship_repository import PageRequest, ShipPage, ShipRepository
from space_api.services.ship_filters import ShipFilter, build_ship_filter
from space_api.services.ship_rules import ShipFields, compute_rating, validate_ship

logger = logging.getLogger(__name__)


class ShipService:
    def __init__(self, repository: ShipRepository) -> None:
        self._repository = repository

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    async def list_ships(self, ship_filter: ShipFilter, page: PageRequest) -> ShipPage:
        return await self._repository.find_page(build_ship_filter(ship_filter), page)

    async def list_all_ships(self, ship_filter: ShipFilter) -> list[Ship]:
        """Return every matching ship, unpaginated, in store order."""
        return await self._repository.find_all(build_ship_filter(ship_filter))

    async def count_ships(self, ship_filter: ShipFilter) -> int:
        return await self._repository.count(build_ship_filter(ship_filter))

    async def get_ship(self, ship_id: int) -> Ship:
        ship = await self._repository.find_by_id(ship_id)
        if ship is None:
            raise NotFoundError(f"Ship {ship_id} not found")
        return ship

    # -----------------------------------------------------------------------
    # Commands
    # -----------------------------------------------------------------------

    async def create_ship(self, draft: ShipFields) -> Ship:
        """Validate a full payload, derive its rating and store it.

        isUsed defaults to False when omitted.  Raises ValidationError before
        touching the store if any field is missing or out of range.
        """
        try:
            validate_ship(draft, creating=True)
        except ValidationError as exc:
            logger.warning("Rejected ship create: %s", exc)
            raise

        is_used = draft.is_used if draft.is_used is not None else False
        ship = Ship(
            name=draft.name,
            planet=draft.planet,
            ship_type=draft.ship_type,
            prod_date=draft.prod_date,
            is_used=is_used,
            speed=draft.speed,
            crew_size=draft.crew_size,
            rating=compute_rating(draft.speed, is_used, draft.prod_date.year),
        )
        ship = await self._repository.save(ship)
        logger.info("Created ship %s (%s, rating=%.2f)", ship.id, ship.name, ship.rating)
        return ship

    async def edit_ship(self, ship_id: int, changes: ShipFields) -> Ship:
        """Overwrite the supplied fields of a stored ship and recompute its rating.

        Only the incoming fields are validated; values already stored are
        not re-checked after the merge.
        """
        try:
            validate_ship(changes, creating=False)
        except ValidationError as exc:
            logger.warning("Rejected edit of ship %s: %s", ship_id, exc)
            raise

        ship = await self.get_ship(ship_id)
        supplied = changes.supplied()
        for field_name, value in supplied.items():
            setattr(ship, field_name, value)
        ship.rating = compute_rating(ship.speed, ship.is_used, ship.prod_date.year)

        ship = await self._repository.save(ship)
        logger.info("Edited ship %s (fields=%s)", ship_id, sorted(supplied))
        return ship

    async def delete_ship(self, ship_id: int) -> None:
        if not await self._repository.exists_by_id(ship_id):
            raise NotFoundError(f"Ship {ship_id} not found")
        await self._repository.delete_by_id(ship_id)
        logger.info("Deleted ship %s", ship_id)
