from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from space_api.database import get_db
from space_api.repositories.ship_repository import ShipRepository
from space_api.services.ship_service import ShipService


def get_ship_service(db: AsyncSession = Depends(get_db)) -> ShipService:
    """Build a ShipService bound to the request's database session."""
    return ShipService(ShipRepository(db))
