import os
import tempfile
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from space_api.database import build_engine, get_db
from space_api.main import app
from space_api.models.base import Base
from space_api.models.ship import Ship, ShipType
from space_api.repositories.ship_repository import ShipRepository
from space_api.services.ship_rules import compute_rating
from space_api.services.ship_service import ShipService


@pytest.fixture
async def db_engine():
    db_fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(db_fd)
    test_db_url = f"sqlite+aiosqlite:///{db_path}"
    engine = build_engine(test_db_url, connect_args={"check_same_thread": False})
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
async def db_session(db_engine) -> AsyncSession:
    session_factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def ship_service(db_session: AsyncSession) -> ShipService:
    return ShipService(ShipRepository(db_session))


@pytest.fixture
async def db_client(db_session: AsyncSession) -> AsyncClient:
    """HTTP client with DB dependency overridden to use the test SQLite DB."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_ship(db_session: AsyncSession):
    """Factory that inserts a ship directly, with a correctly derived rating."""

    async def _make_ship(
        name: str,
        planet: str = "Earth",
        ship_type: ShipType = ShipType.TRANSPORT,
        year: int = 3000,
        is_used: bool = False,
        speed: float = 0.5,
        crew_size: int = 10,
    ) -> Ship:
        ship = Ship(
            name=name,
            planet=planet,
            ship_type=ship_type,
            prod_date=datetime(year, 6, 15),
            is_used=is_used,
            speed=speed,
            crew_size=crew_size,
            rating=compute_rating(speed, is_used, year),
        )
        db_session.add(ship)
        await db_session.commit()
        await db_session.refresh(ship)
        return ship

    return _make_ship
