"""Ships router — CRUD and filtered listing under /rest/ships."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from space_api.config import settings
from space_api.dependencies import get_ship_service
from space_api.exceptions import NotFoundError, ValidationError
from space_api.models.ship import ShipType
from space_api.repositories.ship_repository import PageRequest, ShipOrder, SortDirection
from space_api.schemas.ship import ShipPayload, ShipResponse, millis_to_datetime
from space_api.services.ship_filters import ShipFilter
from space_api.services.ship_rules import parse_id
from space_api.services.ship_service import ShipService

router = APIRouter(prefix="/rest/ships", tags=["ships"])


def ship_filter_params(
    name: Optional[str] = None,
    planet: Optional[str] = None,
    ship_type: Optional[ShipType] = Query(default=None, alias="shipType"),
    after: Optional[int] = None,
    before: Optional[int] = None,
    is_used: Optional[bool] = Query(default=None, alias="isUsed"),
    min_speed: Optional[float] = Query(default=None, alias="minSpeed"),
    max_speed: Optional[float] = Query(default=None, alias="maxSpeed"),
    min_crew_size: Optional[int] = Query(default=None, alias="minCrewSize"),
    max_crew_size: Optional[int] = Query(default=None, alias="maxCrewSize"),
    min_rating: Optional[float] = Query(default=None, alias="minRating"),
    max_rating: Optional[float] = Query(default=None, alias="maxRating"),
) -> ShipFilter:
    """Collect the filter query parameters shared by the list and count endpoints."""
    try:
        after_dt = millis_to_datetime(after) if after is not None else None
        before_dt = millis_to_datetime(before) if before is not None else None
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ShipFilter(
        name=name,
        planet=planet,
        ship_type=ship_type,
        after=after_dt,
        before=before_dt,
        is_used=is_used,
        min_speed=min_speed,
        max_speed=max_speed,
        min_crew_size=min_crew_size,
        max_crew_size=max_crew_size,
        min_rating=min_rating,
        max_rating=max_rating,
    )


@router.get("", response_model=list[ShipResponse])
async def list_ships(
    ship_filter: ShipFilter = Depends(ship_filter_params),
    order: ShipOrder = ShipOrder.ID,
    direction: SortDirection = SortDirection.ASC,
    page_number: int = Query(default=0, ge=0, alias="pageNumber"),
    page_size: Optional[int] = Query(default=None, ge=1, alias="pageSize"),
    service: ShipService = Depends(get_ship_service),
):
    """Return one page of ships matching the filters."""
    page = PageRequest(
        page_number=page_number,
        page_size=page_size if page_size is not None else settings.default_page_size,
        order=order,
        direction=direction,
    )
    result = await service.list_ships(ship_filter, page)
    return [ShipResponse.from_ship(s) for s in result.items]


@router.get("/count", response_model=int)
async def count_ships(
    ship_filter: ShipFilter = Depends(ship_filter_params),
    service: ShipService = Depends(get_ship_service),
):
    """Return how many ships match the filters, ignoring pagination."""
    return await service.count_ships(ship_filter)


@router.post("", response_model=ShipResponse)
async def create_ship(
    body: ShipPayload,
    service: ShipService = Depends(get_ship_service),
):
    try:
        ship = await service.create_ship(body.to_fields())
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ShipResponse.from_ship(ship)


@router.get("/{ship_id}", response_model=ShipResponse)
async def get_ship(
    ship_id: str,
    service: ShipService = Depends(get_ship_service),
):
    try:
        ship = await service.get_ship(parse_id(ship_id))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ShipResponse.from_ship(ship)


@router.post("/{ship_id}", response_model=ShipResponse)
async def edit_ship(
    ship_id: str,
    body: ShipPayload,
    service: ShipService = Depends(get_ship_service),
):
    """Update only the fields present in the body; the rating is recomputed."""
    try:
        ship = await service.edit_ship(parse_id(ship_id), body.to_fields())
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ShipResponse.from_ship(ship)


@router.delete("/{ship_id}")
async def delete_ship(
    ship_id: str,
    service: ShipService = Depends(get_ship_service),
):
    try:
        await service.delete_ship(parse_id(ship_id))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_200_OK)
