# inventory/api/v1/routes_navigation.py
from typing import Dict, List

from fastapi import APIRouter
from pydantic import BaseModel

from inventory.ui.navigation import DESTINATIONS, START_DESTINATION, resolve


router = APIRouter(prefix="/api/v1/navigation", tags=["navigation"])


class DestinationOut(BaseModel):
    route: str
    route_with_args: str
    title: str
    api_path: str
    start: bool


class ResolvedRouteOut(BaseModel):
    route: str
    title: str
    args: Dict[str, int]
    api_url: str


@router.get("", response_model=List[DestinationOut])
async def list_destinations_endpoint():
    return [
        DestinationOut(
            route=d.route,
            route_with_args=d.route_with_args,
            title=d.title,
            api_path=d.api_path,
            start=d is START_DESTINATION,
        )
        for d in DESTINATIONS
    ]


@router.get("/{route:path}", response_model=ResolvedRouteOut)
async def resolve_route_endpoint(route: str):
    destination, args = resolve(route)
    return ResolvedRouteOut(
        route=destination.path(*args.values()),
        title=destination.title,
        args=args,
        api_url=destination.api_url(*args.values()),
    )
