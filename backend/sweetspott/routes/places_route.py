import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from sweetspott.core.geo import InvalidCoordinatesError, parse_coordinates
from sweetspott.core.logger import logs
from sweetspott.models.places_model import PlaceDetailsResponse, PlacePhotoResponse, PlacesResponse
from sweetspott.repos.showcase_repo import ShowcaseRepository, get_showcase_repo
from sweetspott.services.google_places import GooglePlacesClient
from sweetspott.services.Places_service import PlacesService

router = APIRouter()

# --- Dependency Injection ---
def get_google_client() -> GooglePlacesClient:
    return GooglePlacesClient()

def get_places_service(
    google: GooglePlacesClient = Depends(get_google_client),
    showcase: ShowcaseRepository = Depends(get_showcase_repo),
) -> PlacesService:
    return PlacesService(google, showcase)

@router.get("/places", response_model=PlacesResponse)
async def search_places_endpoint(
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    query: str = "",
    service: PlacesService = Depends(get_places_service),
):
    logs.log(logging.INFO, f"API request received: lat={lat}, lng={lng}, query={query!r}")
    try:
        latitude, longitude = parse_coordinates(lat, lng)
    except InvalidCoordinatesError as e:
        logs.log(logging.INFO, f"Rejected search request: {str(e)}")
        return JSONResponse(
            status_code=400,
            content=PlacesResponse(success=False, message=str(e), error=str(e)).model_dump(),
        )

    try:
        return await service.search_places(latitude, longitude, query)
    except Exception as e:
        logs.log(logging.ERROR, f"Unexpected error in places search: {str(e)}")
        return JSONResponse(
            status_code=500,
            content=PlacesResponse(
                success=False,
                message="Error finding places in your area. Please try again.",
                error="Unexpected error while searching for places",
            ).model_dump(),
        )

@router.get("/place-details", response_model=PlaceDetailsResponse)
async def place_details_endpoint(
    place_id: Optional[str] = Query(None, alias="placeId"),
    service: PlacesService = Depends(get_places_service),
):
    if not place_id:
        return JSONResponse(
            status_code=400,
            content=PlaceDetailsResponse(success=False, error="Place ID is required").model_dump(),
        )

    try:
        place = await service.get_place(place_id)
    except Exception as e:
        logs.log(logging.ERROR, f"Error fetching place details for {place_id}: {str(e)}")
        return JSONResponse(
            status_code=500,
            content=PlaceDetailsResponse(success=False, error="Failed to fetch place details").model_dump(),
        )

    if place is None:
        return JSONResponse(
            status_code=404,
            content=PlaceDetailsResponse(success=False, error="Place not found").model_dump(),
        )

    logs.log(logging.INFO, f"Resolved place details: {place.name}")
    return PlaceDetailsResponse(success=True, place=place)

@router.get("/place-photo", response_model=PlacePhotoResponse)
async def place_photo_endpoint(
    name: Optional[str] = None,
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    service: PlacesService = Depends(get_places_service),
):
    if not name:
        return JSONResponse(
            status_code=400,
            content=PlacePhotoResponse(success=False, message="Place name and coordinates are required").model_dump(),
        )
    try:
        latitude, longitude = parse_coordinates(lat, lng)
    except InvalidCoordinatesError as e:
        return JSONResponse(
            status_code=400,
            content=PlacePhotoResponse(success=False, message=str(e)).model_dump(),
        )

    logs.log(logging.INFO, f"Fetching photo for place detail: {name}")
    try:
        return await service.get_place_photo(name, latitude, longitude)
    except Exception as e:
        logs.log(logging.ERROR, f"Error fetching place photo for {name}: {str(e)}")
        return JSONResponse(
            status_code=500,
            content=PlacePhotoResponse(success=False, message="Failed to fetch place photo").model_dump(),
        )
