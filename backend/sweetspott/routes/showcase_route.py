import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from sweetspott.core.logger import logs
from sweetspott.models.places_model import PlacesResponse
from sweetspott.repos.showcase_repo import ShowcaseRepository, get_showcase_repo
from sweetspott.routes.places_route import get_google_client
from sweetspott.services.google_places import GooglePlacesClient
from sweetspott.services.Showcase_service import ShowcaseService

router = APIRouter()

def get_showcase_service(
    repo: ShowcaseRepository = Depends(get_showcase_repo),
    google: GooglePlacesClient = Depends(get_google_client),
) -> ShowcaseService:
    return ShowcaseService(repo, google)

@router.get("/global-places", response_model=PlacesResponse)
async def global_places_endpoint(service: ShowcaseService = Depends(get_showcase_service)):
    places = service.global_places()
    return PlacesResponse(success=True, message=f"{len(places)} showcase places", places=places)

@router.get("/global-places-photos", response_model=PlacesResponse)
async def global_places_photos_endpoint(service: ShowcaseService = Depends(get_showcase_service)):
    try:
        places = await service.global_places_with_photos()
    except Exception as e:
        logs.log(logging.ERROR, f"Error fetching global places photos: {str(e)}")
        return JSONResponse(
            status_code=500,
            content=PlacesResponse(success=False, message="Failed to fetch photos", error="Unexpected error while fetching photos").model_dump(),
        )
    return PlacesResponse(success=True, message=f"{len(places)} showcase places", places=places)

@router.get("/local-places", response_model=PlacesResponse)
async def local_places_endpoint(service: ShowcaseService = Depends(get_showcase_service)):
    places = service.local_places()
    return PlacesResponse(success=True, message=f"{len(places)} local places", places=places)
