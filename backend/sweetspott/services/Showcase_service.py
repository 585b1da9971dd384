import asyncio
import logging

from sweetspott.core.logger import logs
from sweetspott.models.places_model import Place
from sweetspott.repos.showcase_repo import ShowcaseRepository
from sweetspott.services.google_places import GooglePlacesClient

class ShowcaseService:
    """Serves curated places, optionally decorated with live provider photos."""

    def __init__(self, repo: ShowcaseRepository, google: GooglePlacesClient):
        self.repo = repo
        self.google = google

    def global_places(self) -> list[Place]:
        return self.repo.list_global()

    def local_places(self) -> list[Place]:
        return self.repo.list_local()

    async def _photo_for(self, place: Place) -> str | None:
        """One showcase photo lookup; a failure only costs this place its photo."""
        try:
            return await self.google.find_place_photo(place.name, place.lat, place.lng, max_width=600, max_height=400)
        except Exception as e:
            logs.log(logging.ERROR, f"Error fetching Google photo for {place.name}: {str(e)}")
            return None

    async def global_places_with_photos(self) -> list[Place]:
        places = self.repo.list_global()
        if not self.google.available:
            logs.log(logging.WARNING, "Google API key not available; returning showcase places without photos")
            return places

        logs.log(logging.INFO, f"Fetching Google photos for {len(places)} showcase places")
        photos = await asyncio.gather(*(self._photo_for(p) for p in places))

        found = sum(1 for url in photos if url)
        logs.log(logging.INFO, f"Found photos for {found}/{len(places)} showcase places")
        return [
            place.model_copy(update={"image_url": url}) if url else place
            for place, url in zip(places, photos)
        ]
