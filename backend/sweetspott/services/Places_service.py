import asyncio
import logging
from typing import Optional

from sweetspott.core.config import settings
from sweetspott.core.geo import haversine_distance
from sweetspott.core.logger import logs
from sweetspott.models.places_model import Place, PlacesResponse, PlacePhotoResponse
from sweetspott.repos.showcase_repo import ShowcaseRepository
from sweetspott.services.google_places import GooglePlacesClient
from sweetspott.services.query_expander import expand_query
from sweetspott.services.ranking import refine
from sweetspott.services.tranquility import category_label, score_tranquility

GOOGLE_ID_PREFIX = "google-"
DEFAULT_PROVIDER_RATING = 8.0

# query mode
MAX_QUERY_TERMS = 5
RESULTS_PER_TERM = 8

# broad mode
BROAD_TERMS = [
    "park", "library", "cafe", "museum", "spa", "garden",
    "coffee shop", "art gallery", "wellness center", "yoga studio",
]
MAX_BROAD_TERMS = 6
BROAD_RESULTS_PER_TERM = 2

# default mode
DEFAULT_TERMS = ["park", "library", "cafe", "museum"]
DEFAULT_RESULTS_PER_TERM = 3


def plan_search(query: str = "", broad_search: bool = False) -> tuple[list[str], int]:
    """Picks the search terms and the per-term result cap for one aggregation."""
    query = (query or "").strip()
    if query:
        return expand_query(query.lower())[:MAX_QUERY_TERMS], RESULTS_PER_TERM
    if broad_search:
        return BROAD_TERMS[:MAX_BROAD_TERMS], BROAD_RESULTS_PER_TERM
    return list(DEFAULT_TERMS), DEFAULT_RESULTS_PER_TERM


class PlacesService:
    def __init__(
        self,
        google: GooglePlacesClient,
        showcase: ShowcaseRepository,
        pacing_seconds: float = None,
    ):
        self.google = google
        self.showcase = showcase
        self.pacing_seconds = settings.SEARCH_PACING_SECONDS if pacing_seconds is None else pacing_seconds

    async def aggregate(
        self, lat: float, lng: float, query: str = "", broad_search: bool = False
    ) -> Optional[list[Place]]:
        """
        Runs one provider search per planned term, one at a time with a fixed
        pause between calls, and merges the converted candidates.
        Returns None when the provider has no usable credential.
        """
        if not self.google.available:
            logs.log(logging.WARNING, "Google API key not available or too short")
            return None

        terms, per_term = plan_search(query, broad_search)
        logs.log(logging.INFO, f"Search terms: {terms} (up to {per_term} results each)")

        candidates: list[Place] = []
        for index, term in enumerate(terms):
            if index and self.pacing_seconds > 0:
                await asyncio.sleep(self.pacing_seconds)
            try:
                results = await self.google.text_search(term, lat, lng)
                for raw in results[:per_term]:
                    place = self._to_place(raw, lat, lng)
                    if place is not None:
                        candidates.append(place)
            except Exception as e:
                logs.log(logging.ERROR, f"Error searching for \"{term}\": {str(e)}")
                continue

        logs.log(logging.INFO, f"Collected {len(candidates)} candidates from {len(terms)} terms")
        return candidates

    async def discover(
        self, lat: float, lng: float, query: str = "", broad_search: bool = False
    ) -> Optional[list[Place]]:
        candidates = await self.aggregate(lat, lng, query, broad_search)
        if candidates is None:
            return None
        places = refine(candidates)
        logs.log(logging.INFO, f"Total quality places found: {len(places)}")
        return places

    async def search_places(self, lat: float, lng: float, query: str = "") -> PlacesResponse:
        query = (query or "").strip()
        logs.log(logging.INFO, f"Searching for places: lat={lat}, lng={lng}, query={query!r}")

        places = await self.discover(lat, lng, query)
        if places:
            where = f" for \"{query}\"" if query else " near you"
            return PlacesResponse(
                success=True,
                message=f"Found {len(places)} places{where}",
                places=places,
            )

        logs.log(logging.INFO, "Trying broader search...")
        broad_places = await self.discover(lat, lng, broad_search=True) or []
        if broad_places:
            message = f"Found {len(broad_places)} places in your area"
        else:
            message = "No places found in your area. Try a different search term or location."
        return PlacesResponse(success=True, message=message, places=broad_places)

    async def get_place(self, place_id: str) -> Optional[Place]:
        """Curated places first, then Google place details for "google-" ids."""
        curated = self.showcase.get(place_id)
        if curated is not None:
            return curated

        if not place_id.startswith(GOOGLE_ID_PREFIX):
            logs.log(logging.INFO, f"Place not found: {place_id}")
            return None
        if not self.google.available:
            logs.log(logging.WARNING, "Google API key not available or too short")
            return None

        google_place_id = place_id[len(GOOGLE_ID_PREFIX):]
        logs.log(logging.INFO, f"Fetching Google Place details for: {google_place_id}")
        raw = await self.google.place_details(google_place_id)
        if raw is None:
            return None
        return self._to_place(raw, details=True)

    async def get_place_photo(self, name: str, lat: float, lng: float) -> PlacePhotoResponse:
        image_url = None
        if self.google.available:
            image_url = await self.google.find_place_photo(name, lat, lng)

        if image_url:
            return PlacePhotoResponse(success=True, image_url=image_url, message=f"Found Google Maps photo for {name}")
        return PlacePhotoResponse(success=False, image_url=None, message=f"No Google Maps photo available for {name}")

    def _to_place(self, raw: dict, lat: float = None, lng: float = None, details: bool = False) -> Optional[Place]:
        """Converts one provider record; a record that cannot be converted is logged and skipped."""
        try:
            location = raw["geometry"]["location"]
            p_lat = float(location["lat"])
            p_lng = float(location["lng"])
            types = raw.get("types") or []
            name = raw["name"]

            distance = 0
            if lat is not None and lng is not None:
                distance = round(haversine_distance(lat, lng, p_lat, p_lng))

            rating = raw.get("rating")
            rating = min(max(float(rating) * 2, 0.0), 10.0) if rating is not None else DEFAULT_PROVIDER_RATING

            image_url = None
            photos = raw.get("photos") or []
            if isinstance(photos, list) and photos and isinstance(photos[0], dict) and photos[0].get("photo_reference"):
                size = (800, 600) if details else (600, 400)
                image_url = self.google.photo_url(photos[0]["photo_reference"], *size)

            if details:
                address = raw.get("formatted_address") or raw.get("vicinity")
            else:
                address = raw.get("vicinity") or raw.get("formatted_address")

            return Place(
                id=f"{GOOGLE_ID_PREFIX}{raw['place_id']}",
                name=name,
                category=category_label(types),
                tranquility=score_tranquility(name, types),
                rating=rating,
                lat=p_lat,
                lng=p_lng,
                distance_meters=distance,
                address=address or "Address not available",
                image_url=image_url,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logs.log(logging.ERROR, f"Error transforming place {raw.get('name') if isinstance(raw, dict) else raw!r}: {str(e)}")
            return None
