import httpx
import logging
from urllib.parse import urlencode

from sweetspott.core.config import settings
from sweetspott.core.logger import logs

MIN_API_KEY_LENGTH = 10


class GooglePlacesClient:
    """
    Thin async client over the Google Places web service.

    Transport, status and parse failures are logged and reported as "nothing
    found" ([] or None); none of the public methods raise for them.
    """
    def __init__(
        self,
        api_key: str = None,
        base_url: str = None,
        timeout: float = None,
        radius_m: int = None,
        transport: httpx.AsyncBaseTransport = None,
    ):
        self.api_key = settings.GOOGLE_MAPS_API_KEY if api_key is None else api_key
        self.base_url = (base_url or settings.GOOGLE_PLACES_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS
        self.radius_m = radius_m or settings.SEARCH_RADIUS_METERS
        self.transport = transport

    @property
    def available(self) -> bool:
        return bool(self.api_key) and len(self.api_key) >= MIN_API_KEY_LENGTH

    def photo_url(self, photo_reference: str, max_width: int = 600, max_height: int = 400) -> str:
        params = {
            "maxwidth": max_width,
            "maxheight": max_height,
            "photoreference": photo_reference,
            "key": self.api_key,
        }
        return f"{self.base_url}/photo?{urlencode(params)}"

    async def _get_json(self, endpoint: str, params: dict, label: str) -> dict | None:
        url = f"{self.base_url}/{endpoint}/json"
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                response = await client.get(
                    url,
                    params={**params, "key": self.api_key},
                    headers={"Accept": "application/json"},
                )
                response.raise_for_status()

                content_type = response.headers.get("content-type", "")
                if "application/json" not in content_type:
                    logs.log(
                        logging.ERROR,
                        f"Google Places returned non-JSON content for {label}: {content_type} "
                        f"{response.text[:200]!r}"
                    )
                    return None

                data = response.json()
                if not isinstance(data, dict):
                    logs.log(logging.ERROR, f"Google Places returned an unexpected body for {label}")
                    return None
                return data

            except httpx.HTTPStatusError as e:
                logs.log(logging.ERROR, f"Google Places HTTP error for {label}: {e.response.status_code}")
                return None
            except (httpx.HTTPError, ValueError) as e:
                logs.log(logging.ERROR, f"Network/parse error from Google Places for {label}: {str(e)}")
                return None

    async def text_search(self, term: str, lat: float, lng: float) -> list[dict]:
        """Raw text-search results for `term` biased around (lat, lng)."""
        logs.log(logging.INFO, f"Searching Google Places for: \"{term}\"")
        data = await self._get_json(
            "textsearch",
            {"query": f"{term} near me", "location": f"{lat},{lng}", "radius": self.radius_m},
            label=f"\"{term}\"",
        )
        if data is None:
            return []

        status = data.get("status")
        if status == "OK":
            results = data.get("results") or []
            if not isinstance(results, list):
                logs.log(logging.ERROR, f"Google Places returned malformed results for \"{term}\": {type(results).__name__}")
                return []
            logs.log(logging.INFO, f"Found {len(results)} results for \"{term}\"")
            return results
        if status == "ZERO_RESULTS":
            logs.log(logging.INFO, f"No results for \"{term}\"")
            return []

        logs.log(
            logging.ERROR,
            f"Google Places API error for \"{term}\": {status} {data.get('error_message', '')}".rstrip()
        )
        return []

    async def place_details(self, google_place_id: str) -> dict | None:
        data = await self._get_json(
            "details",
            {
                "place_id": google_place_id,
                "fields": "place_id,name,formatted_address,geometry,photos,rating,types,vicinity",
            },
            label=f"details {google_place_id}",
        )
        if not data or data.get("status") != "OK" or not isinstance(data.get("result"), dict):
            logs.log(logging.INFO, f"Google Place details failed for {google_place_id}: {(data or {}).get('status')}")
            return None
        return data["result"]

    async def find_place_photo(
        self, name: str, lat: float, lng: float, max_width: int = 800, max_height: int = 600
    ) -> str | None:
        """Photo URL of the best find-place match for `name` near (lat, lng), if it has one."""
        data = await self._get_json(
            "findplacefromtext",
            {
                "input": name,
                "inputtype": "textquery",
                "locationbias": f"circle:{self.radius_m}@{lat},{lng}",
                "fields": "place_id,photos,name",
            },
            label=f"photo {name}",
        )
        if not data or data.get("status") != "OK":
            logs.log(logging.INFO, f"Google Places photo search failed for {name}: {(data or {}).get('status')}")
            return None

        candidates = data.get("candidates")
        if isinstance(candidates, list) and candidates and isinstance(candidates[0], dict):
            photos = candidates[0].get("photos")
            if isinstance(photos, list) and photos and isinstance(photos[0], dict) and photos[0].get("photo_reference"):
                logs.log(logging.INFO, f"Found Google photo for: {name}")
                return self.photo_url(photos[0]["photo_reference"], max_width, max_height)

        logs.log(logging.INFO, f"No Google photo found for: {name}")
        return None
