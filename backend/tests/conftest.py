import sys
from pathlib import Path

import httpx
import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from sweetspott.services.google_places import GooglePlacesClient  # noqa: E402

TEST_API_KEY = "test-key-0123456789"


def google_result(place_id, name, lat, lng, types=("point_of_interest",), rating=None, photo=None, vicinity=None):
    """Minimal Google text-search record."""
    result = {
        "place_id": place_id,
        "name": name,
        "geometry": {"location": {"lat": lat, "lng": lng}},
        "types": list(types),
    }
    if rating is not None:
        result["rating"] = rating
    if photo:
        result["photos"] = [{"photo_reference": photo}]
    if vicinity:
        result["vicinity"] = vicinity
    return result


def search_term_of(request: httpx.Request) -> str:
    """The search term a text-search request was made for ("park near me" -> "park")."""
    query = request.url.params.get("query", "")
    return query[: -len(" near me")] if query.endswith(" near me") else query


@pytest.fixture
def make_google_client():
    """Builds a GooglePlacesClient whose HTTP calls go to `handler` and records every request."""
    def _make(handler, api_key=TEST_API_KEY):
        requests = []

        def recording_handler(request):
            requests.append(request)
            return handler(request)

        client = GooglePlacesClient(api_key=api_key, transport=httpx.MockTransport(recording_handler))
        client.requests = requests
        return client

    return _make
