import asyncio
import json

import httpx

from sweetspott.repos.showcase_repo import ShowcaseRepository
from sweetspott.services.Showcase_service import ShowcaseService


def test_curated_dataset_loads():
    repo = ShowcaseRepository()
    global_places = repo.list_global()
    local_places = repo.list_local()

    assert len(global_places) == 8
    assert len(local_places) == 6
    assert all(p.id.startswith("global-") and p.is_showcase and p.country for p in global_places)
    assert all(p.id.startswith("local-") and not p.is_showcase for p in local_places)

    ids = [p.id for p in global_places + local_places]
    assert len(ids) == len(set(ids))


def test_reviews_are_embedded():
    place = ShowcaseRepository().get("global-1")
    assert place.name == "Ryoan-ji Temple Rock Garden"
    assert [r.user for r in place.reviews] == ["Akiko", "Marcus"]
    assert ShowcaseRepository().get("global-99") is None


def test_custom_data_file(tmp_path):
    data_file = tmp_path / "places.json"
    data_file.write_text(json.dumps({
        "global": [{"id": "global-1", "name": "Test Garden", "category": "Garden",
                    "tranquility": 5, "rating": 9.0, "lat": 1.0, "lng": 2.0, "is_showcase": True}],
    }))
    repo = ShowcaseRepository(data_file)
    assert [p.name for p in repo.list_global()] == ["Test Garden"]
    assert repo.list_local() == []


def test_photos_are_filled_where_found(make_google_client):
    def handler(request):
        if request.url.params["input"] == "Kew Gardens":
            return httpx.Response(200, json={"status": "OK", "candidates": [{"photos": [{"photo_reference": "kew"}]}]})
        return httpx.Response(200, json={"status": "ZERO_RESULTS", "candidates": []})

    google = make_google_client(handler)
    places = asyncio.run(ShowcaseService(ShowcaseRepository(), google).global_places_with_photos())

    assert len(google.requests) == 8
    with_photo = [p for p in places if p.image_url]
    assert [p.name for p in with_photo] == ["Kew Gardens"]
    assert "maxwidth=600" in with_photo[0].image_url


def test_photos_skipped_without_credential(make_google_client):
    google = make_google_client(lambda request: httpx.Response(500), api_key="")
    places = asyncio.run(ShowcaseService(ShowcaseRepository(), google).global_places_with_photos())

    assert len(places) == 8
    assert google.requests == []
    assert all(p.image_url is None for p in places)


def test_one_bad_photo_lookup_does_not_fail_the_listing(make_google_client):
    def handler(request):
        if request.url.params["input"] == "Kew Gardens":
            return httpx.Response(200, json={"status": "OK", "candidates": ["junk"]})
        return httpx.Response(200, json={"status": "OK", "candidates": [{"photos": [{"photo_reference": "ok"}]}]})

    google = make_google_client(handler)
    places = asyncio.run(ShowcaseService(ShowcaseRepository(), google).global_places_with_photos())

    assert len(places) == 8
    assert [p.name for p in places if not p.image_url] == ["Kew Gardens"]


def test_raising_photo_lookup_only_drops_that_photo(make_google_client):
    google = make_google_client(lambda request: httpx.Response(500))

    async def flaky_lookup(name, lat, lng, max_width=800, max_height=600):
        if name == "Kew Gardens":
            raise RuntimeError("lookup failed")
        return "https://example.test/photo.jpg"

    google.find_place_photo = flaky_lookup
    places = asyncio.run(ShowcaseService(ShowcaseRepository(), google).global_places_with_photos())

    assert len(places) == 8
    assert [p.name for p in places if not p.image_url] == ["Kew Gardens"]
