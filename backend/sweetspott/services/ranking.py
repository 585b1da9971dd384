"""
Quality filter and ranker for merged search candidates.

The chain is dedupe -> drop noise -> sort by (tranquility desc, distance asc)
-> cap. It is stateless and idempotent: refining an already refined list
returns it unchanged.
"""
import re
from typing import Iterable, Optional

from sweetspott.core.config import settings
from sweetspott.models.places_model import Place
from sweetspott.services.tranquility import is_noise

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def dedup_key(place: Place) -> tuple[str, int, int]:
    """Normalized name plus a ~11m coordinate bucket (4 decimal places)."""
    name_key = _NON_ALNUM.sub("", place.name.lower())
    return name_key, round(place.lat * 10_000), round(place.lng * 10_000)


def remove_duplicates(places: Iterable[Place]) -> list[Place]:
    seen = set()
    unique = []
    for place in places:
        key = dedup_key(place)
        if key not in seen:
            seen.add(key)
            unique.append(place)
    return unique


def filter_quality(places: Iterable[Place]) -> list[Place]:
    return [p for p in places if not is_noise(p.name, p.category)]


def rank(places: Iterable[Place]) -> list[Place]:
    # sorted() is stable, so full ties keep their input order
    return sorted(places, key=lambda p: (-p.tranquility, p.distance_meters))


def refine(places: Optional[Iterable[Place]], limit: int = None) -> list[Place]:
    if not places:
        return []
    limit = settings.MAX_RESULTS if limit is None else limit
    return rank(filter_quality(remove_duplicates(places)))[:limit]
