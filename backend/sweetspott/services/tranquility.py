"""
Keyword policy tables used to judge how peaceful a place is likely to be.

Every table is evaluated top to bottom and the first matching row wins.
"""
from typing import Iterable

DEFAULT_TRANQUILITY = 3

TRANQUILITY_RULES: list[tuple[tuple[str, ...], int]] = [
    # nature, meditation, worship, spa
    (("park", "garden", "nature", "spa", "temple", "church", "monastery",
      "zen", "meditation", "botanical", "arboretum"), 5),
    # contemplative, cultural
    (("library", "museum", "gallery", "bookstore", "quiet", "peaceful", "wellness"), 4),
    # food and drink
    (("cafe", "coffee", "restaurant", "tea house", "bistro"), 3),
    # retail
    (("store", "shop"), 2),
]

CATEGORY_LABELS: list[tuple[tuple[str, ...], str]] = [
    (("park",), "Park"),
    (("library",), "Library"),
    (("museum",), "Museum"),
    (("spa",), "Spa"),
    (("cafe", "coffee"), "Café"),
    (("restaurant",), "Restaurant"),
    (("store", "shop"), "Store"),
    (("church", "temple"), "Place of Worship"),
    (("hospital", "health"), "Healthcare"),
    (("school", "university"), "Education"),
    (("lodging", "hotel"), "Lodging"),
    (("beauty", "wellness"), "Wellness"),
]
DEFAULT_CATEGORY = "Place"

NOISE_BLOCKLIST = ("gas station", "atm", "parking", "car wash", "auto", "gas_station")


def _matches(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def score_tranquility(name: str, categories: Iterable[str] = ()) -> int:
    """Scores a place 1-5 from keywords found in its name or category tags."""
    text = " ".join([name or "", *categories]).lower()
    for keywords, score in TRANQUILITY_RULES:
        if _matches(text, keywords):
            return score
    return DEFAULT_TRANQUILITY


def category_label(types: Iterable[str]) -> str:
    """Maps provider type tags (e.g. ["cafe", "food"]) to a display category."""
    type_string = " ".join(types).lower()
    for keywords, label in CATEGORY_LABELS:
        if _matches(type_string, keywords):
            return label
    return DEFAULT_CATEGORY


def is_noise(name: str, category: str) -> bool:
    """True for places that are clearly not somewhere to unwind (gas stations, parking...)."""
    return _matches((name or "").lower(), NOISE_BLOCKLIST) or _matches((category or "").lower(), NOISE_BLOCKLIST)
