"""
Expands a free-text search into related search phrases so one query
reaches more of the places a person probably meant.
"""

# (trigger keywords, phrases appended when any trigger is a substring of the query)
TOPIC_CLUSTERS: list[tuple[tuple[str, ...], tuple[str, ...]]] = [
    # coffee / cafe
    (
        ("cafe", "coffee"),
        ("cafe", "coffee shop", "coffee house", "espresso bar", "local cafe",
         "specialty coffee", "artisan coffee"),
    ),
    # spa / wellness
    (
        ("spa", "wellness", "massage"),
        ("spa", "day spa", "wellness center", "massage", "massage therapy",
         "wellness spa", "relaxation spa", "therapeutic massage"),
    ),
    # yoga / meditation
    (
        ("yoga", "meditation", "zen"),
        ("yoga studio", "meditation center", "zen center", "mindfulness center",
         "yoga class", "meditation space"),
    ),
    # restaurant / dining
    (
        ("restaurant", "food", "dining"),
        ("restaurant", "quiet restaurant", "bistro", "fine dining",
         "peaceful restaurant", "cozy restaurant"),
    ),
    # park / nature
    (
        ("park", "garden", "nature"),
        ("park", "garden", "botanical garden", "public park", "nature park",
         "city park", "community garden", "arboretum"),
    ),
    # library / study
    (
        ("library", "book", "study"),
        ("library", "public library", "bookstore", "reading room", "study space",
         "academic library"),
    ),
    # museum / art
    (
        ("museum", "art", "gallery"),
        ("museum", "art gallery", "art museum", "cultural center", "exhibition",
         "gallery space"),
    ),
    # spiritual / religious
    (
        ("temple", "church", "spiritual"),
        ("temple", "church", "mosque", "synagogue", "spiritual center",
         "meditation temple", "monastery"),
    ),
    # quiet / calm
    (
        ("quiet", "peaceful", "calm", "tranquil"),
        ("quiet cafe", "peaceful place", "tranquil spot", "calm environment",
         "serene location", "zen space"),
    ),
    # shop / store
    (
        ("shop", "store", "bookstore"),
        ("bookstore", "quiet shop", "specialty store", "local shop", "artisan shop"),
    ),
]


def expand_query(query: str) -> list[str]:
    """
    Returns the query followed by the phrases of every matching topic cluster,
    deduplicated in first-seen order. The caller is expected to lowercase the query.
    """
    terms = [query]
    for triggers, phrases in TOPIC_CLUSTERS:
        if any(trigger in query for trigger in triggers):
            terms.extend(phrases)

    return list(dict.fromkeys(terms))
