import pytest

from sweetspott.services.tranquility import category_label, is_noise, score_tranquility


@pytest.mark.parametrize(
    "name,types,expected",
    [
        ("Riverside", ["park", "point_of_interest"], 5),
        ("Zen Corner", [], 5),
        ("St. Mary's", ["church"], 5),
        ("Kew Botanical Walk", [], 5),
        ("City Central Library", ["library"], 4),
        ("Modern Art Museum", ["museum"], 4),
        ("Peaceful Corner", [], 4),
        ("Blue Tokai", ["cafe", "food"], 3),
        ("Little Bistro", [], 3),
        ("Corner Mart", ["store"], 2),
        ("Office Tower", ["point_of_interest"], 3),
    ],
)
def test_score_tranquility_table(name, types, expected):
    assert score_tranquility(name, types) == expected


def test_first_matching_rule_wins():
    # "zen" (5) outranks "cafe" (3); "quiet" (4) outranks "coffee" (3)
    assert score_tranquility("Zen Cafe", ["cafe"]) == 5
    assert score_tranquility("Quiet Coffee", ["cafe"]) == 4
    assert score_tranquility("Garden Shop", ["store"]) == 5


def test_score_is_case_insensitive():
    assert score_tranquility("MEDITATION HALL") == 5


@pytest.mark.parametrize(
    "types,expected",
    [
        (["park", "point_of_interest"], "Park"),
        (["library"], "Library"),
        (["museum"], "Museum"),
        (["spa"], "Spa"),
        (["cafe", "food"], "Café"),
        (["restaurant"], "Restaurant"),
        (["book_store"], "Store"),
        (["hindu_temple"], "Place of Worship"),
        (["hospital"], "Healthcare"),
        (["university"], "Education"),
        (["lodging"], "Lodging"),
        (["beauty_salon"], "Wellness"),
        (["point_of_interest"], "Place"),
        ([], "Place"),
    ],
)
def test_category_label(types, expected):
    assert category_label(types) == expected


@pytest.mark.parametrize(
    "name,category",
    [
        ("Shell Gas Station", "Place"),
        ("HDFC ATM", "Place"),
        ("Multi-Level Parking", "Place"),
        ("Sparkle Car Wash", "Place"),
        ("Auto Repairs", "Place"),
        ("Fuel Stop", "gas_station"),
    ],
)
def test_noise_is_detected_in_name_or_category(name, category):
    assert is_noise(name, category)


def test_calm_places_are_not_noise():
    assert not is_noise("Lotus View Knoll", "Park")
    assert not is_noise("Moss & Mint Cafe", "Café")
