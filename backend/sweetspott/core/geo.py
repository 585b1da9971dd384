"""
Geographic helpers: great-circle distance and request coordinate parsing.
"""
import math

EARTH_RADIUS_METERS = 6_371_000


class InvalidCoordinatesError(ValueError):
    """Raised when a latitude/longitude pair cannot be used for a search."""


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Straight-line distance in meters between two points on a spherical Earth."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def parse_coordinates(lat, lng) -> tuple[float, float]:
    """
    Turns raw query values into a (lat, lng) float pair.
    Missing, non-numeric, non-finite or out-of-range values raise InvalidCoordinatesError.
    """
    if lat is None or lng is None or str(lat).strip() == "" or str(lng).strip() == "":
        raise InvalidCoordinatesError("Location coordinates are required")

    try:
        latitude = float(lat)
        longitude = float(lng)
    except (TypeError, ValueError):
        raise InvalidCoordinatesError(f"Invalid coordinates provided: lat={lat!r}, lng={lng!r}")

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidCoordinatesError(f"Invalid coordinates provided: lat={lat!r}, lng={lng!r}")
    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        raise InvalidCoordinatesError(
            "Coordinates out of range: lat must be within [-90, 90] and lng within [-180, 180]"
        )

    return latitude, longitude
