"""
Therapist filtering and distance ranking.
"""

import logging
import math
from collections.abc import Iterable

from .models import GeoQuery, ProviderRecord, RankedResult

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two coordinates, in kilometers."""
    d_lat = (lat2 - lat1) * math.pi / 180
    d_lng = (lng2 - lng1) * math.pi / 180
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1 * math.pi / 180)
        * math.cos(lat2 * math.pi / 180)
        * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push a just outside [0, 1] for antipodal points
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _matches_text(provider: ProviderRecord, needle: str) -> bool:
    return (
        needle in provider.name.lower()
        or any(needle in specialty.lower() for specialty in provider.specialties)
        or needle in provider.location.city.lower()
    )


def filter_providers(
    providers: Iterable[ProviderRecord], query: GeoQuery
) -> list[RankedResult]:
    """
    Filter providers by text, specialty and distance.

    Without an origin the surviving providers keep their input order and carry
    no distance. With an origin they are sorted by ascending distance, ties
    keeping input order, and providers with unusable coordinates are dropped.

    Args:
        providers: Provider records to filter; never modified
        query: The search criteria

    Returns:
        The matching providers as RankedResult objects
    """
    candidates = list(providers)

    if query.search_text:
        needle = query.search_text.lower()
        candidates = [p for p in candidates if _matches_text(p, needle)]

    if query.specialty != "all":
        candidates = [p for p in candidates if query.specialty in p.specialties]

    origin = query.origin
    if origin is None:
        return [RankedResult(provider=p) for p in candidates]

    ranked: list[RankedResult] = []
    for provider in candidates:
        location = provider.location
        if not (math.isfinite(location.lat) and math.isfinite(location.lng)):
            logger.warning(
                "Skipping provider %s with unusable coordinates (%s, %s)",
                provider.id,
                location.lat,
                location.lng,
            )
            continue

        distance = haversine_km(origin.lat, origin.lng, location.lat, location.lng)
        if distance <= query.max_distance_km:
            ranked.append(RankedResult(provider=provider, distance_km=distance))

    ranked.sort(key=lambda result: result.distance_km)
    return ranked
