"""
Tests for therapist filtering and distance ranking.
"""

import math

import pytest

from soulsync.geo import EARTH_RADIUS_KM, filter_providers, haversine_km
from soulsync.models import GeoPoint, GeoQuery, ProviderLocation, ProviderRecord

KM_PER_DEGREE = EARTH_RADIUS_KM * math.pi / 180


def make_provider(name, lat=0.0, lng=0.0, city="Pune", specialties=("anxiety",)):
    return ProviderRecord(
        id=name.lower().replace(" ", "-"),
        name=name,
        specialties=list(specialties),
        location=ProviderLocation(city=city, lat=lat, lng=lng),
    )


def north_of_origin(name, km, **kwargs):
    """A provider ``km`` kilometers due north of (0, 0)."""
    return make_provider(name, lat=km / KM_PER_DEGREE, lng=0.0, **kwargs)


ORIGIN = GeoPoint(lat=0.0, lng=0.0)


class TestHaversine:
    """Test suite for haversine_km."""

    def test_same_point_is_zero(self):
        assert haversine_km(19.076, 72.8777, 19.076, 72.8777) == 0

    def test_one_degree_along_equator(self):
        assert haversine_km(0, 0, 0, 1) == pytest.approx(KM_PER_DEGREE)

    def test_is_symmetric(self):
        there = haversine_km(19.0760, 72.8777, 28.5273, 77.2177)
        back = haversine_km(28.5273, 77.2177, 19.0760, 72.8777)
        assert there == pytest.approx(back)

    def test_antipodal_points(self):
        """Test that antipodes give half the circumference instead of failing."""
        distance = haversine_km(-43.5577, -28.3277, 43.5577, 151.6723)
        assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_mumbai_to_new_delhi(self):
        distance = haversine_km(19.0760, 72.8777, 28.5273, 77.2177)
        assert 1100 < distance < 1200


class TestFilterProviders:
    """Test suite for filter_providers."""

    def test_distance_cap_and_ordering(self):
        """Test that only nearby providers survive, nearest first."""
        providers = [
            north_of_origin("Five", 5),
            north_of_origin("Fifty", 50),
            north_of_origin("Fifteen", 15),
        ]

        results = filter_providers(
            providers, GeoQuery(max_distance_km=20, origin=ORIGIN)
        )

        assert [r.provider.name for r in results] == ["Five", "Fifteen"]
        assert results[0].distance_km == pytest.approx(5)
        assert results[1].distance_km == pytest.approx(15)

    def test_zero_distance_keeps_only_colocated_provider(self):
        """Test max distance 0 at a provider's own coordinates."""
        here = make_provider("Here", lat=19.0760, lng=72.8777)
        providers = [
            make_provider("Elsewhere", lat=12.9279, lng=77.6271),
            here,
            make_provider("Close", lat=19.0761, lng=72.8777),
        ]

        results = filter_providers(
            providers,
            GeoQuery(max_distance_km=0, origin=GeoPoint(lat=19.0760, lng=72.8777)),
        )

        assert [r.provider for r in results] == [here]
        assert results[0].distance_km == pytest.approx(0)

    def test_without_origin_keeps_input_order(self):
        """Test that no origin means no distance filter and no sorting."""
        providers = [
            north_of_origin("Far", 5000),
            north_of_origin("Near", 1),
            north_of_origin("Middle", 300),
        ]

        results = filter_providers(providers, GeoQuery(max_distance_km=10))

        assert [r.provider.name for r in results] == ["Far", "Near", "Middle"]
        assert all(r.distance_km is None for r in results)

    def test_ties_keep_input_order(self):
        """Test that equal distances preserve input order."""
        providers = [
            north_of_origin("B", 10),
            north_of_origin("A", 10),
            north_of_origin("C", 2),
        ]

        results = filter_providers(providers, GeoQuery(origin=ORIGIN))

        assert [r.provider.name for r in results] == ["C", "B", "A"]

    def test_text_filter_matches_name_specialty_and_city(self):
        """Test case-insensitive text search across fields."""
        providers = [
            make_provider("Dr. Anjali Sharma", city="Mumbai", specialties=["anxiety"]),
            make_provider("Rohan Desai", city="Bengaluru", specialties=["addiction"]),
            make_provider("Dr. Priya Verma", city="New Delhi", specialties=["adhd"]),
        ]

        def names(text):
            query = GeoQuery(search_text=text)
            return [r.provider.name for r in filter_providers(providers, query)]

        assert names("ROHAN") == ["Rohan Desai"]
        assert names("adhd") == ["Dr. Priya Verma"]
        assert names("mumbai") == ["Dr. Anjali Sharma"]
        assert names("dr.") == ["Dr. Anjali Sharma", "Dr. Priya Verma"]
        assert names("") == ["Dr. Anjali Sharma", "Rohan Desai", "Dr. Priya Verma"]

    def test_specialty_filter(self):
        """Test exact specialty membership, skipped for "all"."""
        providers = [
            make_provider("One", specialties=["anxiety", "depression"]),
            make_provider("Two", specialties=["trauma"]),
        ]

        depression = filter_providers(providers, GeoQuery(specialty="depression"))
        everyone = filter_providers(providers, GeoQuery(specialty="all"))

        assert [r.provider.name for r in depression] == ["One"]
        assert len(everyone) == 2

    def test_filters_combine(self):
        """Test text, specialty and distance filters together."""
        providers = [
            north_of_origin("Near Anxiety", 3, specialties=["anxiety"]),
            north_of_origin("Near Trauma", 4, specialties=["trauma"]),
            north_of_origin("Far Anxiety", 80, specialties=["anxiety"]),
        ]

        query = GeoQuery(
            search_text="near", specialty="anxiety", max_distance_km=50, origin=ORIGIN
        )
        results = filter_providers(providers, query)

        assert [r.provider.name for r in results] == ["Near Anxiety"]

    def test_empty_input(self):
        assert filter_providers([], GeoQuery(origin=ORIGIN)) == []
        assert filter_providers([], GeoQuery()) == []

    def test_no_matches(self):
        providers = [make_provider("Solo")]
        assert filter_providers(providers, GeoQuery(search_text="nobody")) == []

    def test_non_finite_coordinates(self):
        """Test that unusable coordinates are dropped only when ranking."""
        broken = make_provider("Broken", lat=math.nan, lng=0.0)
        infinite = make_provider("Infinite", lat=0.0, lng=math.inf)
        fine = north_of_origin("Fine", 1)
        providers = [broken, infinite, fine]

        ranked = filter_providers(providers, GeoQuery(origin=ORIGIN))
        unranked = filter_providers(providers, GeoQuery())

        assert [r.provider.name for r in ranked] == ["Fine"]
        assert [r.provider.name for r in unranked] == ["Broken", "Infinite", "Fine"]

    def test_antipodal_provider_is_filtered_out(self):
        """Test that a provider on the far side of the globe is simply too far."""
        far = make_provider("Far", lat=43.5577, lng=151.6723)
        query = GeoQuery(
            max_distance_km=50, origin=GeoPoint(lat=-43.5577, lng=-28.3277)
        )

        assert filter_providers([far], query) == []

        everywhere = filter_providers(
            [far], query.model_copy(update={"max_distance_km": 25000})
        )
        assert [r.provider.name for r in everywhere] == ["Far"]

    def test_input_is_not_modified(self):
        """Test that filtering leaves the input list and records untouched."""
        providers = [north_of_origin("Far", 100), north_of_origin("Near", 1)]
        snapshot = [p.model_copy() for p in providers]

        filter_providers(providers, GeoQuery(max_distance_km=10, origin=ORIGIN))

        assert providers == snapshot
