import math
from unittest.mock import Mock, patch

import pytest
import requests

from geolocation import calculate_distance, geocode_location, resolve_offer_distances
from plant_match_models import FulfillmentMode, ReservationErrorKind, SellerOffer
from plant_match_reservations import available_modes, begin_reservation, check_delivery_eligible

PUNE = (18.5204, 73.8567)
MUMBAI = (19.0760, 72.8777)


def test_distance_between_same_point_is_zero():
    assert calculate_distance(*PUNE, *PUNE) == 0


def test_distance_pune_mumbai():
    assert calculate_distance(*PUNE, *MUMBAI) == pytest.approx(120, abs=2)
    assert calculate_distance(*PUNE, *MUMBAI, unit="miles") == pytest.approx(75, abs=2)


def test_distance_unknown_unit():
    with pytest.raises(ValueError):
        calculate_distance(*PUNE, *MUMBAI, unit="furlongs")


def test_resolve_offer_distances():
    located = SellerOffer(seller_id="a", plant_key="snake", distance_km=0, price=1, stock=1,
                          latitude=MUMBAI[0], longitude=MUMBAI[1])
    unlocated = SellerOffer(seller_id="b", plant_key="snake", distance_km=4.2, price=1, stock=1)

    resolved = resolve_offer_distances([located, unlocated], *PUNE)

    assert resolved[0].distance_km == pytest.approx(120, abs=2)
    assert resolved[1] is unlocated
    assert located.distance_km == 0


@patch("geolocation.requests.get")
def test_geocode_location_found(mock_get):
    mock_get.return_value = Mock(
        status_code=200,
        json=Mock(return_value=[{"lat": "18.5204", "lon": "73.8567", "display_name": "Pune, Maharashtra"}]),
    )
    coordinates = geocode_location("Pune")

    assert coordinates.latitude == pytest.approx(18.5204)
    assert coordinates.longitude == pytest.approx(73.8567)
    assert coordinates.display_name == "Pune, Maharashtra"
    assert mock_get.call_args.kwargs["params"]["q"] == "Pune"
    assert "User-Agent" in mock_get.call_args.kwargs["headers"]


@patch("geolocation.requests.get")
def test_geocode_location_not_found(mock_get):
    mock_get.return_value = Mock(status_code=200, json=Mock(return_value=[]))
    assert geocode_location("Atlantis") is None


@patch("geolocation.requests.get")
def test_geocode_location_request_failure(mock_get):
    mock_get.side_effect = requests.ConnectionError("offline")
    assert geocode_location("Pune") is None


def _offer_north_of_pune(km):
    # one degree of latitude along a meridian is R * pi / 180 km
    latitude = PUNE[0] + km / (6371.0 * math.pi / 180)
    return SellerOffer(seller_id="edge", plant_key="snake", distance_km=0, price=1, stock=3,
                       latitude=latitude, longitude=PUNE[1])


def test_resolved_distance_just_beyond_radius_is_not_delivery_eligible():
    resolved = resolve_offer_distances([_offer_north_of_pune(15.04)], *PUNE)[0]

    assert resolved.distance_km == pytest.approx(15.04, abs=1e-6)
    assert resolved.distance_km > 15.0
    assert check_delivery_eligible(resolved) is False
    assert available_modes(resolved) == [FulfillmentMode.PICKUP]
    result = begin_reservation("snake", resolved, FulfillmentMode.DELIVERY)
    assert result.error == ReservationErrorKind.DELIVERY_RANGE_EXCEEDED


def test_resolved_distance_just_inside_radius_is_delivery_eligible():
    resolved = resolve_offer_distances([_offer_north_of_pune(14.96)], *PUNE)[0]
    assert check_delivery_eligible(resolved) is True
