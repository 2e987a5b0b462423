"""
Distance and geocoding helpers for matching requesters with nearby sellers
"""
import logging
import math
from typing import Iterable, List, Optional
import requests
from plant_match_models import Coordinates, SellerOffer
from config import GEOCODER_URL, GEOCODER_USER_AGENT, GEOCODER_TIMEOUT

logger = logging.getLogger(__name__)

EARTH_RADIUS = {"km": 6371.0, "miles": 3959.0}


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float, unit: str = "km") -> float:
    """Great-circle (haversine) distance between two points"""
    if unit not in EARTH_RADIUS:
        raise ValueError(f"Unsupported distance unit '{unit}', use 'km' or 'miles'")

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS[unit] * c


def resolve_offer_distances(offers: Iterable[SellerOffer], latitude: float, longitude: float) -> List[SellerOffer]:
    """
    Recompute distance_km for offers whose seller coordinates are known.

    Offers without coordinates keep the distance reported by the inventory supplier.
    """
    resolved = []
    for offer in offers:
        if offer.latitude is None or offer.longitude is None:
            resolved.append(offer)
            continue
        distance = calculate_distance(latitude, longitude, offer.latitude, offer.longitude)
        resolved.append(offer.model_copy(update={"distance_km": distance}))
    return resolved


def geocode_location(query: str) -> Optional[Coordinates]:
    """Geocode a free-form location string using OpenStreetMap Nominatim"""
    params = {
        "q": query,
        "format": "json",
        "limit": 1
    }
    headers = {
        "User-Agent": GEOCODER_USER_AGENT
    }

    try:
        response = requests.get(GEOCODER_URL, params=params, headers=headers, timeout=GEOCODER_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Geocoding error for '{query}': {e}")
        return None

    if not data:
        logger.info(f"Location not found: '{query}'")
        return None

    result = data[0]
    return Coordinates(
        latitude=float(result.get("lat")),
        longitude=float(result.get("lon")),
        display_name=result.get("display_name")
    )
