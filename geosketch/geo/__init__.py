"""Geographic coordinates and spherical geodesy for map elements.

Components:
    GeoPoint: Latitude/longitude pair with distance, bearing and forward
        projection on a 6371 km sphere.
    Latitude, Longitude: Family-safe coordinate units.
    distance_km, destination_point, bearing_deg, inverse_bearing_deg,
    to_radians, to_degrees: Plain-float helpers.

Typical Usage:
    >>> from geosketch.geo import GeoPoint, destination_point, distance_km
    >>> start = GeoPoint.from_deg(0, 0)
    >>> end = destination_point(start, 111, 90)
    >>> round(distance_km(start, end), 6)
    111.0
"""

from .geo_point import EARTH_RADIUS_KM, GeoPoint, Latitude, Longitude
from .geodesy import (
    bearing_deg,
    destination_point,
    distance_km,
    inverse_bearing_deg,
    to_degrees,
    to_radians,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "GeoPoint",
    "Latitude",
    "Longitude",
    "bearing_deg",
    "destination_point",
    "distance_km",
    "inverse_bearing_deg",
    "to_degrees",
    "to_radians",
]
