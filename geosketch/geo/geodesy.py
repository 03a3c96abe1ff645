"""Plain-degree geodesy helpers.

Thin functions over ``GeoPoint`` for code that works in plain floats:
kilometers in, kilometers out, degrees in, degrees out.
"""

from __future__ import annotations

from geosketch.unit import Degree, Kilometer, Radian

from .geo_point import GeoPoint


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return float(Degree(degrees))


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return Radian(radians).to(Degree)


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in kilometers."""
    return a.distance_to(b).to(Kilometer)


def destination_point(origin: GeoPoint, distance: float, bearing: float) -> GeoPoint:
    """Point ``distance`` km from ``origin`` along ``bearing`` degrees."""
    return origin.forward(Degree(bearing), Kilometer(distance))


def bearing_deg(a: GeoPoint, b: GeoPoint) -> float:
    """Initial bearing from ``a`` to ``b`` in degrees, in ``[0, 360)``."""
    return a.bearing_to(b).to(Degree)


def inverse_bearing_deg(a: GeoPoint, b: GeoPoint) -> float:
    """Bearing from ``b`` back to ``a``."""
    return bearing_deg(b, a)
