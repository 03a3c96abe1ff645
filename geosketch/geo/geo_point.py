"""Geographic points and spherical geodesy.

This module defines the coordinate types (``Latitude``, ``Longitude``) that
extend the unit system, and the ``GeoPoint`` dataclass every map element is
anchored on. Distances and forward projections are computed with a pyproj
``Geod`` configured as a sphere of radius ``EARTH_RADIUS_KM``: on a sphere
the geodesic is the great circle, so ``distance_to`` is the haversine
distance and ``forward`` is the classic destination-point formula that the
map's drawing tools use to place azimuth-mode line segments.

No range validation is done: a latitude of 95 degrees is stored as given.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyproj import Geod

from geosketch.unit import Angle, Degree, Kilometer, Length, Meter, Radian

EARTH_RADIUS_KM = 6371.0

# Spherical earth so that results match the haversine / destination formulas
_SPHERE = Geod(a=EARTH_RADIUS_KM * 1000.0, b=EARTH_RADIUS_KM * 1000.0)


class Latitude(Degree):
    """Latitude in degrees, stored in radians.

    A family root of its own so a latitude can never be compared with a
    longitude or a bearing.

    Example:
        >>> Latitude(48.8566).to(Latitude)
        48.8566
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """Longitude in degrees, stored in radians."""

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


@dataclass
class GeoPoint:
    """A latitude/longitude pair on the map.

    Map elements store their anchors as ``GeoPoint`` instances; the navigation
    engine and the camera target code read them through the ``lat`` and
    ``lon`` degree accessors because their formulas are written in degrees.

    Attributes:
        latitude (Latitude): North/South position.
        longitude (Longitude): East/West position.

    Example:
        >>> paris = GeoPoint.from_deg(48.8566, 2.3522)
        >>> lyon = GeoPoint.from_deg(45.7640, 4.8357)
        >>> round(paris.distance_to(lyon).to(Kilometer))
        392
        >>> east = paris.forward(Degree(90), Kilometer(10))
    """

    latitude: Latitude
    longitude: Longitude

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> GeoPoint:
        """Create a point from decimal degrees.

        Args:
            lat (float): Latitude, positive north.
            lon (float): Longitude, positive east.
        """
        return cls(Latitude(lat), Longitude(lon))

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoPoint:
        """Create a point from radians."""
        return cls(Latitude.from_si(lat), Longitude.from_si(lon))

    @property
    def lat(self) -> float:
        """Latitude in decimal degrees."""
        return self.latitude.to(Latitude)

    @property
    def lon(self) -> float:
        """Longitude in decimal degrees."""
        return self.longitude.to(Longitude)

    def distance_to(self, other: GeoPoint) -> Kilometer:
        """Great-circle distance to ``other``.

        Args:
            other (GeoPoint): Target point.

        Returns:
            Kilometer: Distance along the sphere's surface.
        """
        _, _, dist = _SPHERE.inv(
            float(self.longitude),
            float(self.latitude),
            float(other.longitude),
            float(other.latitude),
            radians=True,
        )
        return Meter(dist).as_unit(Kilometer)

    def bearing_to(self, other: GeoPoint) -> Degree:
        """Initial bearing towards ``other``, clockwise from north in ``[0, 360)``."""
        az12, _, _ = _SPHERE.inv(
            float(self.longitude),
            float(self.latitude),
            float(other.longitude),
            float(other.latitude),
            radians=True,
        )
        return Degree((Radian(az12).to(Degree) + 360.0) % 360.0)

    def forward(self, azimuth: Angle, distance: Length) -> GeoPoint:
        """Point reached by travelling ``distance`` along ``azimuth``.

        Returns a new point; this instance is not modified.

        Args:
            azimuth (Angle): Bearing from north (0 = north, 90 = east).
            distance (Length): Distance along the great circle.

        Example:
            >>> equator = GeoPoint.from_deg(0, 0)
            >>> p = equator.forward(Degree(90), Kilometer(111))
            >>> round(p.lon, 3)
            0.998
        """
        lon, lat, _ = _SPHERE.fwd(
            float(self.longitude),
            float(self.latitude),
            float(azimuth),
            float(distance),
            radians=True,
        )
        return GeoPoint.from_rad(lat, lon)
