"""Camera targets for map elements.

Each element type is framed differently when the guided tour flies to it:

    circle: centered, zoomed so the whole circle fits
        (``13 - log2(radius / 111)``, radius turned into approximate degrees);
    line segment in parallel mode: the parallel's longitude on the equator at
        a fixed wide zoom;
    other line segments: the start point, zoomed on the segment length
        (``15 - log2(length / 1.5)``), or zoom 15 without an endpoint;
    point: its coordinates at zoom 16;
    polygon: the vertex mean, zoomed on the bounding-box diagonal.

Every computed zoom is clamped to ``[6, 18]``. Unknown element types have no
target.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import log2
from typing import Any, Iterable, Optional

import numpy as np

from geosketch.config import (
    CIRCLE_ZOOM_BASE,
    DEFAULT_SEGMENT_ZOOM,
    KM_PER_DEGREE,
    MAX_ELEMENT_ZOOM,
    MIN_ELEMENT_ZOOM,
    PARALLEL_ZOOM,
    POINT_ZOOM,
    SEGMENT_ZOOM_BASE,
    SEGMENT_ZOOM_SPAN_KM,
)
from geosketch.elements import ElementType, LineMode
from geosketch.geo import GeoPoint, distance_km

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraTarget:
    """Where the camera flies for one element."""
    center: GeoPoint
    zoom: float


@dataclass(frozen=True)
class ElementBounds:
    """Bounding box of a set of elements."""
    south_west: GeoPoint
    north_east: GeoPoint
    center: GeoPoint


def clamp_zoom(zoom: float) -> float:
    return max(MIN_ELEMENT_ZOOM, min(MAX_ELEMENT_ZOOM, zoom))


def _zoom_for_span(base: float, span: float) -> float:
    """``clamp(base - log2(span))``; a zero span is as close as the clamp allows."""
    if span <= 0:
        return MAX_ELEMENT_ZOOM
    return clamp_zoom(base - log2(span))


def _polygon_arrays(points: list[GeoPoint]) -> tuple[np.ndarray, np.ndarray]:
    lats = np.array([p.lat for p in points], dtype=float)
    lons = np.array([p.lon for p in points], dtype=float)
    return lats, lons


def camera_target(element: Any) -> Optional[CameraTarget]:
    """
    Compute the camera target for ``element``.

    Args:
        element: Any map element exposing ``type`` and its geometry.

    Returns:
        The target, or None when the element type is not supported or the
        element has no geometry to frame.
    """
    element_type = getattr(element, "type", None)

    if element_type is ElementType.CIRCLE:
        radius_in_degrees = element.radius_km / KM_PER_DEGREE
        return CameraTarget(element.center, _zoom_for_span(CIRCLE_ZOOM_BASE, radius_in_degrees))

    if element_type is ElementType.LINE_SEGMENT:
        if element.mode is LineMode.PARALLEL and element.longitude is not None:
            return CameraTarget(GeoPoint.from_deg(0.0, element.longitude), PARALLEL_ZOOM)

        endpoint = element.effective_endpoint()
        if endpoint is None:
            return CameraTarget(element.center, DEFAULT_SEGMENT_ZOOM)
        length = distance_km(element.center, endpoint)
        return CameraTarget(element.center, _zoom_for_span(SEGMENT_ZOOM_BASE, length / SEGMENT_ZOOM_SPAN_KM))

    if element_type is ElementType.POINT:
        return CameraTarget(element.coordinates, POINT_ZOOM)

    if element_type is ElementType.POLYGON:
        if not element.points:
            _LOGGER.warning("Polygon %s has no vertices", element.id)
            return None
        lats, lons = _polygon_arrays(element.points)
        # Vertex mean, not an area-weighted centroid
        center = GeoPoint.from_deg(float(lats.mean()), float(lons.mean()))
        diagonal = distance_km(
            GeoPoint.from_deg(float(lats.min()), float(lons.min())),
            GeoPoint.from_deg(float(lats.max()), float(lons.max())),
        )
        return CameraTarget(center, _zoom_for_span(SEGMENT_ZOOM_BASE, diagonal / SEGMENT_ZOOM_SPAN_KM))

    _LOGGER.warning("No camera target for element type %r", element_type)
    return None


def all_elements_bounds(elements: Iterable[Any]) -> Optional[ElementBounds]:
    """
    Bounding box around every element.

    Circles are padded by their radius converted to degrees with the 111 km
    constant on both axes. Segments contribute both ends when the far end is
    resolvable.

    Returns:
        The bounds, or None when nothing contributed a coordinate.
    """
    lats: list[float] = []
    lons: list[float] = []

    for element in elements:
        element_type = getattr(element, "type", None)
        if element_type is ElementType.CIRCLE:
            pad = element.radius_km / KM_PER_DEGREE
            lats += [element.center.lat - pad, element.center.lat + pad]
            lons += [element.center.lon - pad, element.center.lon + pad]
        elif element_type is ElementType.LINE_SEGMENT:
            lats.append(element.center.lat)
            lons.append(element.center.lon)
            endpoint = element.effective_endpoint()
            if endpoint is not None:
                lats.append(endpoint.lat)
                lons.append(endpoint.lon)
        elif element_type is ElementType.POINT:
            lats.append(element.coordinates.lat)
            lons.append(element.coordinates.lon)
        elif element_type is ElementType.POLYGON:
            for point in element.points:
                lats.append(point.lat)
                lons.append(point.lon)

    if not lats:
        return None

    lat_arr = np.array(lats)
    lon_arr = np.array(lons)
    min_lat, max_lat = float(lat_arr.min()), float(lat_arr.max())
    min_lon, max_lon = float(lon_arr.min()), float(lon_arr.max())
    return ElementBounds(
        south_west=GeoPoint.from_deg(min_lat, min_lon),
        north_east=GeoPoint.from_deg(max_lat, max_lon),
        center=GeoPoint.from_deg((min_lat + max_lat) / 2, (min_lon + max_lon) / 2),
    )
