"""
Map element models read by the navigation engine and the animation sequencer.

The core never mutates an element: drawing tools and project storage own
them, the core only reads their geometry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

from .geo import GeoPoint, destination_point, distance_km


class ElementType(Enum):
    """Kinds of map elements; values are the keys the UI uses."""

    CIRCLE = "circle"
    LINE_SEGMENT = "lineSegment"
    POINT = "point"
    POLYGON = "polygon"


class LineMode(Enum):
    """How a line segment was drawn."""

    COORDINATE = "coordinate"
    AZIMUTH = "azimuth"
    INTERSECTION = "intersection"
    PARALLEL = "parallel"


@dataclass
class CircleElement:
    """A circle of ``radius_km`` around ``center``."""
    id: str
    center: GeoPoint
    radius_km: float
    created_at: Optional[float] = None
    name: str = ""

    type = ElementType.CIRCLE


@dataclass
class LineSegmentElement:
    """
    A line segment starting at ``center``.

    In azimuth mode the far end is not stored but derived from ``distance_km``
    and ``azimuth``; every other mode uses ``endpoint`` as drawn. Parallel
    segments additionally carry the ``longitude`` the camera frames them on.
    """
    id: str
    center: GeoPoint
    mode: LineMode = LineMode.COORDINATE
    endpoint: Optional[GeoPoint] = None
    distance_km: Optional[float] = None
    azimuth: Optional[float] = None
    longitude: Optional[float] = None
    created_at: Optional[float] = None
    name: str = ""

    type = ElementType.LINE_SEGMENT

    def effective_endpoint(self) -> Optional[GeoPoint]:
        """
        Far end of the segment.

        Derived with the destination-point formula for azimuth segments that
        have a non-zero distance and an azimuth; otherwise the stored endpoint,
        which may be None.
        """
        if self.mode is LineMode.AZIMUTH and self.distance_km and self.azimuth is not None:
            return destination_point(self.center, self.distance_km, self.azimuth)
        return self.endpoint

    def length_km(self) -> float:
        """Great-circle length; 0 when no endpoint can be resolved."""
        endpoint = self.effective_endpoint()
        if endpoint is None:
            return 0.0
        return distance_km(self.center, endpoint)


@dataclass
class PointElement:
    """A single marker."""
    id: str
    coordinates: GeoPoint
    created_at: Optional[float] = None
    name: str = ""

    type = ElementType.POINT


@dataclass
class PolygonElement:
    """A closed shape given by its vertices."""
    id: str
    points: list[GeoPoint] = field(default_factory=list)
    created_at: Optional[float] = None
    name: str = ""

    type = ElementType.POLYGON


MapElement = Union[CircleElement, LineSegmentElement, PointElement, PolygonElement]


@dataclass
class LayerStore:
    """The four element collections currently loaded, in drawing order."""
    circles: list[CircleElement] = field(default_factory=list)
    line_segments: list[LineSegmentElement] = field(default_factory=list)
    points: list[PointElement] = field(default_factory=list)
    polygons: list[PolygonElement] = field(default_factory=list)

    def all_elements(self) -> Iterator[MapElement]:
        """Every element, collection by collection."""
        yield from self.circles
        yield from self.line_segments
        yield from self.points
        yield from self.polygons

    def find_circle(self, element_id: str) -> Optional[CircleElement]:
        return next((c for c in self.circles if c.id == element_id), None)

    def find_line_segment(self, element_id: str) -> Optional[LineSegmentElement]:
        return next((s for s in self.line_segments if s.id == element_id), None)

    def __len__(self) -> int:
        return len(self.circles) + len(self.line_segments) + len(self.points) + len(self.polygons)
