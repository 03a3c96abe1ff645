"""Cursor navigation along circles and line segments.

This module lets a user walk a cursor around a circle's circumference or
along a line segment with discrete forward/backward steps, the way the map
moves when the arrow keys are pressed in navigation mode. Every step covers
a real-world distance that depends only on the current map zoom level, so a
step feels the same size on screen whatever element is being walked.

Step Size:
    ``step_distance_km(zoom) = max(2 ** (11 - zoom) * 5 * 10, 0.01)``.
    Zoom 5 moves about 3200 km per step, zoom 15 about 3 km, and the 0.01 km
    floor keeps extreme zooms from stalling the cursor.

Circles:
    The cursor is an angle in ``[0, 360)`` measured from north. A step of
    ``d`` km turns it by ``(d * degreesPerKm / radius) * 180 / pi`` degrees
    with ``degreesPerKm = 1 / (111 * cos(lat))``. Positions are placed with
    an equirectangular approximation (111 km per degree of latitude); this is
    not a geodesic circle but matches what the map draws at city and regional
    scale.

Line Segments:
    The cursor is a progress fraction along the segment. A step changes it by
    ``d / length`` where length is the great-circle length. Crossing either
    end reflects the cursor back (it bounces) instead of clamping or
    wrapping. Positions are a linear blend of the end coordinates.

Session:
    The ``NavigationSession`` is owned by the caller and handed to the
    ``Navigator``; there is exactly one per interaction, and starting on a
    new element simply overwrites it.

Example:
    >>> from geosketch.elements import CircleElement
    >>> from geosketch.geo import GeoPoint
    >>> navigator = Navigator(NavigationSession())
    >>> circle = CircleElement("c1", GeoPoint.from_deg(0, 0), radius_km=10)
    >>> navigator.start_navigation(ElementType.CIRCLE, "c1", circle=circle)
    >>> coords = navigator.circle_coords(circle)
    >>> round(coords.lat, 4), round(coords.lon, 4)
    (0.0901, 0.0)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import cos, sin

from geosketch.config import (
    KM_PER_DEGREE,
    NAVIGATION_BASE_FACTOR,
    NAVIGATION_MIN_STEP_KM,
    NAVIGATION_MULTIPLIER,
    NAVIGATION_ZOOM_PIVOT,
)
from geosketch.elements import CircleElement, ElementType, LineSegmentElement
from geosketch.geo import GeoPoint, to_degrees, to_radians

_LOGGER = logging.getLogger(__name__)


def step_distance_km(zoom_level: float) -> float:
    """Distance covered by one navigation step at ``zoom_level``.

    Higher zoom means a smaller step. Fractional zoom levels are allowed.

    Args:
        zoom_level (float): Current map zoom.

    Returns:
        float: Step length in kilometers, never below 0.01.
    """
    base_distance = 2 ** (NAVIGATION_ZOOM_PIVOT - zoom_level) * NAVIGATION_BASE_FACTOR * NAVIGATION_MULTIPLIER
    return max(base_distance, NAVIGATION_MIN_STEP_KM)


def degrees_per_km(latitude: float) -> float:
    """Degrees of longitude per kilometer at ``latitude`` (111 km per degree at the equator)."""
    return 1 / (KM_PER_DEGREE * cos(to_radians(latitude)))


@dataclass
class NavigationSession:
    """The single navigation interaction in progress.

    Attributes:
        active (bool): Whether navigation mode is on.
        element_type (ElementType | None): ``CIRCLE`` or ``LINE_SEGMENT`` while active.
        element_id (str | None): Id of the element being walked.
        progress (float): Segment cursor, kept in ``[0, 1]`` by the bounce rule
            as long as a step is shorter than the segment.
        angle_position (float): Circle cursor in degrees, always in ``[0, 360)``.
    """

    active: bool = False
    element_type: ElementType | None = None
    element_id: str | None = None
    progress: float = 0.0
    angle_position: float = 0.0

    def reset(self) -> None:
        """Return to the inactive defaults."""
        self.active = False
        self.element_type = None
        self.element_id = None
        self.progress = 0.0
        self.angle_position = 0.0


class Navigator:
    """Steps a ``NavigationSession`` cursor along circles and segments.

    Step operations are synchronous and mutate the session in place. They do
    not check that the session is active or that the element is the one the
    session was started on; the keyboard layer only calls them when both hold.
    """

    def __init__(self, session: NavigationSession | None = None) -> None:
        self.session = session if session is not None else NavigationSession()

    @property
    def is_active(self) -> bool:
        return self.session.active

    # ------------------------------------------------------------------
    # Session control
    # ------------------------------------------------------------------

    def start_navigation(
        self,
        element_type: ElementType,
        element_id: str,
        circle: CircleElement | None = None,
        segment: LineSegmentElement | None = None,
    ) -> None:
        """Enter navigation mode on an element.

        Only the cursor that matches ``element_type`` is reset, and only when
        the matching element is passed. The other cursor keeps its old value;
        it is never read while ``element_type`` points elsewhere.

        Args:
            element_type: ``ElementType.CIRCLE`` or ``ElementType.LINE_SEGMENT``.
            element_id: Id of the element.
            circle: The circle, when navigating a circle.
            segment: The segment, when navigating a segment.
        """
        session = self.session
        session.active = True
        session.element_type = element_type
        session.element_id = element_id

        if element_type is ElementType.CIRCLE and circle is not None:
            session.angle_position = 0.0
        elif element_type is ElementType.LINE_SEGMENT and segment is not None:
            session.progress = 0.0

        _LOGGER.debug("Navigation started on %s %s", element_type.value, element_id)

    def exit_navigation(self) -> None:
        """Leave navigation mode and reset every field."""
        if self.session.active:
            _LOGGER.debug("Navigation exited on %s", self.session.element_id)
        self.session.reset()

    # ------------------------------------------------------------------
    # Circles
    # ------------------------------------------------------------------

    def _step_circle(self, circle: CircleElement, zoom_level: float, direction: int) -> float:
        if circle.radius_km <= 0:
            _LOGGER.warning("Circle %s has no radius; navigation step ignored", circle.id)
            return self.session.angle_position

        movement = step_distance_km(zoom_level)
        delta = to_degrees(movement * degrees_per_km(circle.center.lat) / circle.radius_km)
        if direction > 0:
            self.session.angle_position = (self.session.angle_position + delta) % 360
        else:
            self.session.angle_position = (self.session.angle_position - delta + 360) % 360
        return self.session.angle_position

    def navigate_circle_forward(self, circle: CircleElement, zoom_level: float) -> float:
        """Turn the circle cursor clockwise by one step; return the new angle."""
        return self._step_circle(circle, zoom_level, 1)

    def navigate_circle_backward(self, circle: CircleElement, zoom_level: float) -> float:
        """Turn the circle cursor counter-clockwise by one step; return the new angle."""
        return self._step_circle(circle, zoom_level, -1)

    def circle_coords(self, circle: CircleElement) -> GeoPoint:
        """Position of the circle cursor.

        Angle 0 is due north of the center, 90 due east.
        """
        theta = to_radians(self.session.angle_position)
        lat = circle.center.lat + (circle.radius_km / KM_PER_DEGREE) * cos(theta)
        lon = circle.center.lon + (circle.radius_km * degrees_per_km(circle.center.lat)) * sin(theta)
        return GeoPoint.from_deg(lat, lon)

    # ------------------------------------------------------------------
    # Line segments
    # ------------------------------------------------------------------

    def _step_segment(self, segment: LineSegmentElement, zoom_level: float, direction: int) -> float:
        length = segment.length_km()
        if length <= 0:
            # No resolvable endpoint: nothing to walk along
            _LOGGER.warning("Segment %s has no length; navigation step ignored", segment.id)
            return self.session.progress

        progress = self.session.progress + direction * step_distance_km(zoom_level) / length

        # Single reflection at either end
        if progress >= 1:
            progress = 1 - (progress - 1)
        elif progress < 0:
            progress = -progress

        self.session.progress = progress
        return progress

    def navigate_segment_forward(self, segment: LineSegmentElement, zoom_level: float) -> float:
        """Move the segment cursor towards the endpoint; return the new progress."""
        return self._step_segment(segment, zoom_level, 1)

    def navigate_segment_backward(self, segment: LineSegmentElement, zoom_level: float) -> float:
        """Move the segment cursor towards the start; return the new progress."""
        return self._step_segment(segment, zoom_level, -1)

    def segment_coords(self, segment: LineSegmentElement) -> GeoPoint:
        """Position of the segment cursor; the start point when there is no endpoint."""
        endpoint = segment.effective_endpoint()
        if endpoint is None:
            return GeoPoint.from_deg(segment.center.lat, segment.center.lon)

        progress = self.session.progress
        lat = segment.center.lat + (endpoint.lat - segment.center.lat) * progress
        lon = segment.center.lon + (endpoint.lon - segment.center.lon) * progress
        return GeoPoint.from_deg(lat, lon)
