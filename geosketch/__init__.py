"""Navigation and animation core for a map annotation tool.

GeoSketch holds the algorithmic part of a browser map sketching tool: the
math that walks a cursor along drawn circles and line segments with the
arrow keys, and the choreography that replays a drawing as a guided tour.
Rendering, storage and the UI framework stay outside; the core reaches them
through small collaborator interfaces so it can be driven by a real map or
by a deterministic test harness alike.

Package Architecture:
    Foundation Layer:
        • Unit system (geosketch.unit): Typed angles, lengths and durations
          stored in SI scale, with family-checked arithmetic.
        • Geodesy (geosketch.geo): ``GeoPoint`` plus great-circle distance,
          destination point and bearing on a 6371 km sphere (pyproj).
        • Timing (geosketch.timer): Countdown timers and schedulers, manual
          for tests and asyncio-backed for live use.
        • State (geosketch.state): Validated finite state machine.

    Model Layer:
        • Elements (geosketch.elements): Circles, line segments, points and
          polygons as the drawing tools store them.
        • Collaborators (geosketch.collaborators): Map camera, visibility and
          notification contracts, and the in-memory ``UIState``.

    Behaviour Layer:
        • Navigation (geosketch.navigation): Zoom-dependent cursor steps on
          circles and segments, and arrow-key dispatch.
        • Animation (geosketch.animation): Camera targets per element type and
          the playback sequencer.

Conventions:
    Coordinates are decimal degrees through ``GeoPoint.lat`` / ``GeoPoint.lon``.
    Distances handed between modules as plain floats are kilometers. Delays
    are ``Time`` units. Data problems (missing camera, missing endpoint,
    unknown element type) degrade to no-ops and are logged; they never raise.

Quick Start:
    >>> from geosketch.elements import CircleElement, ElementType
    >>> from geosketch.geo import GeoPoint
    >>> from geosketch.navigation import Navigator
    >>> circle = CircleElement("c1", GeoPoint.from_deg(45.0, 7.0), radius_km=5)
    >>> navigator = Navigator()
    >>> navigator.start_navigation(ElementType.CIRCLE, "c1", circle=circle)
    >>> angle = navigator.navigate_circle_forward(circle, zoom_level=14)
    >>> 0 <= angle < 360
    True

Logging:
    Every module logs under the ``geosketch`` namespace. Call
    ``geosketch.logging_config.setup_logging`` to get console output.
"""

__version__ = "0.1.0"
