"""Tunable constants and playback configuration for the navigation core.

This module centralizes every constant the navigation engine and the
animation sequencer share, so that the formulas in those modules read the
same numbers the map UI was designed around. Distances are kilometers, zoom
levels are map zoom levels (higher is closer), and delays are ``Time`` units.

Planar Approximation:
    ``KM_PER_DEGREE`` (111) is the length of one degree of latitude. The
    navigation cursor on a circle and the camera zoom for a circle both use it
    for a cheap equirectangular conversion instead of full geodesic math.

Navigation Steps:
    One arrow-key step moves ``2 ** (NAVIGATION_ZOOM_PIVOT - zoom) *
    NAVIGATION_BASE_FACTOR * NAVIGATION_MULTIPLIER`` kilometers, never less
    than ``NAVIGATION_MIN_STEP_KM``.

Camera Choreography:
    Element zooms are clamped to ``[MIN_ELEMENT_ZOOM, MAX_ELEMENT_ZOOM]``.
    Flights last ``FLY_DURATION`` with ``EASE_LINEARITY``, and completion is
    reported ``SETTLE_DELAY`` after the map says it stopped moving.

Example:
    >>> from geosketch.config import AnimationConfig, PlaybackType
    >>> config = AnimationConfig(type=PlaybackType.SMOOTH_ZOOM_OUT, zoom_speed=8)
    >>> float(config.zoom_out_duration())
    4.0
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from geosketch.geo import GeoPoint
from geosketch.unit import Millisecond, Second, Time

# Geodesy
KM_PER_DEGREE = 111.0

# Navigation step: 2^(11 - zoom) * 5 * 10 km, floored at 0.01 km
NAVIGATION_ZOOM_PIVOT = 11
NAVIGATION_BASE_FACTOR = 5
NAVIGATION_MULTIPLIER = 10
NAVIGATION_MIN_STEP_KM = 0.01
KEYBOARD_FLY_DURATION: Time = Second(0.5)

# Camera targets
MIN_ELEMENT_ZOOM = 6.0
MAX_ELEMENT_ZOOM = 18.0
CIRCLE_ZOOM_BASE = 13.0
SEGMENT_ZOOM_BASE = 15.0
SEGMENT_ZOOM_SPAN_KM = 1.5
DEFAULT_SEGMENT_ZOOM = 15.0
PARALLEL_ZOOM = 6.0
POINT_ZOOM = 16.0

# Playback timing
FLY_DURATION: Time = Second(1.5)
EASE_LINEARITY = 0.25
SETTLE_DELAY: Time = Millisecond(100)
COUNTDOWN_START = 3
COUNTDOWN_TICK: Time = Millisecond(1000)
REVEAL_PAUSE: Time = Millisecond(2000)
ZOOM_OUT_BASE_SECONDS = 12
ZOOM_OUT_GRACE: Time = Millisecond(500)

# Notifications
MSG_NOTHING_TO_ANIMATE = "No elements to animate"
MSG_ANIMATION_COMPLETE = "Animation complete!"
MSG_VIEWS_REQUIRED = "Start and end views must be set"


class PlaybackType(Enum):
    """Playback modes offered by the animation panel.

    States:
        START_TO_FINISH: Hide everything, then fly to and reveal each element.
        SMOOTH_ZOOM_OUT: One continuous flight from a start view to an end view.
    """

    START_TO_FINISH = "startToFinish"
    SMOOTH_ZOOM_OUT = "smoothZoomOut"


@dataclass(frozen=True)
class ViewCapture:
    """A captured camera position used as a smooth zoom-out endpoint."""

    center: GeoPoint
    zoom: float


@dataclass
class AnimationConfig:
    """Settings for one playback run.

    Attributes:
        type (PlaybackType): Which playback mode to run.
        zoom_speed (int): 1 (slow) to 10 (fast); only used by smooth zoom-out.
        start_view (ViewCapture | None): Smooth zoom-out start.
        end_view (ViewCapture | None): Smooth zoom-out end.
        fly_duration (Time): Camera flight per element.
        ease_linearity (float): Easing parameter handed to the camera.
        settle_delay (Time): Delay between the camera's move-end and the reveal.
        countdown_tick (Time): Interval between countdown values.
        reveal_pause (Time): Pause after an element is revealed.
    """

    type: PlaybackType = PlaybackType.START_TO_FINISH
    zoom_speed: int = 5
    start_view: ViewCapture | None = None
    end_view: ViewCapture | None = None
    fly_duration: Time = FLY_DURATION
    ease_linearity: float = EASE_LINEARITY
    settle_delay: Time = SETTLE_DELAY
    countdown_tick: Time = COUNTDOWN_TICK
    reveal_pause: Time = REVEAL_PAUSE

    def zoom_out_duration(self) -> Time:
        """Flight duration of the smooth zoom-out: speed 1 is 11 s, speed 10 is 2 s."""
        return Second(ZOOM_OUT_BASE_SECONDS - self.zoom_speed)
