"""Navigation mode: walking a cursor along circles and line segments.

Components:
    NavigationSession: The single navigation interaction in progress.
    Navigator: Forward/backward steps and cursor coordinates.
    KeyboardNavigator: Arrow-key and Escape dispatch onto a Navigator.
    step_distance_km: Zoom-dependent step length.

Example:
    >>> from geosketch.navigation import step_distance_km
    >>> step_distance_km(11)
    50
"""

from .keyboard import KeyboardNavigator
from .navigator import NavigationSession, Navigator, degrees_per_km, step_distance_km

__all__ = [
    "KeyboardNavigator",
    "NavigationSession",
    "Navigator",
    "degrees_per_km",
    "step_distance_km",
]
