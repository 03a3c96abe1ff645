"""Arrow-key dispatch for navigation mode.

``ArrowRight`` steps the cursor forward, ``ArrowLeft`` backward, and the map
follows the cursor with a short flight at the current zoom. ``Escape``
leaves navigation mode.
"""

from __future__ import annotations

import logging

from geosketch.collaborators import MapCamera
from geosketch.config import KEYBOARD_FLY_DURATION
from geosketch.elements import ElementType, LayerStore
from geosketch.geo import GeoPoint

from .navigator import Navigator

_LOGGER = logging.getLogger(__name__)

KEY_FORWARD = "ArrowRight"
KEY_BACKWARD = "ArrowLeft"
KEY_EXIT = "Escape"


class KeyboardNavigator:
    """Turns key presses into navigation steps and camera moves.

    Attributes:
        navigator (Navigator): Engine holding the navigation session.
        layers (LayerStore): Where the navigated element is looked up by id.
        camera (MapCamera): Map view that follows the cursor.
    """

    def __init__(self, navigator: Navigator, layers: LayerStore, camera: MapCamera) -> None:
        self.navigator = navigator
        self.layers = layers
        self.camera = camera

    def handle_key(self, key: str) -> bool:
        """Handle one key press.

        Args:
            key (str): DOM-style key name.

        Returns:
            bool: True when the key was consumed and the caller should
            prevent its default action.
        """
        if not self.navigator.is_active:
            return False
        if not self.camera.available:
            return False

        if key == KEY_FORWARD:
            self._step(forward=True)
            return True
        if key == KEY_BACKWARD:
            self._step(forward=False)
            return True
        if key == KEY_EXIT:
            self.navigator.exit_navigation()
            return True
        return False

    def _step(self, forward: bool) -> None:
        session = self.navigator.session
        zoom = self.camera.zoom
        coords: GeoPoint | None = None

        if session.element_type is ElementType.CIRCLE:
            circle = self.layers.find_circle(session.element_id)
            if circle is not None:
                if forward:
                    self.navigator.navigate_circle_forward(circle, zoom)
                else:
                    self.navigator.navigate_circle_backward(circle, zoom)
                coords = self.navigator.circle_coords(circle)
        elif session.element_type is ElementType.LINE_SEGMENT:
            segment = self.layers.find_line_segment(session.element_id)
            if segment is not None:
                if forward:
                    self.navigator.navigate_segment_forward(segment, zoom)
                else:
                    self.navigator.navigate_segment_backward(segment, zoom)
                coords = self.navigator.segment_coords(segment)

        if coords is None:
            _LOGGER.warning("Navigated element %s no longer exists", session.element_id)
            return

        self.camera.fly_to(coords, zoom, duration=KEYBOARD_FLY_DURATION)
