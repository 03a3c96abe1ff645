"""Contracts for the collaborators the navigation core talks to.

The core owns no rendering, storage or UI framework. It reaches the outside
world through four narrow interfaces:

    MapCamera: the map view (fly-to, move-end event, current zoom).
    ElementVisibility: anything that shows or hides an element by type and id.
    Notifier: user-visible toast messages.
    UIState: the UI flags the sequencer reads and writes.

``UIState`` is provided as a concrete in-memory object; it implements both
``ElementVisibility`` and ``Notifier`` so an embedding application can use it
as its store or mirror it into its own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from geosketch.config import COUNTDOWN_START
from geosketch.elements import ElementType
from geosketch.geo import GeoPoint
from geosketch.unit import Time

_LOGGER = logging.getLogger(__name__)


class Severity(Enum):
    """Toast severities."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class MapCamera(Protocol):
    """The map view's camera.

    ``available`` is False until the map instance exists; callers must check
    it and degrade gracefully instead of waiting for the camera.
    """

    @property
    def available(self) -> bool: ...

    @property
    def zoom(self) -> float: ...

    def fly_to(self, target: GeoPoint, zoom: float, *, duration: Time, ease_linearity: float | None = None) -> None:
        """Start an animated transition to ``target`` at ``zoom``."""
        ...

    def once_move_end(self, callback: Callable[[], Any]) -> None:
        """Call ``callback`` once when the current transition settles."""
        ...

    def set_center(self, target: GeoPoint, zoom: float) -> None:
        """Jump to ``target`` at ``zoom`` without animation."""
        ...


class ElementVisibility(Protocol):
    """Shows or hides one element; idempotent, keyed by type and id."""

    def set_visibility(self, element_type: ElementType, element_id: str, visible: bool) -> None: ...


class Notifier(Protocol):
    """Fire-and-forget user notifications."""

    def notify(self, message: str, severity: Severity) -> None: ...


@dataclass
class Toast:
    message: str
    severity: Severity


@dataclass
class UIState:
    """
    UI flags shared between the boundary layer and the animation sequencer.

    Attributes:
        is_playing (bool): Playback flag. The boundary sets it and calls
            ``AnimationSequencer.start_playback``; clearing it requests a stop.
        sidebar_open (bool): Right panel.
        left_sidebar_open (bool): Left panel.
        current_element_index (int): Index of the element being revealed, -1 when idle.
        countdown (int): Countdown value shown before playback.
        visibility (dict): Per-element visibility keyed by ``"<type>_<id>"``.
        toasts (list[Toast]): Notifications in emission order.
    """
    is_playing: bool = False
    sidebar_open: bool = True
    left_sidebar_open: bool = False
    current_element_index: int = -1
    countdown: int = 0
    visibility: dict[str, bool] = field(default_factory=dict)
    toasts: list[Toast] = field(default_factory=list)

    @staticmethod
    def visibility_key(element_type: ElementType, element_id: str) -> str:
        return f"{element_type.value}_{element_id}"

    def set_visibility(self, element_type: ElementType, element_id: str, visible: bool) -> None:
        self.visibility[self.visibility_key(element_type, element_id)] = visible

    def is_visible(self, element_type: ElementType, element_id: str) -> bool:
        """Elements are visible until something hides them."""
        return self.visibility.get(self.visibility_key(element_type, element_id), True)

    def notify(self, message: str, severity: Severity) -> None:
        _LOGGER.debug("Toast (%s): %s", severity.value, message)
        self.toasts.append(Toast(message, severity))

    def start_animation(self) -> None:
        self.is_playing = True
        self.current_element_index = -1
        self.countdown = COUNTDOWN_START

    def stop_animation(self) -> None:
        self.is_playing = False
        self.current_element_index = -1
        self.countdown = 0

    def close_panels(self) -> None:
        self.sidebar_open = False
        self.left_sidebar_open = False
