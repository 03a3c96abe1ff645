"""Guided-tour playback over the map's elements.

The sequencer replays the map as a tour: it hides every element, counts
down 3, 2, 1, then for each element in creation order flies the camera to
it, reveals it, pauses, and moves on. The alternative smooth zoom-out mode
makes one long flight from a captured start view to a captured end view.

Playback phases are a validated state machine:

    IDLE ──start──> COUNTDOWN ──> REVEALING ──> COMPLETE
                         │            │
                         └──> ZOOMING_OUT ──> COMPLETE
    REVEALING / ZOOMING_OUT ──stop──> IDLE
    any state ──start──> COUNTDOWN (a running tour is abandoned)

Timing:
    All waits go through the injected ``Scheduler``: countdown ticks every
    second, a two-second pause after each reveal, a 100 ms settle after each
    camera flight. Nothing blocks; progress only happens in callbacks.

Stopping:
    The playing flag lives on ``UIState``. Clearing it is noticed right
    before an element's flight starts and when the camera reports arrival,
    so an in-flight transition always finishes first. A stopped tour makes
    every element visible again.

Ordering Caveat:
    The empty-tour check runs after the countdown, so an empty map still
    shows 3, 2, 1 before reporting that there is nothing to animate.

Stalls:
    There is no timeout on camera flights. A camera that never reports
    move-end stalls the tour on that element.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, auto
from typing import Any

from geosketch.collaborators import ElementVisibility, MapCamera, Severity, UIState
from geosketch.config import (
    COUNTDOWN_START,
    MSG_ANIMATION_COMPLETE,
    MSG_NOTHING_TO_ANIMATE,
    MSG_VIEWS_REQUIRED,
    ZOOM_OUT_GRACE,
    AnimationConfig,
    PlaybackType,
)
from geosketch.elements import LayerStore, MapElement
from geosketch.state import Action, StateGraph, StateMachine
from geosketch.timer import Scheduler, Timer
from geosketch.unit import Time

from .targets import camera_target

_LOGGER = logging.getLogger(__name__)


class PlaybackState(Enum):
    """Phases of a playback run.

    States:
        IDLE: Nothing playing (initial state, and after a stop).
        COUNTDOWN: Counting 3, 2, 1 before the tour.
        REVEALING: Flying to and revealing elements one by one.
        ZOOMING_OUT: Smooth zoom-out flight in progress.
        COMPLETE: Tour finished normally.
    """

    IDLE = auto()
    COUNTDOWN = auto()
    REVEALING = auto()
    ZOOMING_OUT = auto()
    COMPLETE = auto()


def sorted_elements(layers: LayerStore) -> list[MapElement]:
    """All elements in tour order: creation time, then id.

    A missing ``created_at`` sorts as 0, i.e. first.
    """
    return sorted(layers.all_elements(), key=lambda element: (element.created_at or 0, element.id))


class CameraDirector:
    """Flies the map camera to elements and reports arrival.

    Attributes:
        camera (MapCamera | None): The map camera, None before the map exists.
        scheduler (Scheduler): Runs the settle delay after arrival.
        config (AnimationConfig): Flight duration, easing and settle delay.
    """

    def __init__(self, camera: MapCamera | None, scheduler: Scheduler, config: AnimationConfig) -> None:
        self.camera = camera
        self.scheduler = scheduler
        self.config = config

    @property
    def camera_ready(self) -> bool:
        return self.camera is not None and self.camera.available

    def navigate_to(self, element: Any, on_complete: Callable[[], Any] | None = None) -> bool:
        """Fly the camera to ``element``.

        ``on_complete`` runs exactly once: immediately when there is no
        camera or no target for the element, otherwise a settle delay after
        the camera's move-end event. Without ``on_complete`` the caller treats
        the call as complete as soon as it returns.

        Returns:
            bool: True if a camera transition was started.
        """
        if not self.camera_ready:
            _LOGGER.warning("Map camera unavailable; skipping flight to %s", getattr(element, "id", element))
            if on_complete is not None:
                on_complete()
            return False

        target = camera_target(element)
        if target is None:
            if on_complete is not None:
                on_complete()
            return False

        if on_complete is not None:
            self.camera.once_move_end(lambda: self.scheduler.schedule(on_complete, self.config.settle_delay))
        self.camera.fly_to(
            target.center,
            target.zoom,
            duration=self.config.fly_duration,
            ease_linearity=self.config.ease_linearity,
        )
        _LOGGER.debug("Flying to %s at zoom %.2f", getattr(element, "id", element), target.zoom)
        return True


class AnimationSequencer:
    """Runs guided-tour playback over a ``LayerStore``.

    The boundary layer calls ``start_playback`` whenever it sees the playing
    flag go from false to true, and clears the flag to stop. The sequencer
    never sets the flag to true itself; it clears it when a run completes
    or has nothing to show.

    Attributes:
        layers (LayerStore): Elements to tour; re-read on every start.
        ui (UIState): Playing flag, panels, step index, countdown, toasts and
            the UI-side element visibility.
        drawing (ElementVisibility | None): Drawing-layer visibility.
        director (CameraDirector): Camera flights.
        config (AnimationConfig): Playback settings.
    """

    def __init__(
        self,
        layers: LayerStore,
        ui: UIState,
        scheduler: Scheduler,
        camera: MapCamera | None = None,
        drawing: ElementVisibility | None = None,
        config: AnimationConfig | None = None,
    ) -> None:
        self.layers = layers
        self.ui = ui
        self.scheduler = scheduler
        self.drawing = drawing
        self.config = config or AnimationConfig()
        self.director = CameraDirector(camera, scheduler, self.config)
        self.current_index = 0

        self._elements: list[MapElement] = []
        self._timers: list[Timer] = []
        self._run = 0
        self._machine = StateMachine(PlaybackState.IDLE, self._build_graph())

    def _build_graph(self) -> StateGraph:
        countdown = Action(PlaybackState.COUNTDOWN, self._enter_countdown)
        halt = Action(PlaybackState.IDLE, self._enter_idle)
        complete = Action(PlaybackState.COMPLETE, self._enter_complete)
        return {
            PlaybackState.IDLE: [countdown],
            PlaybackState.COUNTDOWN: [
                countdown,
                Action(PlaybackState.REVEALING, self._enter_revealing),
                Action(PlaybackState.ZOOMING_OUT, self._enter_zooming_out),
            ],
            PlaybackState.REVEALING: [countdown, complete, halt],
            PlaybackState.ZOOMING_OUT: [countdown, complete, halt],
            PlaybackState.COMPLETE: [countdown],
        }

    @property
    def state(self) -> PlaybackState:
        return self._machine.current

    @property
    def elements(self) -> list[MapElement]:
        """Snapshot of the elements in tour order for the current run."""
        return list(self._elements)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def start_playback(self) -> None:
        """Start a run. Any run still in progress is abandoned."""
        self._cancel_timers()
        self._run += 1
        self._machine.request_transition(PlaybackState.COUNTDOWN)

    # ------------------------------------------------------------------
    # State effects
    # ------------------------------------------------------------------

    def _enter_countdown(self) -> None:
        self.ui.close_panels()
        self._elements = sorted_elements(self.layers)
        self.current_index = 0
        _LOGGER.info("Playback started (%s, %d elements)", self.config.type.value, len(self._elements))

        if self.config.type is PlaybackType.START_TO_FINISH:
            for element in self._elements:
                self._set_visibility(element, False)
        elif self.config.start_view is not None and self.director.camera_ready:
            self.director.camera.set_center(self.config.start_view.center, self.config.start_view.zoom)

        self.ui.countdown = COUNTDOWN_START
        self._schedule(self._countdown_tick, self.config.countdown_tick, COUNTDOWN_START)

    def _countdown_tick(self, run: int, value: int) -> None:
        if run != self._run:
            return
        value -= 1
        if value > 0:
            self.ui.countdown = value
            self._schedule(self._countdown_tick, self.config.countdown_tick, value)
            return

        self.ui.countdown = 0
        if self.config.type is PlaybackType.SMOOTH_ZOOM_OUT:
            self._machine.request_transition(PlaybackState.ZOOMING_OUT)
        else:
            self._machine.request_transition(PlaybackState.REVEALING)

    def _enter_revealing(self) -> None:
        if not self._elements:
            self.ui.stop_animation()
            self.ui.notify(MSG_NOTHING_TO_ANIMATE, Severity.INFO)
            self._machine.request_transition(PlaybackState.IDLE, False)
            return
        self._show_next(self._run)

    def _enter_zooming_out(self) -> None:
        if not self.director.camera_ready:
            _LOGGER.warning("Map camera unavailable; smooth zoom-out aborted")
            self.ui.stop_animation()
            self._machine.request_transition(PlaybackState.IDLE, False)
            return

        start_view, end_view = self.config.start_view, self.config.end_view
        if start_view is None or end_view is None:
            self.ui.stop_animation()
            self.ui.notify(MSG_VIEWS_REQUIRED, Severity.ERROR)
            self._machine.request_transition(PlaybackState.IDLE, False)
            return

        duration = self.config.zoom_out_duration()
        self.director.camera.fly_to(end_view.center, end_view.zoom, duration=duration)
        self._schedule(self._finish_zoom_out, duration + ZOOM_OUT_GRACE)

    def _enter_complete(self) -> None:
        self.ui.stop_animation()
        self.ui.notify(MSG_ANIMATION_COMPLETE, Severity.SUCCESS)
        self.ui.close_panels()
        _LOGGER.info("Playback complete")

    def _enter_idle(self, reveal_all: bool) -> None:
        if reveal_all:
            _LOGGER.info("Playback stopped at element %d; revealing all", self.current_index)
            for element in self._elements:
                self._set_visibility(element, True)

    # ------------------------------------------------------------------
    # Tour steps
    # ------------------------------------------------------------------

    def _show_next(self, run: int) -> None:
        if run != self._run:
            return
        if not self.ui.is_playing:
            self._machine.request_transition(PlaybackState.IDLE, True)
            return
        if self.current_index >= len(self._elements):
            self._machine.request_transition(PlaybackState.COMPLETE)
            return

        element = self._elements[self.current_index]
        self.ui.current_element_index = self.current_index
        self.director.navigate_to(element, lambda: self._on_arrival(run, element))

    def _on_arrival(self, run: int, element: MapElement) -> None:
        if run != self._run:
            return
        if not self.ui.is_playing:
            self._machine.request_transition(PlaybackState.IDLE, True)
            return

        self._set_visibility(element, True)
        self.current_index += 1
        self._schedule(self._show_next, self.config.reveal_pause)

    def _finish_zoom_out(self, run: int) -> None:
        if run != self._run:
            return
        if self.ui.is_playing:
            self._machine.request_transition(PlaybackState.COMPLETE)
        else:
            self._machine.request_transition(PlaybackState.IDLE, False)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _set_visibility(self, element: MapElement, visible: bool) -> None:
        self.ui.set_visibility(element.type, element.id, visible)
        if self.drawing is not None:
            self.drawing.set_visibility(element.type, element.id, visible)

    def _schedule(self, callback: Callable[..., Any], delay: Time, *args: Any) -> None:
        run = self._run
        self._timers = [timer for timer in self._timers if timer.active]
        self._timers.append(self.scheduler.schedule(lambda: callback(run, *args), delay))

    def _cancel_timers(self) -> None:
        for timer in self._timers:
            timer.cancel()
        self._timers = []
