"""Guided-tour playback of map elements.

Components:
    AnimationSequencer: Countdown, then fly to and reveal each element; or a
        single smooth zoom-out flight.
    CameraDirector: Camera flight to one element with arrival callback.
    PlaybackState: Playback phases.
    camera_target: Where the camera goes for an element, and at what zoom.
    all_elements_bounds: Bounding box around every element.
    sorted_elements: Elements in tour order.

Example:
    >>> from geosketch.animation import AnimationSequencer
    >>> from geosketch.collaborators import UIState
    >>> from geosketch.elements import LayerStore
    >>> from geosketch.timer import ManualScheduler
    >>> ui = UIState()
    >>> scheduler = ManualScheduler()
    >>> sequencer = AnimationSequencer(LayerStore(), ui, scheduler)
    >>> ui.start_animation()
    >>> sequencer.start_playback()
    >>> scheduler.run_until_idle()
    3
    >>> ui.toasts[-1].message
    'No elements to animate'
"""

from .sequencer import AnimationSequencer, CameraDirector, PlaybackState, sorted_elements
from .targets import CameraTarget, ElementBounds, all_elements_bounds, camera_target, clamp_zoom

__all__ = [
    "AnimationSequencer",
    "CameraDirector",
    "CameraTarget",
    "ElementBounds",
    "PlaybackState",
    "all_elements_bounds",
    "camera_target",
    "clamp_zoom",
    "sorted_elements",
]
