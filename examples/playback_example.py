"""
Replay a small drawing as a guided tour on a simulated clock.

The camera here is a stand-in that prints each flight and reports arrival
when the flight's duration has elapsed.
"""

import logging
import sys

from geosketch.animation import AnimationSequencer, all_elements_bounds
from geosketch.collaborators import UIState
from geosketch.elements import (
    CircleElement,
    LayerStore,
    LineMode,
    LineSegmentElement,
    PointElement,
    PolygonElement,
)
from geosketch.geo import GeoPoint
from geosketch.logging_config import setup_logging
from geosketch.timer import ManualScheduler


class PrintingCamera:
    """Map camera that logs flights and settles on the scheduler's clock."""

    available = True
    zoom = 8.0

    def __init__(self, scheduler):
        self.scheduler = scheduler
        self._move_end = []

    def fly_to(self, target, zoom, *, duration, ease_linearity=None):
        print(f"  t={float(self.scheduler.now):5.1f}s  fly to ({target.lat:.4f}, {target.lon:.4f}) zoom {zoom:.2f}")
        self.zoom = zoom
        self.scheduler.schedule(self._settled, duration)

    def once_move_end(self, callback):
        self._move_end.append(callback)

    def set_center(self, target, zoom):
        self.zoom = zoom

    def _settled(self):
        callbacks, self._move_end = self._move_end, []
        for callback in callbacks:
            callback()


def build_layers():
    return LayerStore(
        circles=[CircleElement("harbour", GeoPoint.from_deg(43.2965, 5.3698), radius_km=3, created_at=1)],
        line_segments=[
            LineSegmentElement(
                "bearing-1", GeoPoint.from_deg(43.30, 5.37),
                mode=LineMode.AZIMUTH, distance_km=25, azimuth=120, created_at=2,
            )
        ],
        points=[PointElement("lighthouse", GeoPoint.from_deg(43.2803, 5.3111), created_at=3)],
        polygons=[
            PolygonElement(
                "island",
                [GeoPoint.from_deg(43.21, 5.33), GeoPoint.from_deg(43.22, 5.36), GeoPoint.from_deg(43.20, 5.37)],
                created_at=4,
            )
        ],
    )


def main():
    # Log lines go to stderr so the printed tour stays readable on stdout
    setup_logging(logging.INFO, stream=sys.stderr, fmt="%(levelname)s %(name)s: %(message)s")

    print("=" * 80)
    print("GeoSketch - Guided Tour Playback")
    print("=" * 80)

    layers = build_layers()
    bounds = all_elements_bounds(layers.all_elements())
    print(f"\n{len(layers)} elements, centered on ({bounds.center.lat:.4f}, {bounds.center.lon:.4f})\n")

    scheduler = ManualScheduler()
    ui = UIState()
    sequencer = AnimationSequencer(layers, ui, scheduler, camera=PrintingCamera(scheduler))

    ui.start_animation()
    sequencer.start_playback()
    scheduler.run_until_idle()

    print(f"\nFinished at t={float(scheduler.now):.1f}s in state {sequencer.state.name}")
    for toast in ui.toasts:
        print(f"[{toast.severity.value}] {toast.message}")


if __name__ == "__main__":
    main()
