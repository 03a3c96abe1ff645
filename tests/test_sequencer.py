"""
Tests for guided-tour playback.
"""

import unittest
from enum import Enum
from types import SimpleNamespace
from unittest.mock import MagicMock

from geosketch.animation import AnimationSequencer, CameraDirector, PlaybackState, sorted_elements
from geosketch.collaborators import Severity, Toast, UIState
from geosketch.config import (
    MSG_ANIMATION_COMPLETE,
    MSG_NOTHING_TO_ANIMATE,
    MSG_VIEWS_REQUIRED,
    AnimationConfig,
    PlaybackType,
    ViewCapture,
)
from geosketch.elements import (
    CircleElement,
    ElementType,
    LayerStore,
    LineSegmentElement,
    PointElement,
    PolygonElement,
)
from geosketch.geo import GeoPoint
from geosketch.timer import ManualScheduler
from geosketch.unit import Second


class FakeCamera:
    """Map camera whose flights take their full duration on a ManualScheduler."""

    def __init__(self, scheduler, available=True, zoom=10.0):
        self.scheduler = scheduler
        self.available = available
        self.zoom = zoom
        self.flights = []
        self.centers = []
        self._move_end = []

    def fly_to(self, target, zoom, *, duration, ease_linearity=None):
        self.flights.append((target, zoom, duration, ease_linearity))
        self.scheduler.schedule(self._settled, duration)

    def once_move_end(self, callback):
        self._move_end.append(callback)

    def set_center(self, target, zoom):
        self.centers.append((target, zoom))

    def _settled(self):
        callbacks, self._move_end = self._move_end, []
        for callback in callbacks:
            callback()


class SilentCamera(FakeCamera):
    """Camera that never reports the end of a move."""

    def fly_to(self, target, zoom, *, duration, ease_linearity=None):
        self.flights.append((target, zoom, duration, ease_linearity))


class OtherType(Enum):
    LABEL = "label"


def three_elements():
    return LayerStore(
        circles=[CircleElement("circle", GeoPoint.from_deg(45, 7), radius_km=5, created_at=1)],
        points=[PointElement("point", GeoPoint.from_deg(45.1, 7.1), created_at=2)],
        polygons=[
            PolygonElement(
                "polygon",
                [GeoPoint.from_deg(45, 7), GeoPoint.from_deg(45.2, 7), GeoPoint.from_deg(45.2, 7.2)],
                created_at=3,
            )
        ],
    )


class TestSortedElements(unittest.TestCase):
    """Test tour ordering."""

    def test_created_at_then_id(self):
        """Test that missing created_at sorts first and ties break by id."""
        layers = LayerStore(
            circles=[CircleElement("b", GeoPoint.from_deg(0, 0), 1, created_at=5)],
            points=[PointElement("a", GeoPoint.from_deg(0, 0), created_at=5)],
            line_segments=[LineSegmentElement("c", GeoPoint.from_deg(0, 0))],
        )
        self.assertEqual([e.id for e in sorted_elements(layers)], ["c", "a", "b"])

    def test_recomputed_each_time(self):
        """Test that new elements show up in the next ordering."""
        layers = LayerStore()
        self.assertEqual(sorted_elements(layers), [])
        layers.points.append(PointElement("p", GeoPoint.from_deg(0, 0)))
        self.assertEqual(len(sorted_elements(layers)), 1)


class TestCameraDirector(unittest.TestCase):
    """Test flights to single elements."""

    def setUp(self):
        self.scheduler = ManualScheduler()
        self.camera = FakeCamera(self.scheduler)
        self.config = AnimationConfig()
        self.director = CameraDirector(self.camera, self.scheduler, self.config)
        self.point = PointElement("p", GeoPoint.from_deg(1, 2))

    def test_flight_parameters(self):
        """Test duration, easing and zoom handed to the camera."""
        self.assertTrue(self.director.navigate_to(self.point))
        target, zoom, duration, ease = self.camera.flights[0]
        self.assertIs(target, self.point.coordinates)
        self.assertEqual(zoom, 16.0)
        self.assertEqual(duration, Second(1.5))
        self.assertEqual(ease, 0.25)

    def test_completion_after_settle(self):
        """Test that completion runs once, 100 ms after the move ends."""
        on_complete = MagicMock()
        self.director.navigate_to(self.point, on_complete)
        self.scheduler.advance(Second(1.5))
        on_complete.assert_not_called()
        self.scheduler.advance(Second(0.1))
        on_complete.assert_called_once_with()
        self.scheduler.run_until_idle()
        on_complete.assert_called_once_with()

    def test_no_camera_completes_immediately(self):
        """Test that a missing camera never stalls."""
        on_complete = MagicMock()
        director = CameraDirector(None, self.scheduler, self.config)
        self.assertFalse(director.navigate_to(self.point, on_complete))
        on_complete.assert_called_once_with()

    def test_camera_not_ready_completes_immediately(self):
        """Test that an unavailable camera is treated like a missing one."""
        on_complete = MagicMock()
        self.camera.available = False
        self.assertFalse(self.director.navigate_to(self.point, on_complete))
        on_complete.assert_called_once_with()
        self.assertEqual(self.camera.flights, [])

    def test_unknown_type_completes_immediately(self):
        """Test that elements without a target complete without a flight."""
        on_complete = MagicMock()
        element = SimpleNamespace(id="x", type=OtherType.LABEL)
        self.assertFalse(self.director.navigate_to(element, on_complete))
        on_complete.assert_called_once_with()
        self.assertEqual(self.camera.flights, [])


class TestStartToFinish(unittest.TestCase):
    """Test the reveal-one-by-one playback."""

    def setUp(self):
        self.scheduler = ManualScheduler()
        self.camera = FakeCamera(self.scheduler)
        self.drawing = MagicMock()
        self.ui = UIState(left_sidebar_open=True)
        self.layers = three_elements()
        self.sequencer = AnimationSequencer(
            self.layers, self.ui, self.scheduler, camera=self.camera, drawing=self.drawing
        )

    def play(self):
        self.ui.start_animation()
        self.sequencer.start_playback()

    def visible(self, element):
        return self.ui.is_visible(element.type, element.id)

    def test_start_hides_everything_and_closes_panels(self):
        """Test the countdown entry actions."""
        self.play()
        self.assertEqual(self.sequencer.state, PlaybackState.COUNTDOWN)
        self.assertFalse(self.ui.sidebar_open)
        self.assertFalse(self.ui.left_sidebar_open)
        self.assertEqual(self.ui.countdown, 3)
        for element in self.layers.all_elements():
            self.assertFalse(self.visible(element))
            self.drawing.set_visibility.assert_any_call(element.type, element.id, False)

    def test_countdown_ticks(self):
        """Test 3, 2, 1, 0 at one-second intervals."""
        self.play()
        values = []
        for _ in range(3):
            self.scheduler.advance(Second(1))
            values.append(self.ui.countdown)
        self.assertEqual(values, [2, 1, 0])
        self.assertEqual(self.sequencer.state, PlaybackState.REVEALING)
        self.assertEqual(len(self.camera.flights), 1)

    def test_full_run(self):
        """Test that every element is revealed in order and completion is reported."""
        reveal_order = []
        self.drawing.set_visibility.side_effect = (
            lambda element_type, element_id, visible: visible and reveal_order.append(element_id)
        )
        self.play()
        self.scheduler.run_until_idle()

        self.assertEqual(self.sequencer.state, PlaybackState.COMPLETE)
        self.assertEqual(reveal_order, ["circle", "point", "polygon"])
        self.assertEqual(len(self.camera.flights), 3)
        self.assertFalse(self.ui.is_playing)
        self.assertEqual(self.ui.toasts, [Toast(MSG_ANIMATION_COMPLETE, Severity.SUCCESS)])
        self.assertFalse(self.ui.sidebar_open)
        # 3 s countdown, then 3 x (1.5 s flight + 0.1 s settle + 2 s pause)
        self.assertAlmostEqual(float(self.scheduler.now), 3 + 3 * 3.6)

    def test_step_index_published(self):
        """Test that the current element index is written to the UI."""
        self.play()
        self.scheduler.advance(Second(3))
        self.assertEqual(self.ui.current_element_index, 0)
        self.scheduler.advance(Second(3.7))
        self.assertEqual(self.ui.current_element_index, 1)

    def test_reveal_waits_for_arrival(self):
        """Test that an element is revealed only after its flight settles."""
        self.play()
        circle = self.layers.circles[0]
        self.scheduler.advance(Second(4.5))
        self.assertFalse(self.visible(circle))
        self.scheduler.advance(Second(0.1))
        self.assertTrue(self.visible(circle))

    def test_manual_stop_reveals_all(self):
        """Test stop after the first reveal, before the second flight completes."""
        self.play()
        self.scheduler.advance(Second(5))
        self.assertTrue(self.visible(self.layers.circles[0]))
        self.assertFalse(self.visible(self.layers.points[0]))

        self.ui.is_playing = False
        self.scheduler.run_until_idle()

        self.assertEqual(self.sequencer.state, PlaybackState.IDLE)
        for element in self.layers.all_elements():
            self.assertTrue(self.visible(element))
            self.drawing.set_visibility.assert_any_call(element.type, element.id, True)
        self.assertEqual(len(self.camera.flights), 1)
        self.assertEqual(self.ui.toasts, [])

    def test_stop_mid_flight_lets_flight_finish(self):
        """Test that a stop during a flight is noticed on arrival."""
        self.play()
        self.scheduler.advance(Second(7))
        self.assertEqual(len(self.camera.flights), 2)
        self.ui.is_playing = False
        self.scheduler.run_until_idle()

        self.assertEqual(self.sequencer.state, PlaybackState.IDLE)
        self.assertEqual(len(self.camera.flights), 2)
        for element in self.layers.all_elements():
            self.assertTrue(self.visible(element))

    def test_empty_layers(self):
        """Test that the countdown runs, then nothing to animate is reported."""
        sequencer = AnimationSequencer(LayerStore(), self.ui, self.scheduler, camera=self.camera)
        self.ui.start_animation()
        sequencer.start_playback()
        self.scheduler.advance(Second(2.5))
        self.assertEqual(self.ui.toasts, [])

        self.scheduler.run_until_idle()
        self.assertAlmostEqual(float(self.scheduler.now), 3.0)
        self.assertEqual(self.ui.toasts, [Toast(MSG_NOTHING_TO_ANIMATE, Severity.INFO)])
        self.assertFalse(self.ui.is_playing)
        self.assertEqual(sequencer.state, PlaybackState.IDLE)
        self.assertEqual(self.camera.flights, [])

    def test_no_camera(self):
        """Test that playback without a map still reveals everything."""
        sequencer = AnimationSequencer(self.layers, self.ui, self.scheduler, drawing=self.drawing)
        self.ui.start_animation()
        sequencer.start_playback()
        self.scheduler.run_until_idle()

        self.assertEqual(sequencer.state, PlaybackState.COMPLETE)
        for element in self.layers.all_elements():
            self.assertTrue(self.visible(element))
        self.assertAlmostEqual(float(self.scheduler.now), 3 + 3 * 2.0)

    def test_unknown_element_type_revealed_without_flight(self):
        """Test that an element without a camera target is still revealed."""
        label = SimpleNamespace(id="label", type=OtherType.LABEL, created_at=0)
        self.layers.points.append(label)
        self.play()
        self.scheduler.run_until_idle()

        self.assertEqual(self.sequencer.state, PlaybackState.COMPLETE)
        self.assertTrue(self.ui.visibility["label_label"])
        self.assertEqual(len(self.camera.flights), 3)

    def test_silent_camera_stalls(self):
        """Test that a camera that never settles stalls on that element."""
        camera = SilentCamera(self.scheduler)
        sequencer = AnimationSequencer(self.layers, self.ui, self.scheduler, camera=camera)
        self.ui.start_animation()
        sequencer.start_playback()
        self.scheduler.run_until_idle()

        self.assertEqual(sequencer.state, PlaybackState.REVEALING)
        self.assertTrue(self.ui.is_playing)
        self.assertEqual(len(camera.flights), 1)

    def test_restart_abandons_running_tour(self):
        """Test that starting again cancels the old run's timers and callbacks."""
        self.play()
        self.scheduler.advance(Second(4))
        self.assertEqual(len(self.camera.flights), 1)

        self.play()
        self.assertEqual(self.sequencer.state, PlaybackState.COUNTDOWN)
        self.assertEqual(self.ui.countdown, 3)
        self.scheduler.run_until_idle()

        self.assertEqual(self.sequencer.state, PlaybackState.COMPLETE)
        self.assertEqual(len(self.camera.flights), 4)
        self.assertEqual(self.ui.toasts, [Toast(MSG_ANIMATION_COMPLETE, Severity.SUCCESS)])

    def test_replay_after_complete(self):
        """Test that a finished tour can be played again."""
        self.play()
        self.scheduler.run_until_idle()
        self.play()
        self.scheduler.run_until_idle()
        self.assertEqual(len(self.camera.flights), 6)
        self.assertEqual(len(self.ui.toasts), 2)


class TestSmoothZoomOut(unittest.TestCase):
    """Test the single-flight playback mode."""

    def setUp(self):
        self.scheduler = ManualScheduler()
        self.camera = FakeCamera(self.scheduler)
        self.ui = UIState()
        self.start = ViewCapture(GeoPoint.from_deg(45, 7), 14.0)
        self.end = ViewCapture(GeoPoint.from_deg(44, 6), 8.0)
        self.layers = three_elements()

    def make(self, camera=None, **config):
        config = AnimationConfig(type=PlaybackType.SMOOTH_ZOOM_OUT, **config)
        return AnimationSequencer(self.layers, self.ui, self.scheduler, camera=camera, config=config)

    def test_zoom_out_run(self):
        """Test start view, end flight duration and completion time."""
        sequencer = self.make(self.camera, zoom_speed=5, start_view=self.start, end_view=self.end)
        self.ui.start_animation()
        sequencer.start_playback()

        self.assertEqual(self.camera.centers, [(self.start.center, 14.0)])
        self.assertEqual(self.ui.visibility, {})

        self.scheduler.run_until_idle()
        self.assertEqual(len(self.camera.flights), 1)
        target, zoom, duration, _ = self.camera.flights[0]
        self.assertIs(target, self.end.center)
        self.assertEqual(zoom, 8.0)
        self.assertEqual(duration, Second(7))
        self.assertAlmostEqual(float(self.scheduler.now), 3 + 7 + 0.5)
        self.assertEqual(sequencer.state, PlaybackState.COMPLETE)
        self.assertEqual(self.ui.toasts, [Toast(MSG_ANIMATION_COMPLETE, Severity.SUCCESS)])

    def test_zoom_speed_duration(self):
        """Test that speed 1 is 11 s and speed 10 is 2 s."""
        self.assertEqual(AnimationConfig(zoom_speed=1).zoom_out_duration(), Second(11))
        self.assertEqual(AnimationConfig(zoom_speed=10).zoom_out_duration(), Second(2))

    def test_missing_views(self):
        """Test that missing views stop playback with an error."""
        sequencer = self.make(self.camera, start_view=self.start)
        self.ui.start_animation()
        sequencer.start_playback()
        self.scheduler.run_until_idle()

        self.assertEqual(self.ui.toasts, [Toast(MSG_VIEWS_REQUIRED, Severity.ERROR)])
        self.assertFalse(self.ui.is_playing)
        self.assertEqual(sequencer.state, PlaybackState.IDLE)
        self.assertEqual(self.camera.flights, [])

    def test_no_camera_stops_silently(self):
        """Test that smooth zoom-out without a map stops without a toast."""
        sequencer = self.make(None, start_view=self.start, end_view=self.end)
        self.ui.start_animation()
        sequencer.start_playback()
        self.scheduler.run_until_idle()

        self.assertEqual(self.ui.toasts, [])
        self.assertFalse(self.ui.is_playing)
        self.assertEqual(sequencer.state, PlaybackState.IDLE)

    def test_stopped_during_flight(self):
        """Test that no completion is reported after a stop."""
        sequencer = self.make(self.camera, start_view=self.start, end_view=self.end)
        self.ui.start_animation()
        sequencer.start_playback()
        self.scheduler.advance(Second(5))
        self.ui.stop_animation()
        self.scheduler.run_until_idle()

        self.assertEqual(self.ui.toasts, [])
        self.assertEqual(sequencer.state, PlaybackState.IDLE)


class TestUIState(unittest.TestCase):
    """Test the in-memory UI state."""

    def test_visibility_defaults_to_visible(self):
        ui = UIState()
        self.assertTrue(ui.is_visible(ElementType.CIRCLE, "c1"))
        ui.set_visibility(ElementType.CIRCLE, "c1", False)
        self.assertFalse(ui.is_visible(ElementType.CIRCLE, "c1"))
        self.assertEqual(ui.visibility, {"circle_c1": False})

    def test_start_and_stop_animation(self):
        ui = UIState()
        ui.start_animation()
        self.assertTrue(ui.is_playing)
        self.assertEqual(ui.countdown, 3)
        ui.current_element_index = 2
        ui.stop_animation()
        self.assertFalse(ui.is_playing)
        self.assertEqual(ui.current_element_index, -1)
        self.assertEqual(ui.countdown, 0)


if __name__ == '__main__':
    unittest.main()
