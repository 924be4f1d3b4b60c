"""
Tests for PatternController (pattern lifecycle + frame loop).

Timer ticks are driven by calling _tick() directly.
"""

import pytest

from src.pattern.pattern_controller import PatternController
from src.pattern.reveal import RevealPhase


@pytest.fixture
def controller(qt_app):
    ctrl = PatternController(seed=3)
    yield ctrl
    ctrl.stop()


class TestLifecycle:

    def test_no_pattern_before_size(self, controller):
        assert controller.pattern is None
        assert controller.current_frame() is None

    def test_regenerate_creates_pattern(self, controller):
        received = []
        controller.pattern_changed.connect(received.append)
        pattern = controller.regenerate(800, 600)
        assert pattern is controller.pattern
        assert received == [pattern]
        assert controller.is_running
        assert controller.animator.phase is RevealPhase.ANIMATING

    def test_regenerate_replaces_and_resets(self, controller):
        first = controller.regenerate(800, 600)
        for _ in range(10):
            controller._tick()
        second = controller.regenerate()
        assert second is not first
        assert second.width == 800.0
        assert controller.animator.progress == 0.0

    def test_empty_canvas_keeps_pattern(self, controller):
        first = controller.regenerate(400, 300)
        assert controller.regenerate(0, 300) is first

    def test_empty_canvas_without_pattern(self, controller):
        assert controller.regenerate(0, 0) is None
        assert not controller.is_running


class TestResize:

    def test_resize_regenerates(self, controller):
        first = controller.regenerate(400, 300)
        second = controller.resize(640, 480)
        assert second is not first
        assert (second.width, second.height) == (640.0, 480.0)

    def test_same_size_is_noop(self, controller):
        first = controller.resize(400, 300)
        assert controller.resize(400, 300) is first


class TestFrameLoop:

    def test_ticks_until_settled(self, controller):
        progress = []
        settled = []
        controller.frame_advanced.connect(progress.append)
        controller.settled.connect(lambda: settled.append(True))
        controller.regenerate(300, 300)

        for _ in range(50):
            controller._tick()

        assert len(progress) == 50
        assert progress[-1] == 1.0
        assert settled == [True]
        assert not controller.is_running

    def test_fills_only_after_settling(self, controller):
        controller.regenerate(300, 300)
        for _ in range(49):
            controller._tick()
        assert controller.current_frame().fills == []
        controller._tick()
        plan = controller.current_frame()
        assert len(plan.fills) == 4 * int(controller.pattern.fill_mask.sum())

    def test_tick_without_pattern_stops(self, controller):
        controller._tick()
        assert not controller.is_running
