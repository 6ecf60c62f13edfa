"""Tests for the carousel's auto-advance timer on a manual clock."""

import pytest

from src.core.carousel_logic import ROTATION_INTERVAL_SECONDS, CarouselController
from src.core.content import Project
from tests.mocks.scheduler import FakeScheduler


class TestAutoAdvance:
    def test_default_interval_is_ten_seconds(self, controller):
        assert controller.interval == ROTATION_INTERVAL_SECONDS == 10.0

    def test_nothing_fires_before_first_interval(self, controller, fake_scheduler):
        controller.start()
        fake_scheduler.advance_time(9.999)
        assert controller.active_index == 0

    def test_one_advance_per_interval(self, controller, fake_scheduler):
        controller.start()
        indices = []
        for _ in range(4):
            fake_scheduler.advance_time(10.0)
            indices.append(controller.active_index)
        assert indices == [1, 2, 0, 1]

    def test_long_jump_fires_every_missed_tick(self, controller, fake_scheduler):
        advances: list[float] = []
        controller.subscribe(lambda t: advances.append(fake_scheduler.now))
        controller.start()

        fake_scheduler.advance_time(35.0)

        assert advances == [10.0, 20.0, 30.0]

    def test_no_advance_after_stop(self, controller, fake_scheduler):
        controller.start()
        fake_scheduler.advance_time(10.0)
        controller.stop()

        fake_scheduler.advance_time(1000.0)

        assert controller.active_index == 1
        assert fake_scheduler.active_timers == []

    def test_context_manager_stops_on_exit(self, controller, fake_scheduler):
        with controller:
            assert controller.is_running
            fake_scheduler.advance_time(10.0)
        fake_scheduler.advance_time(100.0)

        assert not controller.is_running
        assert controller.active_index == 1

    def test_context_manager_stops_on_error(self, controller, fake_scheduler):
        with pytest.raises(RuntimeError, match="boom"):
            with controller:
                raise RuntimeError("boom")

        fake_scheduler.advance_time(100.0)
        assert controller.active_index == 0
        assert fake_scheduler.active_timers == []

    def test_start_twice_keeps_one_timer(self, controller, fake_scheduler):
        controller.start()
        controller.start()

        fake_scheduler.advance_time(10.0)

        assert len(fake_scheduler.timers) == 1
        assert controller.active_index == 1

    def test_stop_when_not_running_is_noop(self, controller):
        controller.stop()
        assert not controller.is_running

    def test_start_without_scheduler_raises(self, projects):
        controller: CarouselController[Project] = CarouselController(projects)
        with pytest.raises(RuntimeError, match="no scheduler"):
            controller.start()

    def test_custom_interval(self, projects, fake_scheduler):
        controller: CarouselController[Project] = CarouselController(
            projects, scheduler=fake_scheduler, interval=2.5
        )
        controller.start()
        fake_scheduler.advance_time(5.0)
        assert controller.active_index == 2


class TestManualSelectionDoesNotResetTimer:
    def test_tick_overrides_selection_before_full_interval(
        self, controller, fake_scheduler
    ):
        controller.start()
        fake_scheduler.advance_time(9.0)
        controller.go_to(2)

        # Only one second later the original schedule fires
        fake_scheduler.advance_time(1.0)

        assert controller.active_index == 0

    def test_schedule_unchanged_by_selection(self, controller, fake_scheduler):
        ticks: list[float] = []
        controller.start()
        timer = fake_scheduler.timers[0]

        fake_scheduler.advance_time(4.0)
        controller.go_to(1)
        fake_scheduler.advance_time(16.0)
        ticks.append(timer.next_due)

        assert timer.fired == 2
        assert ticks == [30.0]
        assert len(fake_scheduler.timers) == 1


class TestFakeScheduler:
    def test_cancelled_timer_never_fires(self):
        scheduler = FakeScheduler()
        calls: list[float] = []
        timer = scheduler.call_every(1.0, lambda: calls.append(scheduler.now))
        timer.cancel()

        scheduler.advance_time(5.0)

        assert calls == []
        assert timer.cancelled

    def test_clock_lands_on_deadline(self):
        scheduler = FakeScheduler()
        scheduler.call_every(3.0, lambda: None)
        scheduler.advance_time(7.5)
        assert scheduler.now == 7.5
