"""Tests for the UI-facing TimerService."""

from unittest.mock import MagicMock

import pytest

import config
from domain.models import TimerState


class TestCommands:
    def test_start_pause_roundtrip(self, service, ticker):
        service.start_pause()
        assert service.get_snapshot().is_running is True
        assert ticker.running
        service.start_pause()
        assert service.get_snapshot().is_running is False
        assert not ticker.running

    def test_completion_shows_celebration(self, service):
        completed = MagicMock()
        celebrated = MagicMock()
        service.set_on_completed(completed)
        service.set_on_celebration(celebrated)

        service.start()
        service.skip()

        event = completed.call_args.args[0]
        assert event.completed_state == TimerState.WORK
        assert event.next_state == TimerState.SHORT_BREAK
        assert service.celebration.active is True
        assert celebrated.call_args.args[0].message == "Work Session Complete!"

    def test_celebration_countdown_auto_starts(self, service, celebration_ticker):
        service.start()
        service.skip()
        celebration_ticker.fire(config.CELEBRATION_SECONDS)
        snap = service.get_snapshot()
        assert snap.state == TimerState.SHORT_BREAK
        assert snap.is_running is True

    def test_stop_cancels_celebration_without_auto_start(self, service, celebration_ticker):
        service.start()
        service.skip()
        service.stop()
        assert service.celebration.active is False
        assert not celebration_ticker.running
        snap = service.get_snapshot()
        assert snap.state == TimerState.STOPPED
        assert snap.is_running is False

    def test_start_pause_during_celebration_starts_once(self, service):
        service.start()
        service.skip()
        service.start_pause()
        assert service.celebration.active is False
        assert service.get_snapshot().is_running is True

    def test_dismiss_celebration(self, service):
        service.start()
        service.skip()
        service.dismiss_celebration()
        assert service.get_snapshot().is_running is True

    def test_on_change_forwarded(self, service):
        cb = MagicMock()
        service.set_on_change(cb)
        service.start()
        names = [c.args[0] for c in cb.call_args_list]
        assert "is_running" in names


class TestSettings:
    @pytest.mark.parametrize(
        "field, attr",
        [
            ("work", "work_minutes"),
            ("short_break", "short_break_minutes"),
            ("long_break", "long_break_minutes"),
        ],
    )
    def test_apply_valid_minutes(self, service, field, attr):
        check = service.apply_minutes(field, "42")
        assert check.ok is True
        assert getattr(service.timer, attr) == 42
        assert service.get_minutes(field) == 42

    def test_out_of_range_is_corrected_not_applied(self, service):
        check = service.apply_minutes("work", "500")
        assert check.corrected_text == "120"
        assert service.timer.work_minutes == 25

        check = service.apply_minutes("work", check.corrected_text)
        assert check.ok is True
        assert service.timer.work_minutes == 120

    def test_zero_corrected_to_one(self, service):
        check = service.apply_minutes("short_break", "0")
        assert check.corrected_text == "1"
        assert service.timer.short_break_minutes == 5

    @pytest.mark.parametrize("text", ["", "   ", "abc"])
    def test_invalid_text_leaves_value(self, service, text):
        check = service.apply_minutes("long_break", text)
        assert check.ok is False
        assert check.corrected_text is None
        assert service.timer.long_break_minutes == 15

    def test_restore_default(self, service):
        assert service.restore_default("work", "") == "25"
        assert service.restore_default("short_break", " ") == "5"
        assert service.restore_default("long_break", "") == "15"
        assert service.restore_default("work", "30") is None

    def test_work_change_while_stopped_updates_display(self, service):
        service.apply_minutes("work", "45")
        assert service.get_snapshot().display_time == "45:00"
