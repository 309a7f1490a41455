"""Tests for the minutes entry binding, on a Tcl interpreter (no display)."""

import pytest

tk = pytest.importorskip("tkinter")

from ui.settings_panel import MinutesField  # noqa: E402


@pytest.fixture
def tcl():
    try:
        interp = tk.Tcl()
    except tk.TclError as e:
        pytest.skip(f"Tcl unavailable: {e}")
    yield interp


def bind(tcl, service, field):
    var = tk.StringVar(master=tcl, value=str(service.get_minutes(field)))
    states = []
    field_binding = MinutesField(var, field, service, on_valid=states.append)
    return var, states, field_binding


class TestMinutesField:
    def test_in_range_applied(self, tcl, service):
        var, states, _ = bind(tcl, service, "work")
        var.set("50")
        assert service.timer.work_minutes == 50
        assert states == [True]

    def test_too_large_clamped_and_applied(self, tcl, service):
        var, states, _ = bind(tcl, service, "work")
        var.set("50")
        var.set("500")
        assert var.get() == "120"
        assert service.timer.work_minutes == 120
        assert states[-1] is True

    def test_zero_clamped_to_one_and_applied(self, tcl, service):
        var, states, _ = bind(tcl, service, "short_break")
        var.set("0")
        assert var.get() == "1"
        assert service.timer.short_break_minutes == 1
        assert states == [True]

    def test_blank_marked_invalid_and_not_applied(self, tcl, service):
        var, states, _ = bind(tcl, service, "long_break")
        var.set("")
        assert service.timer.long_break_minutes == 15
        assert states == [False]

    def test_restore_default_reapplies(self, tcl, service):
        var, states, field = bind(tcl, service, "work")
        var.set("30")
        var.set("")
        field.restore_default()
        assert var.get() == "25"
        assert service.timer.work_minutes == 25
