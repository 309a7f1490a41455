"""Tests for minute entry validation."""

import pytest

from domain.validation import (
    MinutesCheck,
    accept_paste,
    is_numeric_keystroke,
    restore_default,
    validate_minutes,
)


class TestKeystrokes:
    @pytest.mark.parametrize("text", ["", "0", "7", "123"])
    def test_digits_allowed(self, text):
        assert is_numeric_keystroke(text) is True

    @pytest.mark.parametrize("text", ["a", "-", " ", "1.5", "+"])
    def test_non_digits_rejected(self, text):
        assert is_numeric_keystroke(text) is False


class TestPaste:
    @pytest.mark.parametrize("text", ["1", "60", "120"])
    def test_in_range(self, text):
        assert accept_paste(text) is True

    @pytest.mark.parametrize("text", ["", "0", "121", "12a", "-5", " 30"])
    def test_rejected(self, text):
        assert accept_paste(text) is False


class TestValidateMinutes:
    def test_in_range_applied(self):
        assert validate_minutes("25") == MinutesCheck(value=25, corrected_text=None, ok=True)

    @pytest.mark.parametrize("text", ["1", "120"])
    def test_bounds_inclusive(self, text):
        assert validate_minutes(text).value == int(text)

    @pytest.mark.parametrize("text, corrected", [("0", "1"), ("-4", "1"), ("121", "120"), ("9999", "120")])
    def test_out_of_range_corrected(self, text, corrected):
        check = validate_minutes(text)
        assert check.ok is False
        assert check.value is None
        assert check.corrected_text == corrected

    @pytest.mark.parametrize("text", ["", "  ", "abc", "1.5"])
    def test_invalid(self, text):
        assert validate_minutes(text) == MinutesCheck(value=None, corrected_text=None, ok=False)


class TestRestoreDefault:
    def test_blank_restores(self):
        assert restore_default("", 25) == "25"
        assert restore_default("  ", 5) == "5"

    def test_filled_kept(self):
        assert restore_default("30", 25) is None
