# -*- coding: utf-8 -*-

import re
from dataclasses import dataclass
from typing import Optional

import config

_DIGITS = re.compile(r"^\d+$")


@dataclass(frozen=True)
class MinutesCheck:
    value: Optional[int]  # applied value, None if nothing should be applied
    corrected_text: Optional[str]  # replacement text for the entry, if any
    ok: bool


def is_numeric_keystroke(text: str) -> bool:
    # empty insert/delete is always allowed
    return text == "" or bool(_DIGITS.match(text))


def accept_paste(text: str) -> bool:
    if not text or not _DIGITS.match(text):
        return False
    return config.MIN_MINUTES <= int(text) <= config.MAX_MINUTES


def validate_minutes(text: str) -> MinutesCheck:
    """
    Check a minutes entry.
    - blank / non-numeric -> invalid, nothing applied
    - below range -> corrected to MIN_MINUTES (caller re-validates)
    - above range -> corrected to MAX_MINUTES (caller re-validates)
    - in range -> applied
    """
    text = (text or "").strip()
    if not text:
        return MinutesCheck(value=None, corrected_text=None, ok=False)

    try:
        value = int(text)
    except ValueError:
        return MinutesCheck(value=None, corrected_text=None, ok=False)

    if value < config.MIN_MINUTES:
        return MinutesCheck(value=None, corrected_text=str(config.MIN_MINUTES), ok=False)
    if value > config.MAX_MINUTES:
        return MinutesCheck(value=None, corrected_text=str(config.MAX_MINUTES), ok=False)

    return MinutesCheck(value=value, corrected_text=None, ok=True)


def restore_default(text: str, default: int) -> Optional[str]:
    """Returns the default as text when the entry was left blank."""
    if text is None or not text.strip():
        return str(default)
    return None
