# -*- coding: utf-8 -*-

import logging
import os
from typing import Optional

# Default durations (minutes). Never persisted: every start uses these.
DEFAULT_WORK_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_SESSIONS_PER_LONG_BREAK = 4

# Accepted range for the minute text boxes
MIN_MINUTES = 1
MAX_MINUTES = 120

TICK_INTERVAL_MS = 1000
CELEBRATION_SECONDS = 15

# State label / color, keyed by TimerState value
STATE_LABELS = {
    "work": "Focus Time",
    "short_break": "Short Break",
    "long_break": "Long Break",
    "stopped": "Ready to Focus",
}

STATE_COLORS = {
    "work": "#E53E3E",
    "short_break": "#38B2AC",
    "long_break": "#38B2AC",
    "stopped": "#718096",
}

# UI palette
BG = "#F7FAFC"
PANEL = "#FFFFFF"
BORDER = "#E2E8F0"
TEXT = "#1A202C"
MUTED = "#718096"
INVALID_BG = "#FEF2F2"
OVERLAY_BG = "#1A202C"

LOG_LEVEL = os.environ.get("FOCUS_TIMER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
