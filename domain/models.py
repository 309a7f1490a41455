# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum

import config


class TimerState(Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"
    STOPPED = "stopped"


@dataclass
class TimerSettings:
    work_minutes: int = config.DEFAULT_WORK_MINUTES
    short_break_minutes: int = config.DEFAULT_SHORT_BREAK_MINUTES
    long_break_minutes: int = config.DEFAULT_LONG_BREAK_MINUTES
    sessions_per_long_break: int = config.DEFAULT_SESSIONS_PER_LONG_BREAK


@dataclass(frozen=True)
class CompletionEvent:
    completed_state: TimerState
    next_state: TimerState
    completed_work_sessions: int
