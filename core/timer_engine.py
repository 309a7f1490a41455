# -*- coding: utf-8 -*-

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, List, Optional

import config
from domain.models import CompletionEvent, TimerSettings, TimerState

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[str, "TimerSnapshot"], None]
CompletedCallback = Callable[[CompletionEvent], None]


def format_time(seconds: int) -> str:
    m = max(0, seconds) // 60
    s = max(0, seconds) % 60
    return f"{m:02d}:{s:02d}"


@dataclass
class TimerSnapshot:
    state: TimerState
    remaining_sec: int
    is_running: bool
    completed_work_sessions: int
    display_time: str
    progress_percentage: float
    state_label: str
    state_color: str
    start_pause_label: str


class Ticker:
    """
    Repeating one-second callback.
    This base never fires on its own: headless callers drive tick() directly.
    """

    def start(self, callback: Callable[[], object]) -> None:
        pass

    def stop(self) -> None:
        pass


class SessionTimer:
    """
    Pomodoro countdown (no Tkinter).
    Cycles Work -> ShortBreak/LongBreak -> Work; a Ticker calls tick() each second.
    Observers get property-change and completion callbacks.
    """

    def __init__(
        self,
        settings: Optional[TimerSettings] = None,
        ticker: Optional[Ticker] = None,
        cue: Optional[Callable[[], None]] = None,
    ):
        settings = settings or TimerSettings()
        self._work_minutes = _check_positive("work_minutes", settings.work_minutes)
        self._short_break_minutes = _check_positive(
            "short_break_minutes", settings.short_break_minutes
        )
        self._long_break_minutes = _check_positive(
            "long_break_minutes", settings.long_break_minutes
        )
        self._sessions_per_long_break = _check_positive(
            "sessions_per_long_break", settings.sessions_per_long_break
        )

        self._ticker = ticker or Ticker()
        self._cue = cue

        self._state = TimerState.STOPPED
        self._remaining_sec = self._work_minutes * 60
        self._is_running = False
        self._completed_work_sessions = 0

        self._change_callbacks: List[ChangeCallback] = []
        self._completed_callbacks: List[CompletedCallback] = []

    # ----- Observers -----
    def subscribe(self, fn: ChangeCallback) -> Callable[[], None]:
        self._change_callbacks.append(fn)
        return lambda: _discard(self._change_callbacks, fn)

    def on_completed(self, fn: CompletedCallback) -> Callable[[], None]:
        self._completed_callbacks.append(fn)
        return lambda: _discard(self._completed_callbacks, fn)

    def _notify(self, *names: str) -> None:
        if not self._change_callbacks:
            return
        snap = self.snapshot()
        for name in names:
            for fn in list(self._change_callbacks):
                fn(name, snap)

    # ----- Observable state -----
    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def remaining_sec(self) -> int:
        return self._remaining_sec

    @property
    def remaining(self) -> timedelta:
        return timedelta(seconds=self._remaining_sec)

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def completed_work_sessions(self) -> int:
        return self._completed_work_sessions

    def _set_state(self, state: TimerState) -> None:
        if state == self._state:
            return
        self._state = state
        self._notify("state", "state_label", "state_color", "progress_percentage")

    def _set_remaining(self, seconds: int) -> None:
        if seconds == self._remaining_sec:
            return
        self._remaining_sec = seconds
        self._notify("remaining", "display_time", "progress_percentage")

    def _set_running(self, running: bool) -> None:
        if running == self._is_running:
            return
        self._is_running = running
        self._notify("is_running", "start_pause_label")

    # ----- Configuration -----
    @property
    def work_minutes(self) -> int:
        return self._work_minutes

    @work_minutes.setter
    def work_minutes(self, value: int) -> None:
        value = _check_positive("work_minutes", value)
        if value == self._work_minutes:
            return
        self._work_minutes = value
        self._notify("work_minutes")
        if self._state == TimerState.STOPPED:
            self._set_remaining(self._work_minutes * 60)
        elif self._state == TimerState.WORK:
            self._notify("progress_percentage")

    @property
    def short_break_minutes(self) -> int:
        return self._short_break_minutes

    @short_break_minutes.setter
    def short_break_minutes(self, value: int) -> None:
        value = _check_positive("short_break_minutes", value)
        if value == self._short_break_minutes:
            return
        self._short_break_minutes = value
        self._notify("short_break_minutes")
        if self._state == TimerState.SHORT_BREAK:
            self._notify("progress_percentage")

    @property
    def long_break_minutes(self) -> int:
        return self._long_break_minutes

    @long_break_minutes.setter
    def long_break_minutes(self, value: int) -> None:
        value = _check_positive("long_break_minutes", value)
        if value == self._long_break_minutes:
            return
        self._long_break_minutes = value
        self._notify("long_break_minutes")
        if self._state == TimerState.LONG_BREAK:
            self._notify("progress_percentage")

    @property
    def sessions_per_long_break(self) -> int:
        return self._sessions_per_long_break

    @sessions_per_long_break.setter
    def sessions_per_long_break(self, value: int) -> None:
        value = _check_positive("sessions_per_long_break", value)
        if value == self._sessions_per_long_break:
            return
        self._sessions_per_long_break = value
        self._notify("sessions_per_long_break")

    def duration_sec(self, state: Optional[TimerState] = None) -> int:
        state = self._state if state is None else state
        if state == TimerState.SHORT_BREAK:
            return self._short_break_minutes * 60
        if state == TimerState.LONG_BREAK:
            return self._long_break_minutes * 60
        return self._work_minutes * 60

    # ----- Derived values -----
    @property
    def display_time(self) -> str:
        return format_time(self._remaining_sec)

    @property
    def progress_percentage(self) -> float:
        total = self.duration_sec()
        if total == 0:
            return 0.0
        pct = (total - self._remaining_sec) / total * 100
        # remaining is kept when the active duration shrinks or grows mid-phase
        return min(100.0, max(0.0, pct))

    @property
    def state_label(self) -> str:
        return config.STATE_LABELS[self._state.value]

    @property
    def state_color(self) -> str:
        return config.STATE_COLORS[self._state.value]

    @property
    def start_pause_label(self) -> str:
        return "Pause" if self._is_running else "Start"

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            state=self._state,
            remaining_sec=self._remaining_sec,
            is_running=self._is_running,
            completed_work_sessions=self._completed_work_sessions,
            display_time=self.display_time,
            progress_percentage=self.progress_percentage,
            state_label=self.state_label,
            state_color=self.state_color,
            start_pause_label=self.start_pause_label,
        )

    # ----- Commands -----
    def start_pause(self) -> None:
        if self._is_running:
            self.pause()
        else:
            self.start()

    def start(self) -> None:
        if self._state == TimerState.STOPPED:
            self._enter(TimerState.WORK)
        logger.info("start %s at %s", self._state.value, self.display_time)
        self._set_running(True)
        self._ticker.start(self.tick)

    def pause(self) -> None:
        self._ticker.stop()
        if self._is_running:
            logger.info("pause %s at %s", self._state.value, self.display_time)
        self._set_running(False)

    def stop(self) -> None:
        self._ticker.stop()
        self._set_running(False)
        self._set_state(TimerState.STOPPED)
        self._set_remaining(self._work_minutes * 60)
        logger.info("stop")

    def skip(self) -> None:
        if self._state == TimerState.STOPPED:
            # nothing to complete before the first start
            return
        logger.info("skip %s at %s", self._state.value, self.display_time)
        self._complete()

    def tick(self) -> bool:
        """
        Advance one second. Returns True if the phase completed on this tick.
        """
        if not self._is_running or self._state == TimerState.STOPPED:
            return False

        if self._remaining_sec > 0:
            self._set_remaining(self._remaining_sec - 1)

        if self._remaining_sec == 0:
            self._complete()
            return True

        return False

    # ----- Completion -----
    def _complete(self) -> None:
        self._ticker.stop()
        self._set_running(False)

        completed = self._state
        self._play_cue()

        if completed == TimerState.WORK:
            self._completed_work_sessions += 1
            self._notify("completed_work_sessions")
            if self._completed_work_sessions % self._sessions_per_long_break == 0:
                self._enter(TimerState.LONG_BREAK)
            else:
                self._enter(TimerState.SHORT_BREAK)
        else:
            self._enter(TimerState.WORK)

        event = CompletionEvent(
            completed_state=completed,
            next_state=self._state,
            completed_work_sessions=self._completed_work_sessions,
        )
        logger.info(
            "completed %s -> %s (%d work sessions)",
            completed.value,
            self._state.value,
            self._completed_work_sessions,
        )
        for fn in list(self._completed_callbacks):
            fn(event)

    def _enter(self, state: TimerState) -> None:
        self._set_state(state)
        self._set_remaining(self.duration_sec(state))

    def _play_cue(self) -> None:
        if self._cue is None:
            return
        try:
            self._cue()
        except Exception:
            logger.debug("completion cue failed", exc_info=True)


def _check_positive(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _discard(callbacks: list, fn) -> None:
    if fn in callbacks:
        callbacks.remove(fn)
