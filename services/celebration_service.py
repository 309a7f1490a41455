# -*- coding: utf-8 -*-

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import config
from core.timer_engine import SessionTimer, Ticker
from domain.models import CompletionEvent, TimerState

logger = logging.getLogger(__name__)

_MESSAGES = {
    TimerState.WORK: (
        "Work Session Complete!",
        "Great focus! Time for a well-deserved break.",
    ),
    TimerState.SHORT_BREAK: (
        "Break Complete!",
        "Feeling refreshed? Let's get back to work!",
    ),
    TimerState.LONG_BREAK: (
        "Long Break Complete!",
        "Recharged and ready to conquer more!",
    ),
}


def celebration_message(completed_state: TimerState) -> Tuple[str, str]:
    return _MESSAGES.get(
        completed_state, ("Timer Complete!", "Ready for the next session?")
    )


@dataclass
class CelebrationSnapshot:
    active: bool
    countdown: int
    message: str
    sub_message: str
    completed_state: Optional[TimerState]
    next_state: Optional[TimerState]


class CelebrationService:
    """
    Shown after each completion. Counts down, then auto-starts the next phase.
    Dismissing early also auto-starts; cancel() hides without starting.
    """

    def __init__(
        self,
        timer: SessionTimer,
        ticker: Optional[Ticker] = None,
        seconds: int = config.CELEBRATION_SECONDS,
    ):
        self.timer = timer
        self.seconds = int(seconds)
        self._ticker = ticker or Ticker()

        self.active = False
        self.countdown = 0
        self.message = ""
        self.sub_message = ""
        self._event: Optional[CompletionEvent] = None

        self._on_update: Optional[Callable[[CelebrationSnapshot], None]] = None

    def set_on_update(self, fn: Callable[[CelebrationSnapshot], None]) -> None:
        self._on_update = fn

    def _emit(self) -> None:
        if self._on_update:
            self._on_update(self.snapshot())

    def snapshot(self) -> CelebrationSnapshot:
        return CelebrationSnapshot(
            active=self.active,
            countdown=self.countdown,
            message=self.message,
            sub_message=self.sub_message,
            completed_state=self._event.completed_state if self._event else None,
            next_state=self._event.next_state if self._event else None,
        )

    def show(self, event: CompletionEvent) -> None:
        self._ticker.stop()
        self._event = event
        self.message, self.sub_message = celebration_message(event.completed_state)
        self.countdown = self.seconds
        self.active = True
        self._emit()
        self._ticker.start(self.tick)

    def tick(self) -> None:
        if not self.active:
            return
        self.countdown -= 1
        if self.countdown > 0:
            self._emit()
        else:
            self.dismiss()

    def dismiss(self) -> None:
        """Hide and start the next phase."""
        if not self._hide():
            return
        logger.info("celebration over, starting %s", self.timer.state.value)
        self.timer.start()

    def cancel(self) -> None:
        """Hide without starting anything."""
        self._hide()

    def _hide(self) -> bool:
        if not self.active:
            return False
        self._ticker.stop()
        self.active = False
        self.countdown = 0
        self._emit()
        return True
