# -*- coding: utf-8 -*-

import logging
from typing import Callable, Dict, Optional, Tuple

import config
from core.timer_engine import SessionTimer, Ticker, TimerSnapshot
from domain.models import CompletionEvent, TimerSettings
from domain.validation import MinutesCheck, restore_default, validate_minutes
from services.celebration_service import CelebrationService, CelebrationSnapshot

logger = logging.getLogger(__name__)

# field -> (timer attribute, default minutes)
DURATION_FIELDS: Dict[str, Tuple[str, int]] = {
    "work": ("work_minutes", config.DEFAULT_WORK_MINUTES),
    "short_break": ("short_break_minutes", config.DEFAULT_SHORT_BREAK_MINUTES),
    "long_break": ("long_break_minutes", config.DEFAULT_LONG_BREAK_MINUTES),
}


class TimerService:
    """
    Orchestrates:
    - SessionTimer state
    - Celebration countdown + auto-start after each completion
    - Minute entry validation
    - Callbacks for UI
    """

    def __init__(
        self,
        timer_ticker: Optional[Ticker] = None,
        celebration_ticker: Optional[Ticker] = None,
        cue: Optional[Callable[[], None]] = None,
        settings: Optional[TimerSettings] = None,
    ):
        self.timer = SessionTimer(settings=settings, ticker=timer_ticker, cue=cue)
        self.celebration = CelebrationService(self.timer, ticker=celebration_ticker)

        self._on_change: Optional[Callable[[str, TimerSnapshot], None]] = None
        self._on_completed: Optional[Callable[[CompletionEvent], None]] = None
        self._on_celebration: Optional[Callable[[CelebrationSnapshot], None]] = None

        self.timer.subscribe(self._emit_change)
        self.timer.on_completed(self._handle_completed)
        self.celebration.set_on_update(self._emit_celebration)

    # ----- Callbacks -----
    def set_on_change(self, fn: Callable[[str, TimerSnapshot], None]) -> None:
        self._on_change = fn

    def set_on_completed(self, fn: Callable[[CompletionEvent], None]) -> None:
        self._on_completed = fn

    def set_on_celebration(self, fn: Callable[[CelebrationSnapshot], None]) -> None:
        self._on_celebration = fn

    def _emit_change(self, name: str, snap: TimerSnapshot) -> None:
        if self._on_change:
            self._on_change(name, snap)

    def _emit_celebration(self, snap: CelebrationSnapshot) -> None:
        if self._on_celebration:
            self._on_celebration(snap)

    def _handle_completed(self, event: CompletionEvent) -> None:
        if self._on_completed:
            self._on_completed(event)
        self.celebration.show(event)

    # ----- Public API -----
    def get_snapshot(self) -> TimerSnapshot:
        return self.timer.snapshot()

    def start_pause(self) -> None:
        self.celebration.cancel()
        self.timer.start_pause()

    def start(self) -> None:
        self.celebration.cancel()
        self.timer.start()

    def pause(self) -> None:
        self.timer.pause()

    def stop(self) -> None:
        # no auto-start after an explicit stop
        self.celebration.cancel()
        self.timer.stop()

    def skip(self) -> None:
        self.celebration.cancel()
        self.timer.skip()

    def dismiss_celebration(self) -> None:
        self.celebration.dismiss()

    # ----- Settings -----
    def get_minutes(self, field: str) -> int:
        attr, _ = DURATION_FIELDS[field]
        return getattr(self.timer, attr)

    def apply_minutes(self, field: str, text: str) -> MinutesCheck:
        """
        Validate entry text and apply it to the timer when in range.
        The caller writes back corrected_text (which re-validates).
        """
        attr, _ = DURATION_FIELDS[field]
        check = validate_minutes(text)
        if check.ok and check.value != getattr(self.timer, attr):
            setattr(self.timer, attr, check.value)
            logger.debug("%s set to %d", attr, check.value)
        return check

    def restore_default(self, field: str, text: str) -> Optional[str]:
        _, default = DURATION_FIELDS[field]
        return restore_default(text, default)
