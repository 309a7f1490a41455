# -*- coding: utf-8 -*-

from typing import Callable, Optional

import config
from core.timer_engine import Ticker


class TkTicker(Ticker):
    """Repeating callback on the Tk event loop (widget.after)."""

    def __init__(self, widget, interval_ms: int = config.TICK_INTERVAL_MS):
        self.widget = widget
        self.interval_ms = int(interval_ms)
        self._callback: Optional[Callable[[], object]] = None
        self._job = None

    def start(self, callback: Callable[[], object]) -> None:
        self._callback = callback
        if self._job is None:
            self._job = self.widget.after(self.interval_ms, self._fire)

    def stop(self) -> None:
        self._callback = None
        if self._job is not None:
            try:
                self.widget.after_cancel(self._job)
            except Exception:
                pass
            self._job = None

    def _fire(self) -> None:
        self._job = None
        callback = self._callback
        if callback is None:
            return
        # schedule first: the callback may stop() us
        self._job = self.widget.after(self.interval_ms, self._fire)
        callback()
