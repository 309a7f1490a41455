"""
Shared pytest fixtures.

FakeTicker stands in for the Tk after() loop: it records start/stop and
lets a test fire the registered callback by hand.
"""

import os
import sys
from typing import Callable, List, Optional

import pytest

# Repository root on the path for the flat layout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.timer_engine import SessionTimer, Ticker  # noqa: E402
from domain.models import TimerSettings  # noqa: E402
from services.timer_service import TimerService  # noqa: E402


class FakeTicker(Ticker):
    def __init__(self):
        self.callback: Optional[Callable[[], object]] = None
        self.calls: List[str] = []

    @property
    def running(self) -> bool:
        return self.callback is not None

    def start(self, callback):
        self.calls.append("start")
        self.callback = callback

    def stop(self):
        self.calls.append("stop")
        self.callback = None

    def fire(self, times: int = 1) -> int:
        """Fire while running; returns how many times the callback ran."""
        fired = 0
        for _ in range(times):
            if self.callback is None:
                break
            self.callback()
            fired += 1
        return fired


@pytest.fixture
def ticker():
    return FakeTicker()


@pytest.fixture
def timer(ticker):
    return SessionTimer(settings=TimerSettings(), ticker=ticker)


@pytest.fixture
def short_timer(ticker):
    """1-minute phases, long break every 4th work session."""
    return SessionTimer(
        settings=TimerSettings(
            work_minutes=1,
            short_break_minutes=1,
            long_break_minutes=2,
            sessions_per_long_break=4,
        ),
        ticker=ticker,
    )


@pytest.fixture
def celebration_ticker():
    return FakeTicker()


@pytest.fixture
def service(ticker, celebration_ticker):
    return TimerService(timer_ticker=ticker, celebration_ticker=celebration_ticker)
