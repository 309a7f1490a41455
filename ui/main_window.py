# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from tkinter import messagebox, ttk

import config
from core.timer_engine import TimerSnapshot
from services.celebration_service import CelebrationSnapshot
from services.timer_service import TimerService
from ui.celebration_overlay import CelebrationOverlay
from ui.pomodoro_widget import PomodoroWidget
from ui.settings_panel import SettingsPanel
from ui.tk_ticker import TkTicker

logger = logging.getLogger(__name__)


class MainWindow:
    def __init__(self):
        self.root = tk.Tk()
        self.root.title("Focus Timer")
        self.root.geometry("420x460")
        self.root.minsize(380, 420)
        self.root.configure(bg=config.BG)
        self.root.report_callback_exception = self._report_callback_exception

        self.timer_service = TimerService(
            timer_ticker=TkTicker(self.root),
            celebration_ticker=TkTicker(self.root),
            cue=self.root.bell,
        )

        self._init_styles()
        self._build_ui()

        # wire callbacks from service -> UI
        self.timer_service.set_on_change(self._on_change)
        self.timer_service.set_on_celebration(self._on_celebration)

    def _init_styles(self):
        style = ttk.Style(self.root)
        style.configure("TFrame", background=config.BG)
        style.configure("Card.TFrame", background=config.PANEL)
        style.configure(
            "Muted.TLabel", background=config.PANEL, foreground=config.MUTED
        )
        style.configure("Title.TLabel", background=config.BG, foreground=config.TEXT)

    def _build_ui(self):
        outer = ttk.Frame(self.root, padding=14)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(0, weight=1)

        ttk.Label(
            outer, text="Focus Timer", style="Title.TLabel", font=("Sans", 13, "bold")
        ).grid(row=0, column=0, sticky="w", pady=(0, 10))

        self.pomodoro = PomodoroWidget(outer, timer_service=self.timer_service)
        self.pomodoro.grid(row=1, column=0, sticky="ew")

        self.settings = SettingsPanel(outer, timer_service=self.timer_service)
        self.settings.grid(row=2, column=0, sticky="ew", pady=(12, 0))

        self.overlay = CelebrationOverlay(
            self.root, on_dismiss=self.timer_service.dismiss_celebration
        )

    def run(self):
        self.root.mainloop()

    # ----- Service callbacks -----
    def _on_change(self, name: str, snap: TimerSnapshot):
        self.pomodoro.on_change(name, snap)

    def _on_celebration(self, snap: CelebrationSnapshot):
        self.overlay.render(snap)

    def _report_callback_exception(self, exc, val, tb):
        logger.error("unhandled UI error", exc_info=(exc, val, tb))
        messagebox.showerror("Error", f"Unexpected error: {val}", parent=self.root)
