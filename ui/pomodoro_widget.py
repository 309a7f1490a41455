# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk

import config
from core.timer_engine import TimerSnapshot
from domain.models import TimerState
from services.timer_service import TimerService


class PomodoroWidget(ttk.Frame):
    def __init__(self, master, timer_service: TimerService):
        super().__init__(master, style="Card.TFrame", padding=16)

        self.timer_service = timer_service

        self._build_ui()

        # initial render
        self._render(self.timer_service.get_snapshot())

    def _build_ui(self):
        self.columnconfigure(0, weight=1)

        self.phase_var = tk.StringVar(value=config.STATE_LABELS["stopped"])
        self.time_var = tk.StringVar(value="25:00")
        self.info_var = tk.StringVar(value="Click Start to begin")
        self.count_var = tk.StringVar(value="Sessions completed: 0")
        self.progress_var = tk.DoubleVar(value=0.0)

        self.phase_label = tk.Label(
            self,
            textvariable=self.phase_var,
            font=("Sans", 11, "bold"),
            bg=config.PANEL,
            fg=config.STATE_COLORS["stopped"],
        )
        self.phase_label.grid(row=0, column=0)

        self.time_label = tk.Label(
            self,
            textvariable=self.time_var,
            font=("Sans", 48, "bold"),
            bg=config.PANEL,
            fg=config.TEXT,
        )
        self.time_label.grid(row=1, column=0, pady=(4, 4))

        self.progress = ttk.Progressbar(
            self, variable=self.progress_var, maximum=100.0, mode="determinate"
        )
        self.progress.grid(row=2, column=0, sticky="ew", pady=(0, 8))

        self.info_label = ttk.Label(self, textvariable=self.info_var, style="Muted.TLabel")
        self.info_label.grid(row=3, column=0, pady=(0, 10))

        btns = ttk.Frame(self, style="Card.TFrame")
        btns.grid(row=4, column=0)

        self.start_pause_btn = ttk.Button(
            btns, text="Start", width=10, command=self.timer_service.start_pause
        )
        self.stop_btn = ttk.Button(btns, text="Stop", command=self.timer_service.stop)
        self.skip_btn = ttk.Button(btns, text="Skip", command=self.timer_service.skip)

        self.start_pause_btn.grid(row=0, column=0, padx=(0, 6))
        self.stop_btn.grid(row=0, column=1, padx=(0, 6))
        self.skip_btn.grid(row=0, column=2)

        ttk.Label(self, textvariable=self.count_var, style="Muted.TLabel").grid(
            row=5, column=0, pady=(10, 0)
        )

    def _update_buttons(self, snap: TimerSnapshot):
        self.start_pause_btn.configure(text=snap.start_pause_label)

        if snap.state == TimerState.STOPPED:
            self.stop_btn.state(["disabled"])
            self.skip_btn.state(["disabled"])
        else:
            self.stop_btn.state(["!disabled"])
            self.skip_btn.state(["!disabled"])

    # ---- Service callbacks ----
    def on_change(self, name: str, snap: TimerSnapshot):
        self._render(snap)

    def _render(self, snap: TimerSnapshot):
        self.time_var.set(snap.display_time)
        self.phase_var.set(snap.state_label)
        self.phase_label.configure(fg=snap.state_color)
        self.progress_var.set(snap.progress_percentage)
        self.count_var.set(f"Sessions completed: {snap.completed_work_sessions}")

        if snap.state == TimerState.STOPPED:
            self.info_var.set("Click Start to begin")
        elif snap.is_running:
            self.info_var.set("Timer running...")
        else:
            self.info_var.set("Paused")

        self._update_buttons(snap)
