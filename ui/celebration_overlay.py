# -*- coding: utf-8 -*-

import tkinter as tk
from typing import Callable

import config
from domain.models import TimerState
from services.celebration_service import CelebrationSnapshot

# glow color of the card border, by completed phase
_WORK_ACCENT = "#F97316"
_BREAK_ACCENT = "#10B981"


class CelebrationOverlay(tk.Frame):
    """Covers the window after a completion. Click anywhere to continue."""

    def __init__(self, master, on_dismiss: Callable[[], None]):
        super().__init__(master, bg=config.OVERLAY_BG)
        self.on_dismiss = on_dismiss
        self._visible = False

        self.card = tk.Frame(
            self, bg=config.PANEL, highlightthickness=3, highlightbackground=_WORK_ACCENT
        )
        self.card.place(relx=0.5, rely=0.5, anchor="center")

        self.message_var = tk.StringVar(value="")
        self.sub_var = tk.StringVar(value="")
        self.countdown_var = tk.StringVar(value="")

        tk.Label(
            self.card,
            textvariable=self.message_var,
            font=("Sans", 16, "bold"),
            bg=config.PANEL,
            fg=config.TEXT,
        ).pack(padx=24, pady=(20, 4))
        tk.Label(
            self.card,
            textvariable=self.sub_var,
            font=("Sans", 10),
            bg=config.PANEL,
            fg=config.MUTED,
            wraplength=280,
        ).pack(padx=24)
        tk.Label(
            self.card,
            textvariable=self.countdown_var,
            font=("Sans", 28, "bold"),
            bg=config.PANEL,
            fg=config.TEXT,
        ).pack(pady=(10, 0))
        tk.Label(
            self.card,
            text="Next session starts automatically. Click to start now.",
            font=("Sans", 9),
            bg=config.PANEL,
            fg=config.MUTED,
        ).pack(padx=24, pady=(4, 20))

        for w in (self, self.card, *self.card.winfo_children()):
            w.bind("<Button-1>", lambda e: self.on_dismiss())

    def render(self, snap: CelebrationSnapshot):
        if not snap.active:
            self._hide()
            return

        self.message_var.set(snap.message)
        self.sub_var.set(snap.sub_message)
        self.countdown_var.set(str(snap.countdown))
        accent = _WORK_ACCENT if snap.completed_state == TimerState.WORK else _BREAK_ACCENT
        self.card.configure(highlightbackground=accent)
        self._show()

    def _show(self):
        if self._visible:
            return
        self._visible = True
        self.place(relx=0, rely=0, relwidth=1, relheight=1)
        self.lift()

        top = self.winfo_toplevel()
        try:
            # bring window back if minimized
            if top.state() == "iconic":
                top.deiconify()
            top.lift()
            top.focus_force()
        except Exception:
            pass

    def _hide(self):
        if not self._visible:
            return
        self._visible = False
        self.place_forget()
