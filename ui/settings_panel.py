# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict

import config
from domain.validation import accept_paste, is_numeric_keystroke
from services.timer_service import DURATION_FIELDS, TimerService

_LABELS = {
    "work": "Work (min)",
    "short_break": "Short break (min)",
    "long_break": "Long break (min)",
}


class MinutesField:
    """
    Binds one minutes StringVar to the timer.
    Every write is validated and applied; out-of-range text is replaced
    by the clamped value, which is then applied too.
    """

    def __init__(
        self,
        var: tk.StringVar,
        field: str,
        timer_service: TimerService,
        on_valid: Callable[[bool], None],
    ):
        self.var = var
        self.field = field
        self.timer_service = timer_service
        self.on_valid = on_valid

        var.trace_add("write", lambda *_a: self._on_text_changed())

    def _on_text_changed(self):
        check = self.timer_service.apply_minutes(self.field, self.var.get())
        if check.corrected_text is not None:
            # Tcl does not re-enter a trace from inside itself: apply here
            self.var.set(check.corrected_text)
            check = self.timer_service.apply_minutes(self.field, check.corrected_text)
        self.on_valid(check.ok)

    def restore_default(self):
        text = self.timer_service.restore_default(self.field, self.var.get())
        if text is not None:
            self.var.set(text)


class SettingsPanel(ttk.Frame):
    """Minute entries: digits only, clamped to 1..120, blank reverts on focus-out."""

    def __init__(self, master, timer_service: TimerService):
        super().__init__(master, style="Card.TFrame", padding=12)
        self.timer_service = timer_service

        self._fields: Dict[str, MinutesField] = {}
        self._entries: Dict[str, tk.Entry] = {}

        self._build_ui()

    def _build_ui(self):
        vcmd = (self.register(self._on_validate), "%d", "%S", "%P")

        for col, field in enumerate(DURATION_FIELDS):
            self.columnconfigure(col, weight=1)
            ttk.Label(self, text=_LABELS[field], style="Muted.TLabel").grid(
                row=0, column=col, sticky="w", padx=4
            )

            var = tk.StringVar(self, value=str(self.timer_service.get_minutes(field)))
            entry = tk.Entry(
                self,
                textvariable=var,
                width=6,
                justify="center",
                relief="solid",
                bd=1,
                bg=config.PANEL,
                validate="key",
                validatecommand=vcmd,
            )
            entry.grid(row=1, column=col, sticky="ew", padx=4, pady=(2, 0))

            self._entries[field] = entry
            self._fields[field] = MinutesField(
                var,
                field,
                self.timer_service,
                on_valid=lambda ok, e=entry: e.configure(
                    bg=config.PANEL if ok else config.INVALID_BG
                ),
            )
            entry.bind("<FocusOut>", lambda e, f=field: self._fields[f].restore_default())

    def _on_validate(self, action: str, inserted: str, proposed: str) -> bool:
        # %d: 1 insert, 0 delete, -1 forced (textvariable writes)
        if action != "1":
            return True
        if len(inserted) > 1:
            # paste
            return accept_paste(inserted)
        return is_numeric_keystroke(inserted)
