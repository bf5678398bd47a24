"""Interactive year-of-dots window (tkinter), rebuilt at local midnight."""

import logging
from datetime import datetime
from typing import Callable
import tkinter as tk

import clock
from calendar_logic import DotState, MonthGrid, build_year, classify_dot
from settings import load_settings, save_settings
from wallpaper import compute_layout

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 760
DEFAULT_HEIGHT = 520

# Screen-sized geometry; colours come from the saved wallpaper style
_WINDOW_GEOMETRY = {
    "dot_size": 12,
    "dot_gap": 4,
    "month_gap": 24,
    "label_size": 11,
    "label_gap": 4,
    "top_pad": 0.0,
    "bottom_pad": 0.0,
}

# Past midnight by this much so the new instant lands on the new day
_MIDNIGHT_MARGIN_MS = 1000


class CalendarWindow:
    """Twelve months of dots for the current year in the configured timezone."""

    def __init__(self, tz_name: str | None = None,
                 on_refresh: Callable[[datetime], None] | None = None) -> None:
        self.root = tk.Tk()
        self.root.resizable(True, True)

        settings = load_settings()
        self.tz_name: str = tz_name or settings["timezone"]
        self._style: dict = {**settings["style"], **_WINDOW_GEOMETRY}
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]
        self._on_refresh = on_refresh

        self.root.configure(bg=self._style["background"])
        self.canvas = tk.Canvas(
            self.root,
            width=self._saved_width or DEFAULT_WIDTH,
            height=self._saved_height or DEFAULT_HEIGHT,
            bg=self._style["background"], highlightthickness=0, borderwidth=0,
        )
        self.canvas.pack(fill="both", expand=True)

        self.instant: datetime = clock.now(self.tz_name)
        self.months: tuple[MonthGrid, ...] = build_year(self.instant)
        self._midnight_after_id: str | None = None
        self._resize_after_id: str | None = None

        self.root.title(self._title())
        self._schedule_midnight()

        self.canvas.bind("<Configure>", self._on_configure)
        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    def _title(self) -> str:
        return f"Dot Calendar  {self.instant.strftime('%d %b %Y')}  ({self.tz_name})"

    # ------------------------------------------------------------------
    # Rebuild: capture one instant, build the year, redraw
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        self.instant = clock.now(self.tz_name)
        self.months = build_year(self.instant)
        logger.info("Rebuilt calendar for %s", self.instant.date().isoformat())
        self.root.title(self._title())
        self._draw()
        if self._on_refresh is not None:
            self._on_refresh(self.instant)

    def _schedule_midnight(self) -> None:
        if self._midnight_after_id is not None:
            self.root.after_cancel(self._midnight_after_id)
        delay_ms = int(clock.seconds_until_midnight(self.instant) * 1000) + _MIDNIGHT_MARGIN_MS
        logger.debug("Next rebuild in %d ms", delay_ms)
        self._midnight_after_id = self.root.after(delay_ms, self._on_midnight)

    def _on_midnight(self) -> None:
        self._midnight_after_id = None
        self.refresh()
        self._schedule_midnight()

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def _draw(self) -> None:
        self.canvas.delete("all")
        style = dict(self._style)
        style["width"] = max(1, self.canvas.winfo_width())
        style["height"] = max(1, self.canvas.winfo_height())
        layout = compute_layout(self.months, style)

        colors = {
            DotState.TODAY: style["today"],
            DotState.PAST: style["past"],
            DotState.FUTURE: style["future"],
        }
        for x, y, text in layout.labels:
            self.canvas.create_text(
                x, y, text=text, anchor="nw", fill=style["label"],
                font=("TkDefaultFont", style["label_size"]),
            )
        for (month_idx, day), (x0, y0, x1, y1) in layout.dots.items():
            fill = colors[classify_dot(day, self.months[month_idx].today)]
            self.canvas.create_oval(x0, y0, x1, y1, fill=fill, outline="")

    # ------------------------------------------------------------------
    # Resize handling: debounce redraws
    # ------------------------------------------------------------------
    def _on_configure(self, _event: tk.Event) -> None:
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()
        if self._resize_after_id is not None:
            self.root.after_cancel(self._resize_after_id)
        self._resize_after_id = self.root.after(30, self._handle_resize)

    def _handle_resize(self) -> None:
        self._resize_after_id = None
        self._draw()

    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        save_settings(settings)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.deiconify()
        self.root.update_idletasks()
        self._draw()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self._saved_width is not None and self._saved_height is not None:
            self._persist_size()
        self.root.withdraw()
