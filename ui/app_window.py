import json
import logging

import customtkinter as ctk

from models.view_state import ViewState
from services.pin_service import PinResult, PinService
from services.widget_service import WidgetService
from ui.components.widget_preview import WidgetPreview
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT, DEFAULT_REFRESH_INTERVAL_MS

logger = logging.getLogger(__name__)

_PIN_MESSAGES = {
    PinResult.PINNED:         ("Widget added.", "#4CAF50"),
    PinResult.ALREADY_PINNED: ("A widget is already on the home screen.", "#2196F3"),
    PinResult.DENIED:         ("This launcher cannot add widgets.", "#FF9800"),
    PinResult.UNSUPPORTED:    ("Adding widgets needs a newer platform version.", "#F44336"),
}


class AppWindow(ctk.CTk):
    """Desktop stand-in for the launcher: hosts every registered widget."""

    def __init__(
        self,
        widget_service: WidgetService,
        pin_service: PinService,
        refresh_interval_ms: int = DEFAULT_REFRESH_INTERVAL_MS,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._widget_svc = widget_service
        self._pin_svc = pin_service
        self._refresh_interval_ms = refresh_interval_ms
        self._previews: dict[int, WidgetPreview] = {}

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_toolbar()
        self._build_home_screen()
        self._build_status_bar()

        self.refresh_widgets()
        self.after(self._refresh_interval_ms, self._periodic_refresh)

    # ── Layout ───────────────────────────────────────────────────────────────
    def _build_toolbar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray85", "gray15"), corner_radius=0, height=44)
        bar.grid(row=0, column=0, sticky="ew")

        ctk.CTkButton(
            bar, text="Refresh", width=90, command=self.refresh_widgets,
        ).pack(side="left", padx=(12, 4), pady=8)

        ctk.CTkButton(
            bar, text="+ Add Widget", width=110, command=self._request_pin,
        ).pack(side="left", padx=4)

        ctk.CTkButton(
            bar, text="Remove Widget", width=120, command=self._remove_latest,
        ).pack(side="left", padx=4)

    def _build_home_screen(self):
        self._home = ctk.CTkScrollableFrame(self, label_text="Home screen")
        self._home.grid(row=1, column=0, sticky="nsew", padx=8, pady=8)
        self._home.grid_columnconfigure(0, weight=1)

    def _build_status_bar(self):
        self._status = ctk.CTkLabel(self, text="", anchor="w", text_color="gray60")
        self._status.grid(row=2, column=0, sticky="ew", padx=12, pady=(0, 8))

    # ── Refresh ──────────────────────────────────────────────────────────────
    def refresh_widgets(self):
        command_sets = self._widget_svc.refresh_all()

        for widget_id in list(self._previews):
            if widget_id not in command_sets:
                self._previews.pop(widget_id).destroy()

        if not command_sets:
            self._set_status("No widgets yet. Use “+ Add Widget”.")
            return

        for row, (widget_id, commands) in enumerate(sorted(command_sets.items())):
            preview = self._previews.get(widget_id)
            if preview is None:
                preview = WidgetPreview(self._home, widget_id, on_navigate=self._on_navigate)
                self._previews[widget_id] = preview
            preview.grid(row=row, column=0, sticky="ew", padx=8, pady=8)
            preview.show(ViewState().apply(commands))

        self._set_status(f"{len(command_sets)} widget(s) refreshed.")

    def _periodic_refresh(self):
        self.refresh_widgets()
        self.after(self._refresh_interval_ms, self._periodic_refresh)

    # ── Actions ──────────────────────────────────────────────────────────────
    def _request_pin(self):
        result = self._pin_svc.request_pin()
        message, color = _PIN_MESSAGES[result]
        self._set_status(message, color)
        if result is PinResult.PINNED:
            self.refresh_widgets()
            self._set_status(message, color)

    def _remove_latest(self):
        if not self._previews:
            self._set_status("No widget to remove.", "#FF9800")
            return
        widget_id = max(self._previews)
        self._pin_svc.remove_widget(widget_id)
        self.refresh_widgets()
        self._set_status(f"Widget {widget_id} removed.")

    def _on_navigate(self, payload: dict):
        logger.info(f"Widget click → {payload}")
        self._set_status(json.dumps(payload, ensure_ascii=False))

    def _set_status(self, text: str, color: str = "gray60"):
        self._status.configure(text=text, text_color=color)
