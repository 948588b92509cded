import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageDraw

from models import widget_fields as fields
from models.view_command import ResourceRef
from models.view_state import ViewState
from models.widget_fields import CATEGORY_ROW_FIELDS, QUICK_ACTION_SLOT_FIELDS
from utils.colors import blend_over

WIDGET_BG = "#00A8CC"
ICON_SIZE = 28
CHART_DISPLAY_SIZE = 104

_resource_cache: dict[str, Image.Image] = {}


def resource_image(ref: ResourceRef) -> Image.Image:
    """Stand-in for bundled drawables: a light disc with a dark dot."""
    if ref.name not in _resource_cache:
        img = Image.new("RGBA", (64, 64), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)
        draw.ellipse([4, 4, 60, 60], fill=(255, 255, 255, 220))
        draw.ellipse([24, 24, 40, 40], fill=(7, 24, 42, 255))
        _resource_cache[ref.name] = img
    return _resource_cache[ref.name]


class WidgetPreview(ctk.CTkFrame):
    """Draws one widget instance from a ViewState, the way a launcher would."""

    def __init__(self, master, widget_id: int, on_navigate=None, **kwargs):
        super().__init__(master, fg_color=WIDGET_BG, corner_radius=16, **kwargs)
        self.widget_id = widget_id
        self._on_navigate = on_navigate or (lambda payload: None)
        self._state = ViewState()
        self._views: dict[str, tk.Widget] = {}
        self._field_ids: dict[str, str] = {}
        self._images: dict[str, ctk.CTkImage] = {}

        self.grid_columnconfigure(0, weight=1)
        self._register(fields.ROOT, self)
        self._build_header()
        self._build_content()
        self._build_quick_actions()

    def _register(self, field_id: str, widget):
        self._views[field_id] = widget
        self._field_ids[str(widget)] = field_id
        widget.bind("<Button-1>", lambda _e, w=widget: self._clicked(w), add="+")

    # ── Layout ───────────────────────────────────────────────────────────────
    def _build_header(self):
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(10, 0))
        self._register(fields.MONTH, ctk.CTkLabel(
            header, text="", text_color="white", font=ctk.CTkFont(size=13, weight="bold"),
        ))
        self._views[fields.MONTH].pack(side="left")
        self._register(fields.TOTAL_EXPENSE, ctk.CTkLabel(
            header, text="", text_color="white", font=ctk.CTkFont(size=13, weight="bold"),
        ))
        self._views[fields.TOTAL_EXPENSE].pack(side="right")
        self._register(fields.TOTAL_EXPENSE_LABEL, ctk.CTkLabel(
            header, text="", text_color="#E0F7FA", font=ctk.CTkFont(size=11),
        ))
        self._views[fields.TOTAL_EXPENSE_LABEL].pack(side="right", padx=(0, 6))

    def _build_content(self):
        body = ctk.CTkFrame(self, fg_color="transparent")
        body.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        body.grid_columnconfigure(0, weight=1)

        content = ctk.CTkFrame(body, fg_color="transparent")
        content.grid(row=0, column=0, sticky="ew")
        content.grid_columnconfigure(1, weight=1)
        self._register(fields.CONTENT_CONTAINER, content)

        self._register(fields.PIE_CHART, ctk.CTkLabel(
            content, text="", width=CHART_DISPLAY_SIZE, height=CHART_DISPLAY_SIZE,
        ))
        self._views[fields.PIE_CHART].grid(row=0, column=0, rowspan=3, padx=(0, 10))

        for i, row_fields in enumerate(CATEGORY_ROW_FIELDS):
            row = ctk.CTkFrame(content, fg_color="transparent")
            row.grid(row=i, column=1, sticky="ew", pady=2)
            row.grid_columnconfigure(2, weight=1)
            self._register(row_fields.row, row)

            bar = tk.Label(row, bg=WIDGET_BG, width=1)
            bar.grid(row=0, column=0, sticky="ns", padx=(0, 6))
            self._register(row_fields.color_bar, bar)
            self._register(row_fields.icon, ctk.CTkLabel(row, text="", width=ICON_SIZE))
            self._views[row_fields.icon].grid(row=0, column=1, padx=(0, 6))
            self._register(row_fields.name, ctk.CTkLabel(row, text="", text_color="white", anchor="w"))
            self._views[row_fields.name].grid(row=0, column=2, sticky="ew")
            self._register(row_fields.percent, ctk.CTkLabel(
                row, text="", text_color="white", font=ctk.CTkFont(weight="bold"),
            ))
            self._views[row_fields.percent].grid(row=0, column=3, padx=(6, 0))

        empty = ctk.CTkLabel(
            body, text="Chưa có dữ liệu chi tiêu", text_color="white", height=CHART_DISPLAY_SIZE,
        )
        empty.grid(row=0, column=0, sticky="ew")
        self._register(fields.EMPTY_STATE, empty)

    def _build_quick_actions(self):
        bar = ctk.CTkFrame(self, fg_color="#07182A", corner_radius=12)
        bar.grid(row=2, column=0, sticky="ew", padx=8, pady=(0, 8))
        self._register(fields.QUICK_ACTIONS_CONTAINER, bar)

        for slot in QUICK_ACTION_SLOT_FIELDS:
            bar.grid_columnconfigure(slot.index, weight=1)
            cell = ctk.CTkFrame(bar, fg_color="transparent")
            cell.grid(row=0, column=slot.index, pady=(6, 0))
            self._register(slot.container, cell)
            self._register(slot.icon, ctk.CTkLabel(cell, text="", width=ICON_SIZE))
            self._views[slot.icon].pack()
            self._register(slot.label, ctk.CTkLabel(cell, text="", font=ctk.CTkFont(size=10)))
            self._views[slot.label].pack()

        hint = ctk.CTkLabel(bar, text="", text_color="gray70", font=ctk.CTkFont(size=10))
        hint.grid(row=1, column=0, columnspan=len(QUICK_ACTION_SLOT_FIELDS), pady=(0, 4))
        self._register(fields.QUICK_ACTION_HINT, hint)

    # ── Binding ──────────────────────────────────────────────────────────────
    def show(self, state: ViewState):
        self._state = state
        for field_id, text in state.texts.items():
            view = self._views.get(field_id)
            if view is not None:
                view.configure(text=text)
        for field_id, color in state.colors.items():
            self._apply_color(field_id, color)
        for field_id, image in state.images.items():
            self._apply_image(field_id, image)
        for field_id, visible in state.visibility.items():
            view = self._views.get(field_id)
            if view is None:
                continue
            if visible:
                view.grid()
            else:
                view.grid_remove()

    def _apply_color(self, field_id: str, color: str):
        view = self._views.get(field_id)
        if view is None:
            return
        flat = blend_over(color, WIDGET_BG)
        if isinstance(view, tk.Label):
            view.configure(bg=flat)
        else:
            view.configure(text_color=flat)

    def _apply_image(self, field_id: str, image):
        view = self._views.get(field_id)
        if view is None:
            return
        if isinstance(image, ResourceRef):
            image = resource_image(image)
        size = CHART_DISPLAY_SIZE if field_id == fields.PIE_CHART else ICON_SIZE
        ctk_image = ctk.CTkImage(light_image=image, dark_image=image, size=(size, size))
        self._images[field_id] = ctk_image
        view.configure(image=ctk_image)

    def _clicked(self, widget):
        """Nearest ancestor with a click target wins, like nested click handlers."""
        while widget is not None:
            field_id = self._field_ids.get(str(widget))
            payload = self._state.click_targets.get(field_id) if field_id else None
            if payload is not None:
                self._on_navigate(payload)
                return "break"
            if widget is self:
                return None
            widget = widget.master
        return None
