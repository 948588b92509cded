from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from PIL import Image

SET_TEXT = "set_text"
SET_VISIBILITY = "set_visibility"
SET_IMAGE = "set_image"
SET_COLOR = "set_color"
SET_CLICK_TARGET = "set_click_target"


class WidgetState(Enum):
    NO_DATA = "no_data"
    HAS_DATA_EMPTY_CATEGORIES = "has_data_empty_categories"
    HAS_DATA_WITH_CATEGORIES = "has_data_with_categories"


@dataclass(frozen=True)
class ResourceRef:
    """A bundled drawable, used in place of a decoded image."""
    name: str


@dataclass(frozen=True)
class ViewCommand:
    op: str             # one of the SET_* names above
    field_id: str
    value: Any


@dataclass
class CommandSet:
    widget_id: int
    state: WidgetState = WidgetState.NO_DATA
    commands: list[ViewCommand] = field(default_factory=list)

    def _add(self, op: str, field_id: str, value: Any):
        self.commands.append(ViewCommand(op, field_id, value))

    def set_text(self, field_id: str, text: str):
        self._add(SET_TEXT, field_id, text)

    def set_visibility(self, field_id: str, visible: bool):
        self._add(SET_VISIBILITY, field_id, bool(visible))

    def set_image(self, field_id: str, image: "Image.Image | ResourceRef"):
        self._add(SET_IMAGE, field_id, image)

    def set_color(self, field_id: str, color: str):
        self._add(SET_COLOR, field_id, color)

    def set_click_target(self, field_id: str, payload: dict):
        self._add(SET_CLICK_TARGET, field_id, dict(payload))

    # ── Queries ──────────────────────────────────────────────────────────────
    def for_field(self, field_id: str, op: str | None = None) -> list[ViewCommand]:
        return [
            c for c in self.commands
            if c.field_id == field_id and (op is None or c.op == op)
        ]

    def last_value(self, field_id: str, op: str, default=None):
        """Final value the sink ends up with for (field, op)."""
        matches = self.for_field(field_id, op)
        return matches[-1].value if matches else default

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)
