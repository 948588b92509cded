from dataclasses import dataclass, field
from typing import Any

from models.view_command import (
    CommandSet,
    SET_CLICK_TARGET,
    SET_COLOR,
    SET_IMAGE,
    SET_TEXT,
    SET_VISIBILITY,
    WidgetState,
)


@dataclass
class ViewState:
    """In-memory view-binding sink: last write per (field, op) wins."""
    widget_id: int | None = None
    state: WidgetState | None = None
    texts: dict[str, str] = field(default_factory=dict)
    visibility: dict[str, bool] = field(default_factory=dict)
    images: dict[str, Any] = field(default_factory=dict)
    colors: dict[str, str] = field(default_factory=dict)
    click_targets: dict[str, dict] = field(default_factory=dict)

    def apply(self, command_set: CommandSet) -> "ViewState":
        targets = {
            SET_TEXT: self.texts,
            SET_VISIBILITY: self.visibility,
            SET_IMAGE: self.images,
            SET_COLOR: self.colors,
            SET_CLICK_TARGET: self.click_targets,
        }
        for cmd in command_set:
            try:
                targets[cmd.op][cmd.field_id] = cmd.value
            except KeyError:
                raise ValueError(f"Unknown view command: {cmd.op}") from None
        self.widget_id = command_set.widget_id
        self.state = command_set.state
        return self

    def is_visible(self, field_id: str, default: bool = True) -> bool:
        return self.visibility.get(field_id, default)
