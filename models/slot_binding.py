from dataclasses import dataclass
from typing import Union

from PIL import Image

from models.quick_action import QuickActionRecord
from models.view_command import ResourceRef


@dataclass(frozen=True)
class BoundSlot:
    index: int
    action: QuickActionRecord
    icon: Image.Image | ResourceRef
    label: str              # upper-cased for display
    label_color: str
    click_payload: dict

    @property
    def is_placeholder(self) -> bool:
        return False


@dataclass(frozen=True)
class PlaceholderSlot:
    index: int
    icon: Image.Image | ResourceRef
    label: str
    label_color: str
    click_payload: dict

    @property
    def is_placeholder(self) -> bool:
        return True


SlotBinding = Union[BoundSlot, PlaceholderSlot]
