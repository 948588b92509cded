from dataclasses import dataclass
from typing import Optional

from utils.constants import QUICK_ACTION_SLOT_COUNT


@dataclass(frozen=True)
class QuickActionRecord:
    slot: int                   # 0..4
    id: int
    label: str
    type: str = "expense"       # 'expense' | 'income'
    shortcut_type: str = "category"
    feature_id: Optional[str] = None    # None == unset, never ''
    category_id: int = -1               # -1 == unset
    category_name: str = ""
    icon: str = ""
    icon_image: Optional[str] = None
    amount: Optional[float] = None
    is_quick_add: bool = False

    @property
    def has_valid_slot(self) -> bool:
        return 0 <= self.slot < QUICK_ACTION_SLOT_COUNT
