from dataclasses import dataclass

from models.category_record import CategoryRecord
from models.quick_action import QuickActionRecord
from utils.constants import (
    DEFAULT_MONTH_LABEL,
    DEFAULT_TOTAL_EXPENSE_DISPLAY,
    DEFAULT_TOTAL_EXPENSE_LABEL,
)


@dataclass(frozen=True)
class Snapshot:
    has_data: bool
    month_label: str = DEFAULT_MONTH_LABEL
    total_expense_label: str = DEFAULT_TOTAL_EXPENSE_LABEL
    total_expense_display: str = DEFAULT_TOTAL_EXPENSE_DISPLAY
    categories: tuple[CategoryRecord, ...] = ()
    quick_actions: tuple[QuickActionRecord, ...] = ()

    @classmethod
    def empty(cls, quick_actions: tuple[QuickActionRecord, ...] = ()) -> "Snapshot":
        return cls(has_data=False, quick_actions=quick_actions)
