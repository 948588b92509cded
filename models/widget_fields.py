"""Field ids of the widget layout. Rank → row and slot → view are fixed tables."""
from dataclasses import dataclass

ROOT = "widget_root"
MONTH = "widget_month"
TOTAL_EXPENSE_LABEL = "widget_total_expense_label"
TOTAL_EXPENSE = "widget_total_expense"
CONTENT_CONTAINER = "widget_content_container"
EMPTY_STATE = "widget_empty_state"
PIE_CHART = "widget_pie_chart"
QUICK_ACTION_HINT = "widget_quick_action_hint"
QUICK_ACTIONS_CONTAINER = "widget_quick_actions_container"


@dataclass(frozen=True)
class CategoryRowFields:
    row: str
    name: str
    percent: str
    icon: str
    color_bar: str


@dataclass(frozen=True)
class QuickActionSlotFields:
    index: int
    container: str
    icon: str
    label: str


CATEGORY_ROW_FIELDS = tuple(
    CategoryRowFields(
        row=f"category_{n}_row",
        name=f"category_{n}_name",
        percent=f"category_{n}_percent",
        icon=f"category_{n}_icon",
        color_bar=f"category_{n}_color_bar",
    )
    for n in (1, 2, 3)
)

QUICK_ACTION_SLOT_FIELDS = tuple(
    QuickActionSlotFields(
        index=n - 1,
        container=f"quick_action_slot_{n}",
        icon=f"quick_action_icon_{n}",
        label=f"quick_action_label_{n}",
    )
    for n in (1, 2, 3, 4, 5)
)
