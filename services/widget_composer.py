"""Builds the complete command set for one widget instance.

Every call emits the full state (no incremental patches): quick actions and
the root click are bound in every state, category rows are hidden before the
used ones are shown, and the chart is rendered in its own guarded step so a
drawing failure only costs the image.
"""
import logging

from models import widget_fields as fields
from models.navigation import open_tab_payload, quick_action_config_payload
from models.snapshot import Snapshot
from models.view_command import CommandSet, ResourceRef, WidgetState
from models.widget_fields import CATEGORY_ROW_FIELDS, QUICK_ACTION_SLOT_FIELDS
from services.color_assigner import ColorAssigner
from services.pie_chart_renderer import PieChartRenderer
from services.quick_action_layout import QuickActionLayout
from utils.colors import with_alpha
from utils.constants import (
    CHART_SIZE_DP,
    COLOR_BAR_ALPHA,
    DEFAULT_ICON,
    MAX_CATEGORY_ROWS,
    STATISTICS_TAB_INDEX,
)
from utils.icons import decode_icon

logger = logging.getLogger(__name__)


def resolve_state(snapshot: Snapshot) -> WidgetState:
    if not snapshot.has_data:
        return WidgetState.NO_DATA
    if not snapshot.categories:
        return WidgetState.HAS_DATA_EMPTY_CATEGORIES
    return WidgetState.HAS_DATA_WITH_CATEGORIES


class WidgetComposer:
    def __init__(
        self,
        color_assigner: ColorAssigner | None = None,
        renderer: PieChartRenderer | None = None,
        layout: QuickActionLayout | None = None,
        density: float = 1.0,
        icon_decoder=decode_icon,
    ):
        self._colors = color_assigner or ColorAssigner()
        self._renderer = renderer or PieChartRenderer()
        self._layout = layout or QuickActionLayout(icon_decoder=icon_decoder)
        self._decode_icon = icon_decoder
        self._density = density

    @property
    def chart_size(self) -> int:
        return max(1, int(CHART_SIZE_DP * self._density))

    def compose(self, widget_id: int, snapshot: Snapshot) -> CommandSet:
        state = resolve_state(snapshot)
        commands = CommandSet(widget_id=widget_id, state=state)

        self._bind_quick_actions(commands, snapshot)

        self._hide_category_rows(commands)
        if state is WidgetState.NO_DATA:
            self._show_empty_state(commands)
        elif state is WidgetState.HAS_DATA_EMPTY_CATEGORIES:
            commands.set_text(fields.MONTH, snapshot.month_label)
            self._show_empty_state(commands)
        else:
            commands.set_text(fields.MONTH, snapshot.month_label)
            commands.set_text(fields.TOTAL_EXPENSE_LABEL, snapshot.total_expense_label)
            commands.set_text(fields.TOTAL_EXPENSE, snapshot.total_expense_display)
            self._bind_categories(commands, snapshot)
            commands.set_visibility(fields.CONTENT_CONTAINER, True)
            commands.set_visibility(fields.EMPTY_STATE, False)

        commands.set_click_target(fields.ROOT, open_tab_payload(STATISTICS_TAB_INDEX))
        return commands

    # ── Quick actions ────────────────────────────────────────────────────────
    def _bind_quick_actions(self, commands: CommandSet, snapshot: Snapshot):
        bindings = self._layout.resolve(snapshot.quick_actions)
        for slot_fields, binding in zip(QUICK_ACTION_SLOT_FIELDS, bindings):
            commands.set_image(slot_fields.icon, binding.icon)
            commands.set_text(slot_fields.label, binding.label)
            commands.set_color(slot_fields.label, binding.label_color)
            commands.set_click_target(slot_fields.container, binding.click_payload)

        commands.set_text(fields.QUICK_ACTION_HINT, self._layout.hint_text(snapshot.quick_actions))
        commands.set_click_target(fields.QUICK_ACTIONS_CONTAINER, quick_action_config_payload())

    # ── Categories ───────────────────────────────────────────────────────────
    @staticmethod
    def _hide_category_rows(commands: CommandSet):
        for row in CATEGORY_ROW_FIELDS:
            commands.set_visibility(row.row, False)

    @staticmethod
    def _show_empty_state(commands: CommandSet):
        commands.set_visibility(fields.CONTENT_CONTAINER, False)
        commands.set_visibility(fields.EMPTY_STATE, True)

    def _bind_categories(self, commands: CommandSet, snapshot: Snapshot):
        ranked = snapshot.categories[:MAX_CATEGORY_ROWS]
        colors = self._colors.assign_all(ranked)

        for row, category, color in zip(CATEGORY_ROW_FIELDS, ranked, colors):
            commands.set_visibility(row.row, True)
            commands.set_text(row.name, category.name)
            commands.set_text(row.percent, category.percent_text)
            icon = self._decode_icon(category.icon_image) or ResourceRef(DEFAULT_ICON)
            commands.set_image(row.icon, icon)
            commands.set_color(row.color_bar, with_alpha(color, COLOR_BAR_ALPHA))

        try:
            chart = self._renderer.render(ranked, colors, self.chart_size)
        except Exception:
            logger.exception(f"Error drawing pie chart for widget {commands.widget_id}")
            return
        commands.set_image(fields.PIE_CHART, chart.image)
        logger.debug(f"Pie chart drawn with {len(chart.segments)} segments")
