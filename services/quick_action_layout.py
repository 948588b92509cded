from models.navigation import quick_action_config_payload, run_quick_action_payload
from models.quick_action import QuickActionRecord
from models.slot_binding import BoundSlot, PlaceholderSlot, SlotBinding
from models.view_command import ResourceRef
from utils.constants import (
    ACTION_LABEL_COLOR,
    DEFAULT_ICON,
    HINT_CONFIGURED,
    HINT_EMPTY,
    PLACEHOLDER_LABEL,
    PLACEHOLDER_LABEL_COLOR,
    QUICK_ACTION_SLOT_COUNT,
    QUICK_ADD_LABEL_COLOR,
)
from utils.icons import decode_icon


def find_action_for_slot(
    actions: list[QuickActionRecord], index: int
) -> QuickActionRecord | None:
    """First record claiming the slot; else the record at that list position,
    but only when its own slot is unusable (a legacy, unslotted entry)."""
    for action in actions:
        if action.slot == index:
            return action
    if index < len(actions) and not actions[index].has_valid_slot:
        return actions[index]
    return None


class QuickActionLayout:
    def __init__(self, icon_decoder=decode_icon):
        self._decode_icon = icon_decoder

    def resolve(self, actions) -> list[SlotBinding]:
        """Always exactly QUICK_ACTION_SLOT_COUNT bindings, in slot order."""
        actions = list(actions)
        bindings = []
        for index in range(QUICK_ACTION_SLOT_COUNT):
            action = find_action_for_slot(actions, index)
            if action is None:
                bindings.append(self.placeholder(index))
            else:
                bindings.append(self.bind(index, action))
        return bindings

    def bind(self, index: int, action: QuickActionRecord) -> BoundSlot:
        icon = self._decode_icon(action.icon_image) or ResourceRef(DEFAULT_ICON)
        return BoundSlot(
            index=index,
            action=action,
            icon=icon,
            label=action.label.upper(),
            label_color=QUICK_ADD_LABEL_COLOR if action.is_quick_add else ACTION_LABEL_COLOR,
            click_payload=run_quick_action_payload(action),
        )

    @staticmethod
    def placeholder(index: int) -> PlaceholderSlot:
        return PlaceholderSlot(
            index=index,
            icon=ResourceRef(DEFAULT_ICON),
            label=PLACEHOLDER_LABEL,
            label_color=PLACEHOLDER_LABEL_COLOR,
            click_payload=quick_action_config_payload(),
        )

    @staticmethod
    def hint_text(actions) -> str:
        return HINT_EMPTY if not list(actions) else HINT_CONFIGURED
