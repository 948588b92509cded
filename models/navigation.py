"""Deep-link payloads handed to the host application. Opaque to the widget."""
from models.quick_action import QuickActionRecord

INTENT_OPEN_TAB = "openTab"
INTENT_OPEN_QUICK_ACTION_CONFIG = "openQuickActionConfig"
INTENT_RUN_QUICK_ACTION = "runQuickAction"


def open_tab_payload(tab: int) -> dict:
    return {"intent": INTENT_OPEN_TAB, "tab": tab}


def quick_action_config_payload() -> dict:
    return {"intent": INTENT_OPEN_QUICK_ACTION_CONFIG}


def run_quick_action_payload(action: QuickActionRecord) -> dict:
    return {
        "intent": INTENT_RUN_QUICK_ACTION,
        "type": action.type,
        "shortcutType": action.shortcut_type,
        "categoryId": action.category_id,
        "categoryName": action.category_name,
        "icon": action.icon,
        "label": action.label,
        "amount": action.amount if action.amount is not None else 0.0,
        "isQuickAdd": action.is_quick_add,
        "featureId": action.feature_id,
        "slot": action.slot,
        "triggerHaptic": True,
    }
