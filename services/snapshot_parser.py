"""Turns the raw widget key/value bag into a typed, immutable Snapshot.

The producer is a different process (possibly a different app version), so
every field is read defensively: required category fields drop only their own
entry when unreadable, optional fields fall back to fixed defaults, and a
broken array degrades to an empty list. Nothing here raises to the caller.
"""
import json
import logging
import math
from collections.abc import Mapping

from models.category_record import CategoryRecord
from models.quick_action import QuickActionRecord
from models.snapshot import Snapshot
from utils.constants import (
    DEFAULT_MONTH_LABEL,
    DEFAULT_QUICK_ACTION_LABEL,
    DEFAULT_TOTAL_EXPENSE_DISPLAY,
    DEFAULT_TOTAL_EXPENSE_LABEL,
    KEY_LAST_UPDATE,
    KEY_MONTH_YEAR,
    KEY_QUICK_ACTIONS,
    KEY_TOP_CATEGORIES,
    KEY_TOTAL_EXPENSE_FORMATTED,
    KEY_TOTAL_EXPENSE_LABEL,
)

logger = logging.getLogger(__name__)


class MalformedEntry(ValueError):
    """A required field of one array entry is missing or unreadable."""


# ── Field extraction ─────────────────────────────────────────────────────────

def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_str(obj: dict, key: str) -> str:
    value = obj.get(key)
    if isinstance(value, str):
        return value
    if _is_number(value):
        return str(value)
    raise MalformedEntry(f"'{key}' is missing or not a string")


def _require_float(obj: dict, key: str) -> float:
    value = obj.get(key)
    if _is_number(value):
        try:
            result = float(value)
        except OverflowError:
            raise MalformedEntry(f"'{key}' is out of range") from None
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            raise MalformedEntry(f"'{key}' is not a number: {value!r}") from None
    else:
        raise MalformedEntry(f"'{key}' is missing or not a number")
    if not math.isfinite(result):
        raise MalformedEntry(f"'{key}' is not finite")
    return result


def _opt_str(obj: dict, key: str, default: str | None = "") -> str | None:
    value = obj.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return str(value)
    return default


def _opt_int(obj: dict, key: str, default: int) -> int:
    value = obj.get(key)
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    try:
        number = float(value) if isinstance(value, (float, str)) else None
    except ValueError:
        return default
    if number is None or not math.isfinite(number):
        return default
    return int(number)


def _opt_bool(obj: dict, key: str, default: bool = False) -> bool:
    value = obj.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    return default


def _opt_float(obj: dict, key: str) -> float | None:
    """None when absent, null or unreadable."""
    if obj.get(key) is None:
        return None
    try:
        return _require_float(obj, key)
    except MalformedEntry as e:
        logger.debug(f"Ignoring quick action field: {e}")
        return None


# ── Raw value helpers ────────────────────────────────────────────────────────

def _as_text(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Snapshot value is not valid UTF-8; treating as empty")
            return None
    return str(value)


def _load_array(raw, what: str) -> list:
    text = _as_text(raw)
    if text is None or not text.strip() or text.strip() == "[]":
        return []
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Error parsing {what}: {e}")
        return []
    if not isinstance(data, list):
        logger.warning(f"Error parsing {what}: expected a JSON array, got {type(data).__name__}")
        return []
    return data


# ── Entries ──────────────────────────────────────────────────────────────────

def parse_category(obj, index: int) -> CategoryRecord:
    if not isinstance(obj, dict):
        raise MalformedEntry(f"entry {index} is not an object")
    amount = _require_float(obj, "amount")
    if amount < 0:
        raise MalformedEntry(f"entry {index} has a negative amount")
    return CategoryRecord(
        name=_require_str(obj, "name"),
        amount=amount,
        percent=_require_str(obj, "percent"),
        icon=_opt_str(obj, "icon"),
        category_id=_opt_int(obj, "category_id", index),
        type=_opt_str(obj, "type", "expense"),
        icon_image=_opt_str(obj, "icon_image", None),
        formatted_amount=_opt_str(obj, "formatted_amount", None),
    )


def parse_quick_action(obj, index: int) -> QuickActionRecord:
    if not isinstance(obj, dict):
        raise MalformedEntry(f"entry {index} is not an object")
    feature_id = _opt_str(obj, "feature_id", "")
    return QuickActionRecord(
        slot=_opt_int(obj, "slot", index),
        id=_opt_int(obj, "id", index),
        label=_opt_str(obj, "label", DEFAULT_QUICK_ACTION_LABEL),
        type=_opt_str(obj, "type", "expense"),
        shortcut_type=_opt_str(obj, "shortcut_type", "category"),
        feature_id=None if not feature_id or not feature_id.strip() else feature_id,
        category_id=_opt_int(obj, "category_id", -1),
        category_name=_opt_str(obj, "category_name", ""),
        icon=_opt_str(obj, "icon"),
        icon_image=_opt_str(obj, "icon_image", None),
        amount=_opt_float(obj, "amount"),
        is_quick_add=_opt_bool(obj, "is_quick_add", False),
    )


def _parse_entries(raw, what: str, parse_entry) -> tuple:
    records = []
    for i, obj in enumerate(_load_array(raw, what)):
        try:
            records.append(parse_entry(obj, i))
        except (MalformedEntry, OverflowError, TypeError) as e:
            logger.debug(f"Dropping {what} entry: {e}")
    return tuple(records)


def parse_top_categories(raw) -> tuple[CategoryRecord, ...]:
    return _parse_entries(raw, "categories", parse_category)


def parse_quick_actions(raw) -> tuple[QuickActionRecord, ...]:
    return _parse_entries(raw, "quick actions", parse_quick_action)


# ── Snapshot ─────────────────────────────────────────────────────────────────

class SnapshotParser:
    def parse(self, values: Mapping | None) -> Snapshot:
        values = values or {}
        quick_actions = parse_quick_actions(values.get(KEY_QUICK_ACTIONS))

        marker = _as_text(values.get(KEY_LAST_UPDATE))
        if not marker:
            return Snapshot.empty(quick_actions=quick_actions)

        return Snapshot(
            has_data=True,
            month_label=_as_text(values.get(KEY_MONTH_YEAR)) or DEFAULT_MONTH_LABEL,
            total_expense_label=(
                _as_text(values.get(KEY_TOTAL_EXPENSE_LABEL)) or DEFAULT_TOTAL_EXPENSE_LABEL
            ),
            total_expense_display=(
                _as_text(values.get(KEY_TOTAL_EXPENSE_FORMATTED)) or DEFAULT_TOTAL_EXPENSE_DISPLAY
            ),
            categories=parse_top_categories(values.get(KEY_TOP_CATEGORIES)),
            quick_actions=quick_actions,
        )
