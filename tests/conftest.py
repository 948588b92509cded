import base64
import json
import struct
import zlib

import pytest

from database.db_manager import DatabaseManager
from database.snapshot_dao import SnapshotDAO
from database.widget_instance_dao import WidgetInstanceDAO
from models.category_record import CategoryRecord
from models.quick_action import QuickActionRecord
from utils.constants import (
    KEY_LAST_UPDATE,
    KEY_MONTH_YEAR,
    KEY_QUICK_ACTIONS,
    KEY_TOP_CATEGORIES,
)

SAMPLE_CATEGORIES = [
    {"name": "Ăn uống", "amount": 500000, "percent": "62", "category_id": 1},
    {"name": "Di chuyển", "amount": 300000, "percent": "38", "category_id": 2},
]


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(str(tmp_path / "widget.db"))
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def snapshot_dao(db):
    return SnapshotDAO(db)


@pytest.fixture
def instance_dao(db):
    return WidgetInstanceDAO(db)


@pytest.fixture
def sample_values():
    return {
        KEY_LAST_UPDATE: "2026-10-19T08:00:00",
        KEY_MONTH_YEAR: "10/2026",
        KEY_TOP_CATEGORIES: json.dumps(SAMPLE_CATEGORIES, ensure_ascii=False),
        KEY_QUICK_ACTIONS: "[]",
    }


def make_category(name="Khác", amount=100.0, percent="100", category_id=0, **kw):
    return CategoryRecord(name=name, amount=amount, percent=percent, category_id=category_id, **kw)


def make_action(slot, label="Cafe", **kw):
    kw.setdefault("id", slot)
    return QuickActionRecord(slot=slot, label=label, **kw)


def oversized_png_b64(width=40000, height=40000):
    """A PNG header only, declaring a size Pillow refuses to open."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    chunk = b"IHDR" + ihdr
    data = (
        b"\x89PNG\r\n\x1a\n"
        + struct.pack(">I", len(ihdr)) + chunk
        + struct.pack(">I", zlib.crc32(chunk) & 0xFFFFFFFF)
    )
    return base64.b64encode(data).decode("ascii")
