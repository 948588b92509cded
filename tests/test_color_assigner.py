from conftest import make_category
from services.color_assigner import ColorAssigner, color_for
from utils.constants import CATEGORY_COLORS, FALLBACK_PALETTE


def test_named_categories_use_table():
    assert color_for("Ăn uống", 99) == "#FF8A65"
    assert color_for("Di chuyển", 99) == "#4ECDC4"
    assert len(CATEGORY_COLORS) == 17


def test_unknown_name_uses_palette_by_id():
    assert color_for("Thú cưng", 0) == FALLBACK_PALETTE[0]
    assert color_for("Thú cưng", 31) == FALLBACK_PALETTE[1]


def test_same_input_same_color():
    assert color_for("X", 5) == color_for("X", 5)


def test_palette_collision_gives_equal_colors():
    size = len(FALLBACK_PALETTE)
    assert color_for("Foo", 4) == color_for("Bar", 4 + size)


def test_negative_id_wraps_into_palette():
    assert color_for("Foo", -1) == FALLBACK_PALETTE[-1]
    assert color_for("Foo", -len(FALLBACK_PALETTE)) == FALLBACK_PALETTE[0]


def test_assigner_uses_record_fields():
    assigner = ColorAssigner()
    assert assigner.assign(make_category(name="Lương", category_id=3)) == "#4CAF50"
    assert assigner.assign_all([
        make_category(name="Nước"), make_category(name="?", category_id=2),
    ]) == ["#2196F3", FALLBACK_PALETTE[2]]
