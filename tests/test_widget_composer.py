import math

from PIL import Image

from conftest import make_action, make_category
from models import widget_fields as fields
from models.chart import RenderedChart
from models.snapshot import Snapshot
from models.view_command import (
    SET_CLICK_TARGET,
    SET_IMAGE,
    SET_TEXT,
    SET_VISIBILITY,
    WidgetState,
)
from models.view_state import ViewState
from models.widget_fields import CATEGORY_ROW_FIELDS, QUICK_ACTION_SLOT_FIELDS
from services.pie_chart_renderer import PieChartRenderer
from services.snapshot_parser import SnapshotParser
from services.widget_composer import WidgetComposer


class RecordingRenderer(PieChartRenderer):
    def __init__(self):
        super().__init__()
        self.calls = []
        self.last = None

    def render(self, categories, colors, size):
        self.calls.append((list(categories), list(colors), size))
        self.last = super().render(categories, colors, size)
        return self.last


class BrokenRenderer(PieChartRenderer):
    def render(self, categories, colors, size):
        raise RuntimeError("canvas exploded")


def _assert_quick_actions_bound(view: ViewState):
    for slot in QUICK_ACTION_SLOT_FIELDS:
        assert slot.label in view.texts
        assert slot.icon in view.images
        assert slot.container in view.click_targets
    assert view.click_targets[fields.ROOT] == {"intent": "openTab", "tab": 3}
    assert fields.QUICK_ACTION_HINT in view.texts


def test_scenario_with_two_categories(sample_values):
    renderer = RecordingRenderer()
    snapshot = SnapshotParser().parse(sample_values)
    commands = WidgetComposer(renderer=renderer, density=1.5).compose(7, snapshot)
    view = ViewState().apply(commands)

    assert commands.state is WidgetState.HAS_DATA_WITH_CATEGORIES
    assert view.texts[fields.MONTH] == "10/2026"
    assert view.visibility[CATEGORY_ROW_FIELDS[0].row] is True
    assert view.visibility[CATEGORY_ROW_FIELDS[1].row] is True
    assert view.visibility[CATEGORY_ROW_FIELDS[2].row] is False
    assert view.texts[CATEGORY_ROW_FIELDS[0].name] == "Ăn uống"
    assert view.texts[CATEGORY_ROW_FIELDS[0].percent] == "62%"
    assert view.texts[CATEGORY_ROW_FIELDS[1].percent] == "38%"
    assert view.colors[CATEGORY_ROW_FIELDS[0].color_bar] == "#FF8A65B2"
    assert view.colors[CATEGORY_ROW_FIELDS[1].color_bar] == "#4ECDC4B2"
    assert view.visibility[fields.CONTENT_CONTAINER] is True
    assert view.visibility[fields.EMPTY_STATE] is False

    _, colors, size = renderer.calls[0]
    assert colors == ["#FF8A65", "#4ECDC4"]
    assert size == 156
    assert len(renderer.last.segments) == 2
    assert math.isclose(renderer.last.total_sweep, 360.0)
    assert view.images[fields.PIE_CHART] is renderer.last.image
    _assert_quick_actions_bound(view)


def test_scenario_without_marker():
    snapshot = SnapshotParser().parse({})
    commands = WidgetComposer().compose(1, snapshot)
    view = ViewState().apply(commands)

    assert commands.state is WidgetState.NO_DATA
    assert all(view.visibility[r.row] is False for r in CATEGORY_ROW_FIELDS)
    assert view.visibility[fields.CONTENT_CONTAINER] is False
    assert view.visibility[fields.EMPTY_STATE] is True
    assert fields.PIE_CHART not in view.images
    assert fields.MONTH not in view.texts
    _assert_quick_actions_bound(view)
    assert all(
        view.click_targets[s.container] == {"intent": "openQuickActionConfig"}
        for s in QUICK_ACTION_SLOT_FIELDS
    )


def test_data_without_categories_binds_month():
    snapshot = Snapshot(has_data=True, month_label="09/2026")
    commands = WidgetComposer().compose(1, snapshot)
    view = ViewState().apply(commands)

    assert commands.state is WidgetState.HAS_DATA_EMPTY_CATEGORIES
    assert view.texts[fields.MONTH] == "09/2026"
    assert view.visibility[fields.EMPTY_STATE] is True
    assert view.visibility[fields.CONTENT_CONTAINER] is False
    assert fields.PIE_CHART not in view.images
    _assert_quick_actions_bound(view)


def test_at_most_three_rows_bound():
    cats = tuple(make_category(name=f"c{i}", amount=10 - i, category_id=i) for i in range(5))
    renderer = RecordingRenderer()
    commands = WidgetComposer(renderer=renderer).compose(1, Snapshot(has_data=True, categories=cats))
    view = ViewState().apply(commands)

    assert all(view.visibility[r.row] for r in CATEGORY_ROW_FIELDS)
    assert [view.texts[r.name] for r in CATEGORY_ROW_FIELDS] == ["c0", "c1", "c2"]
    assert len(renderer.calls[0][0]) == 3


def test_rows_hidden_before_shown():
    snapshot = Snapshot(has_data=True, categories=(make_category(),))
    commands = WidgetComposer().compose(1, snapshot)
    row = CATEGORY_ROW_FIELDS[0].row
    assert [c.value for c in commands.for_field(row, SET_VISIBILITY)] == [False, True]
    assert commands.last_value(CATEGORY_ROW_FIELDS[2].row, SET_VISIBILITY) is False


def test_chart_failure_keeps_rest_of_view(caplog):
    snapshot = Snapshot(has_data=True, categories=(make_category(),))
    commands = WidgetComposer(renderer=BrokenRenderer()).compose(3, snapshot)
    view = ViewState().apply(commands)

    assert commands.state is WidgetState.HAS_DATA_WITH_CATEGORIES
    assert fields.PIE_CHART not in view.images
    assert view.visibility[CATEGORY_ROW_FIELDS[0].row] is True
    assert view.visibility[fields.CONTENT_CONTAINER] is True
    assert "Error drawing pie chart" in caplog.text
    _assert_quick_actions_bound(view)


def test_zero_amounts_bind_blank_chart():
    snapshot = Snapshot(has_data=True, categories=(make_category(amount=0.0),))
    commands = WidgetComposer().compose(1, snapshot)
    image = commands.last_value(fields.PIE_CHART, SET_IMAGE)
    assert isinstance(image, Image.Image)
    assert image.getbbox() is None


def test_quick_action_slots_routed_by_table():
    snapshot = Snapshot(has_data=False, quick_actions=(make_action(slot=3, label="ăn sáng"),))
    commands = WidgetComposer().compose(1, snapshot)
    labels = [commands.last_value(s.label, SET_TEXT) for s in QUICK_ACTION_SLOT_FIELDS]
    assert labels == ["Thêm", "Thêm", "Thêm", "ĂN SÁNG", "Thêm"]
    payload = commands.last_value(QUICK_ACTION_SLOT_FIELDS[3].container, SET_CLICK_TARGET)
    assert payload["intent"] == "runQuickAction"
    assert payload["slot"] == 3
    assert commands.last_value(fields.QUICK_ACTION_HINT, SET_TEXT) == "Nhấn giữ widget để chỉnh"


def test_compose_is_total_and_repeatable(sample_values):
    composer = WidgetComposer()
    snapshot = SnapshotParser().parse(sample_values)
    first = composer.compose(1, snapshot)
    second = composer.compose(1, snapshot)
    strip = lambda cs: [(c.op, c.field_id) for c in cs]
    assert strip(first) == strip(second)

    view = ViewState()
    view.apply(first)
    texts = dict(view.texts)
    view.apply(second)
    assert view.texts == texts


def test_chart_size_follows_density():
    assert WidgetComposer(density=1.0).chart_size == 104
    assert WidgetComposer(density=2.75).chart_size == 286


def test_rendered_chart_palette_matches_rows(sample_values):
    renderer = RecordingRenderer()
    WidgetComposer(renderer=renderer).compose(1, SnapshotParser().parse(sample_values))
    assert isinstance(renderer.last, RenderedChart)
    assert renderer.last.palette == ("#FF8A65", "#4ECDC4")
