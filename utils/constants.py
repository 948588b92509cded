APP_NAME = "Whales Spent Widget"
APP_WIDTH = 760
APP_HEIGHT = 560
DB_FILE = "widget_data.db"

# ── Snapshot keys (written by the main app, read-only here) ────────────────────
KEY_LAST_UPDATE = "last_update"
KEY_MONTH_YEAR = "month_year"
KEY_TOTAL_EXPENSE_FORMATTED = "total_expense_formatted"
KEY_TOTAL_EXPENSE_LABEL = "total_expense_label"
KEY_TOP_CATEGORIES = "top_categories"
KEY_QUICK_ACTIONS = "widget_quick_actions"

SNAPSHOT_KEYS = (
    KEY_LAST_UPDATE,
    KEY_MONTH_YEAR,
    KEY_TOTAL_EXPENSE_FORMATTED,
    KEY_TOTAL_EXPENSE_LABEL,
    KEY_TOP_CATEGORIES,
    KEY_QUICK_ACTIONS,
)

DEFAULT_MONTH_LABEL = "--/----"
DEFAULT_TOTAL_EXPENSE_DISPLAY = "₫0"
DEFAULT_TOTAL_EXPENSE_LABEL = "Chi tiêu tháng này"
DEFAULT_QUICK_ACTION_LABEL = "Tác vụ"

# ── Layout ─────────────────────────────────────────────────────────────────────
CHART_SIZE_DP = 104
MAX_CATEGORY_ROWS = 3
QUICK_ACTION_SLOT_COUNT = 5
STATISTICS_TAB_INDEX = 3
DEFAULT_ICON = "ic_default_category"

# ── Chart drawing ──────────────────────────────────────────────────────────────
CHART_START_ANGLE = -90.0      # 12 o'clock, clockwise, y pointing down
CHART_PADDING_PX = 10.0
CHART_RIM_WIDTH_PX = 6.0
CHART_BORDER_WIDTH_PX = 4.0
CHART_INNER_RATIO = 0.58
CHART_INNER_COLOR = "#07182A"
CHART_BORDER_COLOR = "#27C9E833"
CHART_LABEL = "TOP\nSPEND"
CHART_LABEL_COLOR = "#FFFFFF"
CHART_LABEL_SCALE = 0.4
CHART_FALLBACK_COLOR = "#FF6B6B"

# ── Quick action colors / texts ────────────────────────────────────────────────
QUICK_ADD_LABEL_COLOR = "#FFD54F"
ACTION_LABEL_COLOR = "#FFFFFF"
PLACEHOLDER_LABEL = "Thêm"
PLACEHOLDER_LABEL_COLOR = "#9FB3FF"
HINT_EMPTY = "Chạm để thêm tác vụ"
HINT_CONFIGURED = "Nhấn giữ widget để chỉnh"

COLOR_BAR_ALPHA = 0.7

# ── Category colors ────────────────────────────────────────────────────────────
CATEGORY_COLORS = {
    "Ăn uống":    "#FF8A65",
    "Di chuyển":  "#4ECDC4",
    "Mua sắm":    "#FFC857",
    "Hóa đơn":    "#4ECDC4",
    "Giải trí":   "#FF9800",
    "Y tế":       "#E91E63",
    "Giáo dục":   "#9C27B0",
    "Nhà cửa":    "#795548",
    "Xe cộ":      "#607D8B",
    "Điện thoại": "#3F51B5",
    "Điện":       "#FFEB3B",
    "Nước":       "#2196F3",
    "Lương":      "#4CAF50",
    "Thưởng":     "#8BC34A",
    "Đầu tư":     "#009688",
    "Kinh doanh": "#03A9F4",
    "Khác":       "#FF9800",
}

FALLBACK_PALETTE = [
    "#64B5F6", "#4FC3F7", "#4DD0E1",
    "#4DB6AC", "#81C784", "#AED581",
    "#FFD54F", "#FFB74D", "#E57373",
    "#BA68C8", "#9575CD", "#7986CB",
    "#90A4AE", "#EF5350", "#AB47BC",
    "#7E57C2", "#5C6BC0", "#42A5F5",
    "#29B6F6", "#26C6DA", "#26A69A",
    "#66BB6A", "#9CCC65", "#FFCA28",
    "#FFA726", "#8D6E63", "#78909C",
    "#EC407A", "#F06292", "#A1887F",
]

# ── Pinning ────────────────────────────────────────────────────────────────────
MIN_PIN_PLATFORM_VERSION = 26
DEFAULT_REFRESH_INTERVAL_MS = 30 * 60 * 1000
