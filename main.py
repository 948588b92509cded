import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.snapshot_dao import SnapshotDAO
from database.widget_instance_dao import WidgetInstanceDAO

from services.pin_service import PinService
from services.widget_composer import WidgetComposer
from services.widget_service import WidgetService

from ui.app_window import AppWindow
from utils.app_config import get_db_folder, get_density, get_option, load_config
from utils.logger import setup_logger


def main():
    # ── Bootstrap: read pre-DB config ────────────────────────────────────────
    config = load_config()
    setup_logger(get_option("log_level", config))

    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager.open_in_folder(db_folder=get_db_folder())

    # ── DAOs ─────────────────────────────────────────────────────────────────
    snapshot_dao = SnapshotDAO(db)
    instance_dao = WidgetInstanceDAO(db)

    # ── Services ─────────────────────────────────────────────────────────────
    composer = WidgetComposer(density=get_density(config))
    widget_svc = WidgetService(snapshot_dao, instance_dao, composer)
    pin_svc = PinService(
        instance_dao,
        platform_version=int(get_option("platform_version", config)),
        pin_supported=bool(get_option("pin_supported", config)),
    )

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode("dark")
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        widget_service=widget_svc,
        pin_service=pin_svc,
        refresh_interval_ms=int(get_option("refresh_interval_ms", config)),
    )

    def on_close():
        db.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
