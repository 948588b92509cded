from database.db_manager import DatabaseManager
from utils.constants import SNAPSHOT_KEYS


class SnapshotDAO:
    """Read side of the widget data channel. The main app owns the writes."""

    def __init__(self, db: DatabaseManager):
        self._db = db

    def read(self) -> dict[str, str | None]:
        """Every snapshot key that is present, read as one unit."""
        return self._db.get_values(SNAPSHOT_KEYS)
