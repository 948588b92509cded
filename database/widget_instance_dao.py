from database.db_manager import DatabaseManager


class WidgetInstanceDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def get_all_ids(self) -> list[int]:
        rows = self._db.get_connection().execute(
            "SELECT id FROM widget_instances ORDER BY id"
        ).fetchall()
        return [r["id"] for r in rows]

    def create(self) -> int:
        conn = self._db.get_connection()
        cursor = conn.execute("INSERT INTO widget_instances DEFAULT VALUES")
        conn.commit()
        return cursor.lastrowid

    def delete(self, widget_id: int):
        conn = self._db.get_connection()
        conn.execute("DELETE FROM widget_instances WHERE id = ?", (widget_id,))
        conn.commit()
