"""SQLite key/value metadata scoped to a content item."""

from curator.core.stores.sqlite import SQLiteStore


class SQLiteMetadataStore(SQLiteStore):
    """SQLite-based item metadata storage."""

    db_name = "metadata.db"

    def _init_db(self) -> None:
        """Initialize the database schema."""
        with self._get_connection() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS item_meta (
                    item_id TEXT NOT NULL,
                    meta_key TEXT NOT NULL,
                    meta_value TEXT NOT NULL,
                    PRIMARY KEY (item_id, meta_key)
                );
                """
            )

    def get(self, item_id: str, key: str) -> str | None:
        """Get a metadata value, or None if it isn't set."""
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT meta_value FROM item_meta WHERE item_id = ? AND meta_key = ?",
                (item_id, key),
            ).fetchone()
            return row["meta_value"] if row else None

    def set(self, item_id: str, key: str, value: str) -> None:
        """Set a metadata value, replacing any previous one."""
        with self._get_connection() as conn:
            conn.execute(
                """
                INSERT INTO item_meta (item_id, meta_key, meta_value)
                VALUES (?, ?, ?)
                ON CONFLICT(item_id, meta_key) DO UPDATE SET
                    meta_value = excluded.meta_value
                """,
                (item_id, key, value),
            )

    def delete(self, item_id: str, key: str) -> None:
        """Delete a metadata value. Does nothing if it isn't set."""
        with self._get_connection() as conn:
            conn.execute(
                "DELETE FROM item_meta WHERE item_id = ? AND meta_key = ?",
                (item_id, key),
            )
