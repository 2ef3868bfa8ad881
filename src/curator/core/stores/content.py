"""SQLite content storage for source and curated items."""

import sqlite3
from datetime import datetime

from curator.core.stores.base import ContentItem
from curator.core.stores.sqlite import SQLiteStore

TRASH_STATUS = "trash"


class SQLiteContentStore(SQLiteStore):
    """SQLite-based content storage."""

    db_name = "content.db"

    def _init_db(self) -> None:
        """Initialize the database schema."""
        with self._get_connection() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS items (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    kind TEXT NOT NULL CHECK (kind <> ''),
                    title TEXT NOT NULL,
                    status TEXT NOT NULL,
                    position INTEGER NOT NULL DEFAULT 0,
                    comments_open INTEGER NOT NULL DEFAULT 1,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                );

                CREATE INDEX IF NOT EXISTS idx_items_kind_position ON items(kind, position);
                """
            )

    @staticmethod
    def _to_item(row: sqlite3.Row) -> ContentItem:
        return ContentItem(
            id=str(row["id"]),
            kind=row["kind"],
            title=row["title"],
            status=row["status"],
            position=row["position"],
            comments_open=bool(row["comments_open"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    def create_item(
        self,
        kind: str,
        title: str,
        status: str,
        position: int = 0,
        comments_open: bool = False,
    ) -> str | None:
        """
        Create a content item in a single transaction.

        Args:
            kind: Content kind (e.g. 'post', 'cur-curator')
            title: Item title
            status: Item status (e.g. 'publish', 'draft')
            position: Ordering value, lower sorts first
            comments_open: Whether comments are allowed on the item

        Returns:
            The new item's ID, or None if the record was rejected
        """
        try:
            with self._get_connection() as conn:
                cursor = conn.execute(
                    """
                    INSERT INTO items (kind, title, status, position, comments_open)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (kind, title, status, position, int(comments_open)),
                )
                return str(cursor.lastrowid)
        except sqlite3.IntegrityError:
            return None

    def get_item(self, item_id: str) -> ContentItem | None:
        """Get an item by ID."""
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM items WHERE id = ?", (item_id,)
            ).fetchone()

            if row:
                return self._to_item(row)
            return None

    def get_items(self, kind: str) -> list[ContentItem]:
        """Get all items of a kind, lowest position first."""
        with self._get_connection() as conn:
            rows = conn.execute(
                "SELECT * FROM items WHERE kind = ? ORDER BY position ASC, id ASC",
                (kind,),
            ).fetchall()
            return [self._to_item(row) for row in rows]

    def update_status(self, item_id: str, status: str) -> bool:
        """Set an item's status. Returns False if the item doesn't exist."""
        with self._get_connection() as conn:
            result = conn.execute(
                "UPDATE items SET status = ? WHERE id = ?",
                (status, item_id),
            )
            return result.rowcount > 0

    def delete_item(self, item_id: str, permanent: bool = True) -> bool:
        """
        Delete an item.

        Args:
            item_id: The item identifier
            permanent: Remove the row outright instead of moving it to the trash

        Returns:
            True if the item was deleted, False if it didn't exist
        """
        if not permanent:
            return self.update_status(item_id, TRASH_STATUS)

        with self._get_connection() as conn:
            result = conn.execute("DELETE FROM items WHERE id = ?", (item_id,))
            return result.rowcount > 0

    def query_front_item(self, kind: str) -> ContentItem | None:
        """Get the non-trashed item of a kind with the smallest position."""
        with self._get_connection() as conn:
            row = conn.execute(
                """
                SELECT * FROM items
                WHERE kind = ? AND status <> ?
                ORDER BY position ASC, id ASC
                LIMIT 1
                """,
                (kind, TRASH_STATUS),
            ).fetchone()

            if row:
                return self._to_item(row)
            return None
