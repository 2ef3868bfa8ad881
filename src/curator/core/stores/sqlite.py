"""Shared SQLite connection handling for the stores."""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class SQLiteStore:
    """Base for stores kept in a single SQLite file."""

    db_name = "curator.db"

    def __init__(self, storage_path: str | Path | None = None):
        """
        Initialize the store.

        Args:
            storage_path: Path to the database file. Defaults to CURATOR_STORAGE_PATH/<db_name>
        """
        if storage_path is None:
            base_path = os.environ.get("CURATOR_STORAGE_PATH", "./storage")
            storage_path = Path(base_path) / self.db_name
        else:
            storage_path = Path(storage_path)

        storage_path.parent.mkdir(parents=True, exist_ok=True)
        self.db_path = storage_path
        self._init_db()

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """Get a database connection with row factory."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _init_db(self) -> None:
        raise NotImplementedError
