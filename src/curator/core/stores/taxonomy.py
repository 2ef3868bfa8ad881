"""Taxonomy store for classification terms and their assignments to items."""

from typing import Iterable

from curator.core.modules import Module
from curator.core.stores.base import Term
from curator.core.stores.sqlite import SQLiteStore


class SQLiteTaxonomyStore(SQLiteStore):
    """SQLite-based taxonomy store."""

    db_name = "taxonomy.db"

    def _init_db(self) -> None:
        """Initialize the database schema."""
        with self._get_connection() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS terms (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    label TEXT NOT NULL,
                    scope TEXT NOT NULL,
                    UNIQUE(label, scope)
                );

                CREATE TABLE IF NOT EXISTS term_assignments (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    item_id TEXT NOT NULL,
                    term_id INTEGER NOT NULL REFERENCES terms(id) ON DELETE CASCADE,
                    scope TEXT NOT NULL,
                    UNIQUE(item_id, term_id)
                );

                CREATE INDEX IF NOT EXISTS idx_assignments_item ON term_assignments(item_id, scope);
                CREATE INDEX IF NOT EXISTS idx_assignments_term ON term_assignments(term_id);
                """
            )

    def insert_term(self, label: str, scope: str) -> Term:
        """
        Add a term, or return the existing one with the same label.

        Args:
            label: Term label (slug form)
            scope: Taxonomy the term belongs to

        Returns:
            The created or existing Term
        """
        with self._get_connection() as conn:
            conn.execute(
                """
                INSERT INTO terms (label, scope)
                VALUES (?, ?)
                ON CONFLICT(label, scope) DO NOTHING
                """,
                (label, scope),
            )

        return self.find_term_by_label(label, scope)  # type: ignore

    def find_term_by_label(self, label: str, scope: str) -> Term | None:
        """Get a term by its label within a taxonomy."""
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM terms WHERE label = ? AND scope = ?",
                (label, scope),
            ).fetchone()

            if not row:
                return None

            return Term(id=str(row["id"]), label=row["label"], scope=row["scope"])

    def get_terms(self, scope: str) -> list[Term]:
        """Get all terms in a taxonomy."""
        with self._get_connection() as conn:
            rows = conn.execute(
                "SELECT * FROM terms WHERE scope = ? ORDER BY label",
                (scope,),
            ).fetchall()

            return [
                Term(id=str(row["id"]), label=row["label"], scope=row["scope"])
                for row in rows
            ]

    def assign_term(self, item_id: str, term_id: str, scope: str) -> None:
        """
        Attach a term to an item, keeping any terms it already has.

        Args:
            item_id: The content item ID
            term_id: The term ID
            scope: Taxonomy the term belongs to
        """
        with self._get_connection() as conn:
            conn.execute(
                """
                INSERT INTO term_assignments (item_id, term_id, scope)
                VALUES (?, ?, ?)
                ON CONFLICT(item_id, term_id) DO NOTHING
                """,
                (item_id, int(term_id), scope),
            )

    def remove_term(self, item_id: str, term_id: str, scope: str) -> None:
        """Detach a term from an item. Does nothing if it isn't attached."""
        with self._get_connection() as conn:
            conn.execute(
                """
                DELETE FROM term_assignments
                WHERE item_id = ? AND term_id = ? AND scope = ?
                """,
                (item_id, int(term_id), scope),
            )

    def get_item_terms(self, item_id: str, scope: str) -> list[Term]:
        """Get all terms attached to an item within a taxonomy."""
        with self._get_connection() as conn:
            rows = conn.execute(
                """
                SELECT t.*
                FROM terms t
                JOIN term_assignments a ON t.id = a.term_id
                WHERE a.item_id = ? AND a.scope = ?
                ORDER BY t.label
                """,
                (item_id, scope),
            ).fetchall()

            return [
                Term(id=str(row["id"]), label=row["label"], scope=row["scope"])
                for row in rows
            ]

    def ensure_default_terms(self, modules: Iterable[Module], scope: str) -> list[Term]:
        """
        Make sure every enabled module has its classification term.

        Args:
            modules: Modules to provision terms for
            scope: Taxonomy to create the terms in

        Returns:
            Terms that were created by this call
        """
        created = []
        for module in modules:
            if not module.enabled or not module.classification_label:
                continue
            if self.find_term_by_label(module.classification_label, scope) is None:
                created.append(self.insert_term(module.classification_label, scope))
        return created
