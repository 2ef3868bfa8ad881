"""Records and interfaces for the stores the curation engine talks to."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Protocol

from curator.core.modules import Module


@dataclass
class ContentItem:
    """A content record from the content store."""

    id: str
    kind: str
    title: str
    status: str
    position: int
    comments_open: bool
    created_at: datetime


@dataclass
class Term:
    """A classification term from the taxonomy store."""

    id: str
    label: str
    scope: str


class ContentStore(Protocol):
    def create_item(
        self,
        kind: str,
        title: str,
        status: str,
        position: int = 0,
        comments_open: bool = False,
    ) -> str | None: ...

    def get_item(self, item_id: str) -> ContentItem | None: ...

    def update_status(self, item_id: str, status: str) -> bool: ...

    def delete_item(self, item_id: str, permanent: bool = True) -> bool: ...

    def query_front_item(self, kind: str) -> ContentItem | None: ...


class TaxonomyStore(Protocol):
    def find_term_by_label(self, label: str, scope: str) -> Term | None: ...

    def assign_term(self, item_id: str, term_id: str, scope: str) -> None: ...

    def remove_term(self, item_id: str, term_id: str, scope: str) -> None: ...

    def ensure_default_terms(self, modules: Iterable[Module], scope: str) -> list[Term]: ...


class MetadataStore(Protocol):
    def get(self, item_id: str, key: str) -> str | None: ...

    def set(self, item_id: str, key: str, value: str) -> None: ...

    def delete(self, item_id: str, key: str) -> None: ...
