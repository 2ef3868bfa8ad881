"""Stores: content items, taxonomy terms, and item metadata."""

from curator.core.stores.base import (
    ContentItem,
    ContentStore,
    MetadataStore,
    TaxonomyStore,
    Term,
)
from curator.core.stores.content import SQLiteContentStore
from curator.core.stores.metadata import SQLiteMetadataStore
from curator.core.stores.sqlite import SQLiteStore
from curator.core.stores.taxonomy import SQLiteTaxonomyStore

__all__ = [
    "ContentItem",
    "ContentStore",
    "MetadataStore",
    "SQLiteContentStore",
    "SQLiteMetadataStore",
    "SQLiteStore",
    "SQLiteTaxonomyStore",
    "TaxonomyStore",
    "Term",
]
