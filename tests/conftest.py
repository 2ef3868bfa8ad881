"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from curator.core import CurationEngine, ModuleRegistry
from curator.core.stores import (
    SQLiteContentStore,
    SQLiteMetadataStore,
    SQLiteTaxonomyStore,
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test storage."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def content_store(temp_dir):
    """Create a content store in a temporary directory."""
    return SQLiteContentStore(storage_path=temp_dir / "content.db")


@pytest.fixture
def taxonomy_store(temp_dir):
    """Create a taxonomy store in a temporary directory."""
    return SQLiteTaxonomyStore(storage_path=temp_dir / "taxonomy.db")


@pytest.fixture
def metadata_store(temp_dir):
    """Create a metadata store in a temporary directory."""
    return SQLiteMetadataStore(storage_path=temp_dir / "metadata.db")


@pytest.fixture
def registry():
    """A registry that curates posts and pages."""
    registry = ModuleRegistry()
    registry.configure({"content_kinds": ["post", "page"]})
    return registry


@pytest.fixture
def engine(registry, content_store, taxonomy_store, metadata_store):
    """An engine with its default terms provisioned."""
    engine = CurationEngine(
        registry=registry,
        content_store=content_store,
        taxonomy_store=taxonomy_store,
        metadata_store=metadata_store,
    )
    engine.setup_default_terms()
    return engine


@pytest.fixture
def source_post(content_store):
    """A published source post."""
    item_id = content_store.create_item(
        kind="post", title="Hello World", status="publish", comments_open=True
    )
    return content_store.get_item(item_id)
