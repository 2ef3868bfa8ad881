"""Create and tear down curated shadow items for source content."""

import logging
import threading
from dataclasses import dataclass, field

from curator.core.modules import ModuleRegistry
from curator.core.stores.base import ContentStore, MetadataStore, TaxonomyStore, Term

logger = logging.getLogger(__name__)

CURATED_KIND = "cur-curator"
TAXONOMY_SCOPE = "cur-tax-curator"
RELATED_META_KEY = "_curator_related_id"


@dataclass
class CurationResult:
    """Result of curating a source item."""

    success: bool
    source_item_id: str
    curated_item_id: str | None = None
    position: int | None = None
    errors: list[str] = field(default_factory=list)


class CurationEngine:
    """
    Pairs source items with curated shadow items.

    A pair is two content records joined by a metadata link on each side
    under RELATED_META_KEY, plus the module's classification term on the
    source item. Curated items are ordered by position, lowest first; each
    new one is placed ahead of the current front item.
    """

    def __init__(
        self,
        registry: ModuleRegistry,
        content_store: ContentStore,
        taxonomy_store: TaxonomyStore,
        metadata_store: MetadataStore,
    ):
        """
        Initialize the engine.

        Args:
            registry: Configured module registry
            content_store: Store holding source and curated items
            taxonomy_store: Store holding classification terms
            metadata_store: Store holding per-item relationship links
        """
        self.registry = registry
        self.content_store = content_store
        self.taxonomy_store = taxonomy_store
        self.metadata_store = metadata_store
        # Guards the front-position read and the insert that depends on it
        self._front_lock = threading.Lock()

    def _failure(self, source_item_id: str, message: str) -> CurationResult:
        logger.warning("Not curating %s: %s", source_item_id, message)
        return CurationResult(success=False, source_item_id=source_item_id, errors=[message])

    def _module_term(self, module_id: str) -> Term | None:
        label = self.registry.get_classification_label(module_id)
        if label is None:
            return None
        return self.taxonomy_store.find_term_by_label(label, TAXONOMY_SCOPE)

    def _next_front_position(self) -> int:
        front = self.content_store.query_front_item(CURATED_KIND)
        if front is None:
            return 0
        # Never step below zero; items at zero share the front
        if front.position > 0:
            return front.position - 1
        return 0

    def setup_default_terms(self) -> list[Term]:
        """Create the classification term of every enabled module that lacks one."""
        created = self.taxonomy_store.ensure_default_terms(
            self.registry.enabled_modules(), TAXONOMY_SCOPE
        )
        for term in created:
            logger.info("Created classification term %s", term.label)
        return created

    def create(self, source_item_id: str, source_item_title: str, module_id: str) -> CurationResult:
        """
        Curate a source item.

        Nothing is written unless the module is enabled and active, its term
        exists, and the source item isn't already curated. Store errors raised after
        the curated item exists propagate without rollback.

        Args:
            source_item_id: ID of the item being curated
            source_item_title: Title copied onto the curated item
            module_id: Module whose classification term marks the source item

        Returns:
            CurationResult with the curated item's ID and position on success
        """
        if self.registry.get_classification_label(module_id) is None:
            return self._failure(source_item_id, f"module '{module_id}' is unknown or disabled")

        active_module = self.registry.get_active_module()
        if module_id != active_module:
            return self._failure(
                source_item_id,
                f"module '{module_id}' is not the active module '{active_module}'",
            )

        term = self._module_term(module_id)
        if term is None:
            return self._failure(
                source_item_id,
                f"classification term for module '{module_id}' does not exist",
            )

        existing = self.get_related_id(source_item_id)
        if existing is not None:
            return self._failure(source_item_id, f"already curated as {existing}")

        with self._front_lock:
            position = self._next_front_position()
            curated_item_id = self.content_store.create_item(
                kind=CURATED_KIND,
                title=source_item_title,
                status=self.registry.get_default_status(),
                position=position,
                comments_open=False,
            )

        if not curated_item_id:
            return self._failure(source_item_id, "content store rejected the curated item")

        self.taxonomy_store.assign_term(source_item_id, term.id, TAXONOMY_SCOPE)
        self.metadata_store.set(curated_item_id, RELATED_META_KEY, source_item_id)
        self.metadata_store.set(source_item_id, RELATED_META_KEY, curated_item_id)

        logger.info(
            "Curated %s as %s at position %d (%s)",
            source_item_id,
            curated_item_id,
            position,
            module_id,
        )
        return CurationResult(
            success=True,
            source_item_id=source_item_id,
            curated_item_id=curated_item_id,
            position=position,
        )

    def remove(self, source_item_id: str) -> None:
        """
        Stop curating a source item.

        Strips the active module's term, drops both relationship links and
        permanently deletes the curated item. Safe to call for an item that
        isn't curated. Only the active module's term is stripped, which is
        why create() refuses every other module.

        Given a curated item's ID instead of a source ID, nothing is changed.

        Args:
            source_item_id: ID of the curated source item
        """
        item = self.content_store.get_item(source_item_id)
        if item is not None and item.kind == CURATED_KIND:
            logger.warning("Not removing %s: it is a curated item, not a source", source_item_id)
            return

        curated_item_id = self.get_related_id(source_item_id)
        curated_item = None
        if curated_item_id:
            curated_item = self.content_store.get_item(curated_item_id)
            if curated_item is not None and curated_item.kind != CURATED_KIND:
                logger.warning(
                    "Not removing %s: its related item %s is not a curated item",
                    source_item_id,
                    curated_item_id,
                )
                return

        term = self._module_term(self.registry.get_active_module())
        if term is not None:
            self.taxonomy_store.remove_term(source_item_id, term.id, TAXONOMY_SCOPE)
        else:
            logger.warning(
                "No classification term for active module '%s'; leaving terms on %s",
                self.registry.get_active_module(),
                source_item_id,
            )

        self.metadata_store.delete(source_item_id, RELATED_META_KEY)

        if curated_item_id:
            self.metadata_store.delete(curated_item_id, RELATED_META_KEY)
            if curated_item is not None:
                self.content_store.delete_item(curated_item_id, permanent=True)
            logger.info("Removed curated item %s for %s", curated_item_id, source_item_id)

    def get_related_id(self, item_id: str) -> str | None:
        """Get the other side of a pair, from either a source or a curated item."""
        return self.metadata_store.get(item_id, RELATED_META_KEY) or None

    def is_module_enabled(self, module_id: str) -> bool:
        return self.registry.is_enabled(module_id)

    def get_module_classification_label(self, module_id: str) -> str | None:
        return self.registry.get_classification_label(module_id)


def format_curation_result(result: CurationResult) -> str:
    """Format a curation result as readable text."""
    if result.success:
        return (
            f"Curated '{result.source_item_id}' as '{result.curated_item_id}' "
            f"(position {result.position})"
        )
    else:
        error_list = "\n  - ".join(result.errors)
        return f"Curation failed for '{result.source_item_id}':\n  - {error_list}"
