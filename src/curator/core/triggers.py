"""Map content status transitions onto curation create/remove calls."""

import logging

from curator.core.engine import CURATED_KIND, CurationEngine, CurationResult
from curator.core.stores.base import ContentItem

logger = logging.getLogger(__name__)


def handle_transition(
    engine: CurationEngine,
    item: ContentItem,
    old_status: str,
    new_status: str,
    module_id: str | None = None,
) -> CurationResult | None:
    """
    React to a content item changing status.

    An eligible item entering the registry's default status gets curated;
    one leaving it gets uncurated. Curated items themselves and kinds the
    registry doesn't list are ignored.

    Args:
        engine: The curation engine
        item: The item whose status changed
        old_status: Status before the change
        new_status: Status after the change
        module_id: Module to curate with. Defaults to the active module

    Returns:
        The CurationResult when the item was curated, otherwise None
    """
    registry = engine.registry

    if item.kind == CURATED_KIND or not registry.is_eligible_kind(item.kind):
        return None
    if old_status == new_status:
        return None

    curated_status = registry.get_default_status()

    if new_status == curated_status:
        logger.debug("%s entered '%s', curating", item.id, new_status)
        return engine.create(item.id, item.title, module_id or registry.get_active_module())

    if old_status == curated_status:
        logger.debug("%s left '%s', removing curation", item.id, old_status)
        engine.remove(item.id)

    return None
