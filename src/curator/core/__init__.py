"""Core: module registry, curation engine, and stores."""

from curator.core.engine import (
    CURATED_KIND,
    RELATED_META_KEY,
    TAXONOMY_SCOPE,
    CurationEngine,
    CurationResult,
    format_curation_result,
)
from curator.core.modules import Module, ModuleRegistry, default_modules
from curator.core.triggers import handle_transition

__all__ = [
    "CURATED_KIND",
    "RELATED_META_KEY",
    "TAXONOMY_SCOPE",
    "CurationEngine",
    "CurationResult",
    "Module",
    "ModuleRegistry",
    "default_modules",
    "format_curation_result",
    "handle_transition",
]
