"""Curation modules and their registry."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

DEFAULT_STATUS = "publish"
DEFAULT_ACTIVE_MODULE = "curator"


@dataclass
class Module:
    """A curation behaviour tied to a classification label."""

    id: str
    classification_label: str
    display_label: str
    enabled: bool = False


def default_modules() -> dict[str, Module]:
    """The module set every registry starts from."""
    return {
        "curator": Module(
            id="curator",
            classification_label="cur-curated-item",
            display_label="Curate Item",
            enabled=True,
        ),
        "featurer": Module(
            id="featurer",
            classification_label="cur-featured-item",
            display_label="Feature Item",
            enabled=False,
        ),
        "pinner": Module(
            id="pinner",
            classification_label="cur-pinned-item",
            display_label="Pin Item",
            enabled=False,
        ),
    }


def _parse_module(module_id: str, data: Any) -> Module:
    """Parse a module override from dict. Anything else is a disabled, unlabelled module."""
    if isinstance(data, Module):
        return replace(data, id=module_id)
    if not isinstance(data, Mapping):
        data = {}
    return Module(
        id=module_id,
        classification_label=data.get("classification_label") or "",
        display_label=data.get("display_label") or module_id.replace("-", " ").title(),
        enabled=data.get("enabled", False) is True,
    )


def _parse_content_kinds(data: Any) -> list[str]:
    """Parse eligible content kinds; a single kind may be given on its own."""
    if not data:
        return []
    if isinstance(data, str) or not isinstance(data, Iterable):
        data = [data]
    return list(dict.fromkeys(str(kind) for kind in data))


class ModuleRegistry:
    """
    Holds the curation modules, the content kinds curation may operate on,
    and the status given to newly created curated items.

    Build one at startup, call configure() once with any overrides, then
    hand it to the CurationEngine.
    """

    def __init__(self) -> None:
        self._modules = default_modules()
        self._content_kinds: list[str] = []
        self._default_status = DEFAULT_STATUS
        self._active_module = DEFAULT_ACTIVE_MODULE

    def configure(self, overrides: dict[str, Any]) -> None:
        """
        Apply settings overrides. Keys that are absent keep their current value.

        Args:
            overrides: Plain mapping with any of 'modules', 'content_kinds',
                'default_status' and 'active_module'
        """
        if "modules" in overrides:
            modules = overrides["modules"]
            if not isinstance(modules, Mapping):
                modules = {}
            self._modules = {
                str(module_id): _parse_module(str(module_id), data)
                for module_id, data in modules.items()
            }
        if "content_kinds" in overrides:
            self._content_kinds = _parse_content_kinds(overrides["content_kinds"])
        if "default_status" in overrides:
            self._default_status = overrides["default_status"]
        if "active_module" in overrides:
            self._active_module = overrides["active_module"]

    def get_modules(self) -> dict[str, Module]:
        """Get all modules, in the order they were defined."""
        return dict(self._modules)

    def get_module(self, module_id: str) -> Module | None:
        return self._modules.get(module_id)

    def enabled_modules(self) -> list[Module]:
        return [m for m in self._modules.values() if m.enabled is True]

    def is_enabled(self, module_id: str) -> bool:
        """Check whether a module exists and is switched on."""
        module = self._modules.get(module_id)
        return module is not None and module.enabled is True

    def get_classification_label(self, module_id: str) -> str | None:
        """
        Get the taxonomy label a module classifies items with.

        Returns:
            The label, or None if the module is unknown, disabled, or has no label
        """
        if not self.is_enabled(module_id):
            return None
        return self._modules[module_id].classification_label or None

    def get_eligible_content_kinds(self) -> list[str]:
        return list(self._content_kinds)

    def is_eligible_kind(self, kind: str) -> bool:
        return kind in self._content_kinds

    def get_default_status(self) -> str:
        return self._default_status

    def get_active_module(self) -> str:
        return self._active_module

