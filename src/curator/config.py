"""YAML settings for the module registry."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from curator.core.modules import ModuleRegistry

logger = logging.getLogger(__name__)

SETTINGS_KEYS = ("modules", "content_kinds", "default_status", "active_module")


def load_settings(path: Path) -> dict[str, Any]:
    """
    Load registry overrides from a YAML file.

    Expected structure (every key optional):
        modules:
          curator:
            classification_label: cur-curated-item
            display_label: Curate Item
            enabled: true
        content_kinds: [post, page]
        default_status: publish
        active_module: curator

    Args:
        path: Path to the settings file

    Returns:
        Overrides mapping for ModuleRegistry.configure
    """
    if not path.exists():
        raise FileNotFoundError(f"settings file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    unknown = sorted(set(data) - set(SETTINGS_KEYS))
    if unknown:
        logger.warning("Ignoring unknown settings in %s: %s", path, ", ".join(unknown))

    return {key: data[key] for key in SETTINGS_KEYS if key in data}


def build_registry(path: Path | None = None) -> ModuleRegistry:
    """
    Build a registry, applying settings from a file if one is given.

    Falls back to the CURATOR_CONFIG environment variable when no path is given.
    """
    registry = ModuleRegistry()

    if path is None and os.environ.get("CURATOR_CONFIG"):
        path = Path(os.environ["CURATOR_CONFIG"])

    if path is not None:
        registry.configure(load_settings(path))

    return registry


def generate_settings_template(path: Path) -> None:
    """
    Write a settings file holding the default configuration.

    Args:
        path: Where to write the file
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    template = """\
# Curation modules. Only enabled modules can classify items.
modules:
  curator:
    classification_label: cur-curated-item
    display_label: Curate Item
    enabled: true
  featurer:
    classification_label: cur-featured-item
    display_label: Feature Item
    enabled: false
  pinner:
    classification_label: cur-pinned-item
    display_label: Pin Item
    enabled: false

# Content kinds that get curated when they enter the default status
content_kinds: []

# Status given to new curated items
default_status: publish

# Module whose term is stripped when an item stops being curated
active_module: curator
"""
    with open(path, "w") as f:
        f.write(template)
