"""Curator: paired curated items for source content."""

__version__ = "0.1.0"
