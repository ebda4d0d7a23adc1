"""Construction: file parsing and settings persistence."""

from dalton.construction.parser import parse_catalog, parse_dataset
from dalton.construction.settings import load_settings, save_settings

__all__ = [
    "load_settings",
    "parse_catalog",
    "parse_dataset",
    "save_settings",
]
