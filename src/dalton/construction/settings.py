"""Settings save/load for JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dalton.model import Settings

logger = logging.getLogger(__name__)


def save_settings(path: str | Path, settings: Settings) -> None:
    """Save *settings* to a JSON file.

    Only non-default fields are written.  The file is human-readable
    with two-space indentation.

    Args:
        path: Destination file path.
        settings: The settings to save.
    """
    Path(path).write_text(json.dumps(settings.to_dict(), indent=2) + "\n")
    logger.debug(f"Saved settings to {path}")


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON file.

    Every key is optional; missing keys take their defaults.

    Args:
        path: Source file path.

    Returns:
        The parsed :class:`Settings`.

    Raises:
        ValueError: If the file is not a JSON object, contains unknown
            keys, or holds an invalid value.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"settings file must contain a JSON object, got {type(data).__name__}"
        )
    settings = Settings.from_dict(data)
    logger.debug(f"Loaded settings from {path}")
    return settings
