"""
Dataset loader - read the FAQ intents file.

The file is a JSON object with a top-level "intents" array. Nothing beyond
that shape is validated; a malformed file aborts the run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pal_knowledge_seeder.core import DatasetLoadError, SourceIntent

logger = logging.getLogger(__name__)


def load_dataset(path: Path | str) -> list[SourceIntent]:
    """
    Parse an intents file into SourceIntent objects.

    Raises:
        DatasetLoadError: if the file is missing, is not valid JSON, or
            does not contain an "intents" list.
    """
    path = Path(path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetLoadError(f"Failed to read {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("intents"), list):
        raise DatasetLoadError(f"{path} has no 'intents' array")

    try:
        intents = [SourceIntent.from_dict(raw) for raw in data["intents"]]
    except (KeyError, TypeError, AttributeError) as e:
        raise DatasetLoadError(f"Malformed intent entry in {path}: {e}") from e

    logger.info(f"Loaded {path.name} with {len(intents)} intents")
    return intents
