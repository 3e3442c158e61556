"""Pantry database for loading on-hand item names from JSON."""
import json
import logging
from pathlib import Path
from typing import List

from pantrymatch.data_layer.validation import parse_pantry_names

logger = logging.getLogger(__name__)


class PantryDB:
    """Read-only view of the household pantry loaded from JSON.

    The file holds either ``{"items": [{"name": "Garlic", ...}, ...]}`` or a
    bare list of names/objects. Only names matter for matching.
    """

    def __init__(self, json_path: str):
        self.json_path = Path(json_path)
        with open(self.json_path, "r") as f:
            data = json.load(f)
        self._names = parse_pantry_names(data)
        logger.debug("Loaded %d pantry items from %s", len(self._names), self.json_path)

    def get_pantry_names(self) -> List[str]:
        """Get the names of all pantry items, in file order."""
        return self._names.copy()

    def __len__(self) -> int:
        return len(self._names)
