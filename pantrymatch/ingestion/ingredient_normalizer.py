"""Ingredient name normalization for pantry matching.

Recipe ingredients and pantry items are free-form text typed by different
people ("Garlic cloves", "garlic", "Tomato-Sauce"). Both sides are reduced to
a comparison key before matching:

- Convert to lowercase
- Drop every character that is not an ASCII letter or digit

Keys are then compared with bidirectional substring containment, so
"garliccloves" matches "garlic" and "tomato" matches "tomatosauce".

DESIGN DECISIONS:
- No tokenization or descriptor stripping; containment alone decides a match
- An empty key ("", "!!!", "  ") is a substring of every key, so it overlaps anything
"""

import re
from typing import Iterable, List

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_ingredient(name: str) -> str:
    """Return the comparison key for an ingredient or pantry name.

    Args:
        name: Raw name, e.g. "Chicken Breast (boneless)"

    Returns:
        Lowercase key with only ASCII letters and digits, e.g. "chickenbreastboneless"
    """
    return _NON_ALNUM.sub("", name.lower())


def normalize_all(names: Iterable[str]) -> List[str]:
    """Normalize a sequence of names, preserving order."""
    return [normalize_ingredient(name) for name in names]


def names_overlap(first: str, second: str) -> bool:
    """Check whether either key contains the other.

    Args:
        first: A normalized key (or lowercased label)
        second: Another normalized key (or lowercased label)

    Returns:
        True if one key is a substring of the other
    """
    return first in second or second in first
