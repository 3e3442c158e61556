"""Ingestion layer for preparing raw ingredient text for matching."""

from pantrymatch.ingestion.ingredient_normalizer import (
    normalize_ingredient,
    normalize_all,
    names_overlap,
)

__all__ = [
    "normalize_ingredient",
    "normalize_all",
    "names_overlap",
]
