"""Scoring module for recipe match evaluation."""

from .match_scorer import (
    RecipeMatcher,
    MatchWeights,
    MatchBreakdown,
    MatchTier,
    RankedRecipe,
    score_match,
    explain_match,
    classify_score,
)

__all__ = [
    "RecipeMatcher",
    "MatchWeights",
    "MatchBreakdown",
    "MatchTier",
    "RankedRecipe",
    "score_match",
    "explain_match",
    "classify_score",
]
