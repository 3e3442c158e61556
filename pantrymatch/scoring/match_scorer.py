"""Recipe match scoring against pantry contents and user preferences."""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from pantrymatch.data_layer.models import Recipe, UserPreferences
from pantrymatch.ingestion.ingredient_normalizer import (
    normalize_ingredient,
    normalize_all,
    names_overlap,
)

logger = logging.getLogger(__name__)

TIER_GREAT = "Great"
TIER_GOOD = "Good"
TIER_LOW = "Low"


@dataclass
class MatchWeights:
    """Point split and thresholds used by the match scorer."""
    inventory: int = 70       # pantry coverage
    preference: int = 15      # cuisine / dietary alignment
    constraint: int = 15      # time + calorie budget, half each
    overage_multiplier: float = 1.25  # half credit up to 25% over a limit
    great_threshold: int = 80
    good_threshold: int = 50

    def __post_init__(self):
        """Validate weights sum to 100 and thresholds are ordered."""
        weights = [self.inventory, self.preference, self.constraint]
        if any(w < 0 for w in weights):
            raise ValueError("All match weights must be non-negative")

        total = sum(weights)
        if abs(total - 100) > 0.001:
            raise ValueError(f"Match weights must sum to 100, got {total}")

        if self.overage_multiplier < 1.0:
            raise ValueError(
                f"Overage multiplier must be at least 1.0, got {self.overage_multiplier}"
            )

        if self.good_threshold > self.great_threshold:
            raise ValueError(
                "Good threshold must not exceed great threshold "
                f"({self.good_threshold} > {self.great_threshold})"
            )


@dataclass
class InventoryBreakdown:
    """Pantry coverage part of a match explanation."""
    score: int
    max_score: int
    matched_count: int
    total_ingredient_count: int
    matched_items: List[str] = field(default_factory=list)  # original spelling, input order


@dataclass
class DietaryBreakdown:
    """Cuisine / dietary part of a match explanation."""
    score: int
    max_score: int
    matched: bool


@dataclass
class TimeCalorieBreakdown:
    """Time and calorie budget part of a match explanation."""
    score: float
    max_score: int
    time_ok: bool
    calories_ok: bool


@dataclass
class MatchBreakdown:
    """Full explanation of a recipe's match score."""
    total: int
    inventory: InventoryBreakdown
    dietary: DietaryBreakdown
    time_calorie: TimeCalorieBreakdown


@dataclass
class MatchTier:
    """Presentation band for a match score."""
    tier: str   # "Great", "Good" or "Low"
    label: str  # e.g. "Great Match"


@dataclass
class RankedRecipe:
    """A recipe paired with its match score and tier."""
    recipe: Recipe
    score: int
    tier: MatchTier


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (52.5 -> 53).

    Python's round() rounds halves to even, which would give 52.
    """
    return int(math.floor(value + 0.5))


class RecipeMatcher:
    """Scores how well a recipe fits a pantry and a set of preferences.

    All methods are pure: inputs are never modified and identical inputs
    always produce identical outputs.
    """

    def __init__(self, weights: Optional[MatchWeights] = None):
        """Initialize recipe matcher.

        Args:
            weights: Optional custom point split and tier thresholds
        """
        self.weights = weights or MatchWeights()

    def score_match(self,
                    recipe: Recipe,
                    pantry_names: Sequence[str],
                    preferences: Optional[UserPreferences] = None) -> int:
        """Score a recipe against the pantry and preferences.

        Args:
            recipe: Recipe to score
            pantry_names: Names of items currently on hand
            preferences: User preferences (defaults to no preferences)

        Returns:
            Integer match score from 0 to 100
        """
        preferences = preferences or UserPreferences()

        inventory_score = self._score_inventory(recipe.ingredients or [], pantry_names or [])
        dietary_score = self._score_preferences(
            recipe.cuisine or "",
            preferences.dietary_preferences or [],
            preferences.cuisine_preferences or [],
        )
        time_calorie_score = self._score_constraints(
            recipe.time or 0,
            recipe.calories or 0,
            preferences.max_cook_time,
            preferences.max_calories,
        )

        return self._aggregate(inventory_score, dietary_score, time_calorie_score)

    def explain_match(self,
                      recipe: Recipe,
                      pantry_names: Sequence[str],
                      preferences: Optional[UserPreferences] = None) -> MatchBreakdown:
        """Build a per-dimension explanation of a recipe's match score.

        Computed independently of score_match; the total is always equal to
        what score_match returns for the same inputs.

        Args:
            recipe: Recipe to explain
            pantry_names: Names of items currently on hand
            preferences: User preferences (defaults to no preferences)

        Returns:
            MatchBreakdown with inventory, dietary and time/calorie parts
        """
        preferences = preferences or UserPreferences()
        ingredients = recipe.ingredients or []
        time = recipe.time or 0
        calories = recipe.calories or 0

        inventory_score = self._score_inventory(ingredients, pantry_names or [])
        dietary_score = self._score_preferences(
            recipe.cuisine or "",
            preferences.dietary_preferences or [],
            preferences.cuisine_preferences or [],
        )
        time_calorie_score = self._score_constraints(
            time, calories, preferences.max_cook_time, preferences.max_calories
        )

        matched_items = self._matched_ingredients(ingredients, pantry_names or [])

        return MatchBreakdown(
            total=self._aggregate(inventory_score, dietary_score, time_calorie_score),
            inventory=InventoryBreakdown(
                score=inventory_score,
                max_score=self.weights.inventory,
                matched_count=len(matched_items),
                total_ingredient_count=len(ingredients),
                matched_items=matched_items,
            ),
            dietary=DietaryBreakdown(
                score=dietary_score,
                max_score=self.weights.preference,
                matched=dietary_score == self.weights.preference,
            ),
            time_calorie=TimeCalorieBreakdown(
                score=time_calorie_score,
                max_score=self.weights.constraint,
                time_ok=self._within_limit(time, preferences.max_cook_time),
                calories_ok=self._within_limit(calories, preferences.max_calories),
            ),
        )

    def classify_score(self, score: float) -> MatchTier:
        """Map a match score to its presentation band.

        Args:
            score: Match score from 0 to 100

        Returns:
            MatchTier ("Great" at or above the great threshold, "Good" at or
            above the good threshold, otherwise "Low")
        """
        if score >= self.weights.great_threshold:
            tier = TIER_GREAT
        elif score >= self.weights.good_threshold:
            tier = TIER_GOOD
        else:
            tier = TIER_LOW
        return MatchTier(tier=tier, label=f"{tier} Match")

    def rank_recipes(self,
                     recipes: Sequence[Recipe],
                     pantry_names: Sequence[str],
                     preferences: Optional[UserPreferences] = None,
                     min_score: Optional[int] = None,
                     limit: Optional[int] = None) -> List[RankedRecipe]:
        """Score and order a recipe catalogue, best match first.

        Args:
            recipes: Recipes to rank
            pantry_names: Names of items currently on hand
            preferences: User preferences (defaults to no preferences)
            min_score: Optional inclusive lower bound on the match score
            limit: Optional maximum number of results

        Returns:
            RankedRecipe list sorted by score descending; ties keep input order
        """
        ranked = []
        for recipe in recipes:
            score = self.score_match(recipe, pantry_names, preferences)
            if min_score is not None and score < min_score:
                continue
            ranked.append(RankedRecipe(recipe=recipe, score=score, tier=self.classify_score(score)))

        # sorted() is stable, so equal scores stay in catalogue order
        ranked = sorted(ranked, key=lambda r: r.score, reverse=True)
        if limit is not None:
            ranked = ranked[:limit]

        logger.debug(
            "Ranked %d of %d recipes (min_score=%s, limit=%s)",
            len(ranked), len(recipes), min_score, limit,
        )
        return ranked

    def _matched_ingredients(self,
                             ingredients: Sequence[str],
                             pantry_names: Sequence[str]) -> List[str]:
        """Return the ingredients covered by at least one pantry entry.

        Duplicates in the ingredient list are kept; each is judged on its own.
        """
        normalized_pantry = normalize_all(pantry_names)
        matched = []
        for ingredient in ingredients:
            key = normalize_ingredient(ingredient)
            if any(names_overlap(key, item) for item in normalized_pantry):
                matched.append(ingredient)
        return matched

    def _score_inventory(self,
                         ingredients: Sequence[str],
                         pantry_names: Sequence[str]) -> int:
        """Score pantry coverage of the recipe's ingredients (0 to inventory weight)."""
        if not ingredients:
            # Nothing required, trivially available
            return self.weights.inventory

        matched_count = len(self._matched_ingredients(ingredients, pantry_names))
        return round_half_up(matched_count / len(ingredients) * self.weights.inventory)

    def _score_preferences(self,
                           cuisine: str,
                           dietary_preferences: Sequence[str],
                           cuisine_preferences: Sequence[str]) -> int:
        """Score cuisine/dietary alignment (binary: 0 or preference weight).

        The cuisine label doubles as the only dietary signal on a recipe, so
        "seafood" matches a "Seafood" cuisine.
        """
        label = cuisine.lower()

        cuisine_match = any(pref.lower() == label for pref in cuisine_preferences)
        dietary_match = any(
            names_overlap(label, pref.lower()) for pref in dietary_preferences
        )

        if cuisine_match or dietary_match:
            return self.weights.preference

        if not cuisine_preferences and not dietary_preferences:
            # No stated preference, no penalty
            return self.weights.preference

        return 0

    def _score_constraints(self,
                           time: float,
                           calories: float,
                           max_cook_time: Optional[float],
                           max_calories: Optional[float]) -> float:
        """Score time and calorie budget fit (0 to constraint weight).

        Each factor is worth half the weight; a value over its limit but within
        limit * overage_multiplier earns a quarter.
        """
        half = self.weights.constraint / 2
        return (
            self._budget_credit(time, max_cook_time, half)
            + self._budget_credit(calories, max_calories, half)
        )

    def _budget_credit(self, value: float, limit: Optional[float], full: float) -> float:
        """Credit for one budget factor: full, half within the overage band, else none."""
        if self._within_limit(value, limit):
            return full
        if value <= limit * self.weights.overage_multiplier:
            return full / 2
        return 0.0

    @staticmethod
    def _within_limit(value: float, limit: Optional[float]) -> bool:
        # A missing or zero limit means unconstrained
        return not limit or value <= limit

    @staticmethod
    def _aggregate(inventory_score: float,
                   dietary_score: float,
                   time_calorie_score: float) -> int:
        total = inventory_score + dietary_score + time_calorie_score
        return round_half_up(min(100, max(0, total)))


_default_matcher = RecipeMatcher()


def score_match(recipe: Recipe,
                pantry_names: Sequence[str],
                preferences: Optional[UserPreferences] = None) -> int:
    """Score a recipe with the default weights (see RecipeMatcher.score_match)."""
    return _default_matcher.score_match(recipe, pantry_names, preferences)


def explain_match(recipe: Recipe,
                  pantry_names: Sequence[str],
                  preferences: Optional[UserPreferences] = None) -> MatchBreakdown:
    """Explain a recipe's score with the default weights."""
    return _default_matcher.explain_match(recipe, pantry_names, preferences)


def classify_score(score: float) -> MatchTier:
    """Classify a score into Great (>= 80), Good (>= 50) or Low."""
    return _default_matcher.classify_score(score)
