"""Data models for recipe match scoring."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Recipe:
    """Represents a recipe as seen by the match scorer."""

    id: str = ""  # Unique identifier (display/lookup only)
    name: str = ""  # Recipe title (display only)
    ingredients: List[str] = field(default_factory=list)  # Free-form, not normalized
    cuisine: str = ""  # Single cuisine label (e.g., "Italian")
    time: float = 0  # Minutes to prepare
    calories: float = 0  # kcal
    instructions: List[str] = field(default_factory=list)


@dataclass
class UserPreferences:
    """Represents the household's stated preferences."""

    dietary_preferences: List[str] = field(default_factory=list)  # e.g. "seafood"
    cuisine_preferences: List[str] = field(default_factory=list)  # e.g. "Asian"
    max_cook_time: Optional[float] = None  # None means no time limit
    max_calories: Optional[float] = None  # None means no calorie limit
