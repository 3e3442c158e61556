#!/usr/bin/env python3
"""Benchmark rank_recipes: run time over a synthetic recipe catalogue.

Run from repo root:
  python scripts/benchmark_match_scoring.py

Catalogue and pantry size via env:
  MATCH_BENCH_RECIPES (default 5000), MATCH_BENCH_PANTRY (default 200)
"""
from __future__ import annotations

import os
import sys
import time

# Allow importing pantrymatch when run from repo root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pantrymatch.data_layer.models import Recipe, UserPreferences
from pantrymatch.scoring.match_scorer import RecipeMatcher

CUISINES = ["Italian", "Asian", "Indian", "Mexican", "Seafood", "American"]


def make_recipe(index: int, ingredient_count: int = 8) -> Recipe:
    return Recipe(
        id=f"recipe_{index:05d}",
        name=f"Recipe {index}",
        ingredients=[f"Ingredient {(index * 7 + k) % 400}" for k in range(ingredient_count)],
        cuisine=CUISINES[index % len(CUISINES)],
        time=10 + (index % 9) * 10,
        calories=200 + (index % 12) * 75,
    )


def main() -> None:
    n_recipes = int(os.environ.get("MATCH_BENCH_RECIPES", "5000"))
    n_pantry = int(os.environ.get("MATCH_BENCH_PANTRY", "200"))

    recipes = [make_recipe(i) for i in range(n_recipes)]
    pantry = [f"ingredient {k * 2}" for k in range(n_pantry)]
    preferences = UserPreferences(
        dietary_preferences=["seafood"],
        cuisine_preferences=["Italian"],
        max_cook_time=45,
        max_calories=700,
    )
    matcher = RecipeMatcher()

    t0 = time.perf_counter()
    ranked = matcher.rank_recipes(recipes, pantry, preferences)
    elapsed = time.perf_counter() - t0

    print(f"recipes={n_recipes} pantry={n_pantry}")
    print(f"elapsed_s={elapsed:.4f} per_recipe_ms={elapsed / max(n_recipes, 1) * 1000:.4f}")
    if ranked:
        top = ranked[0]
        print(f"top={top.recipe.id} score={top.score} tier={top.tier.tier}")
        print(f"bottom={ranked[-1].recipe.id} score={ranked[-1].score}")


if __name__ == "__main__":
    main()
