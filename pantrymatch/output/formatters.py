"""Formatters for match explanations and rankings (JSON and Markdown)."""

import json
from typing import Any, Dict, List, Optional

from pantrymatch.data_layer.models import Recipe
from pantrymatch.scoring.match_scorer import (
    MatchBreakdown,
    MatchTier,
    RankedRecipe,
    classify_score,
)


def format_points(value: float) -> str:
    """Format a point value without a trailing .0 (e.g. 15, 7.5, 3.75)."""
    if value == int(value):
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_breakdown_markdown(recipe: Recipe,
                              breakdown: MatchBreakdown,
                              tier: Optional[MatchTier] = None) -> str:
    """Format a match breakdown as a Markdown "why this score" section.

    Args:
        recipe: Recipe the breakdown was computed for
        breakdown: MatchBreakdown from explain_match
        tier: Presentation band (defaults to the standard 80/50 thresholds)

    Returns:
        Formatted Markdown string
    """
    inventory = breakdown.inventory
    dietary = breakdown.dietary
    time_calorie = breakdown.time_calorie
    tier = tier or classify_score(breakdown.total)

    lines = []
    lines.append(f"# {recipe.name or recipe.id}\n")
    lines.append(f"**Match:** {breakdown.total}% ({tier.label})")
    if recipe.cuisine:
        lines.append(f"**Cuisine:** {recipe.cuisine}")
    lines.append(f"**Time:** {format_points(recipe.time)} minutes")
    lines.append(f"**Calories:** {format_points(recipe.calories)} kcal")
    lines.append("")

    lines.append("## Why this match score?\n")
    lines.append(
        f"- **Inventory Match:** {inventory.matched_count}/{inventory.total_ingredient_count} "
        f"ingredients ({inventory.score}/{inventory.max_score})"
    )
    for item in inventory.matched_items:
        lines.append(f"  - {item}")

    cuisine_status = "✓ Matches preferences" if dietary.matched else "✗ No match"
    lines.append(
        f"- **Cuisine Match:** {cuisine_status} ({dietary.score}/{dietary.max_score})"
    )

    time_status = "✓ Time OK" if time_calorie.time_ok else "✗ Too long"
    calorie_status = "✓ Cal OK" if time_calorie.calories_ok else "✗ Too high"
    lines.append(
        f"- **Time & Calories:** {time_status} • {calorie_status} "
        f"({format_points(time_calorie.score)}/{time_calorie.max_score})"
    )
    lines.append("")
    lines.append(f"**Total Score:** {breakdown.total}%")

    if recipe.ingredients:
        lines.append("")
        lines.append("### Ingredients")
        for ingredient in recipe.ingredients:
            lines.append(f"- {ingredient}")

    return "\n".join(lines)


def format_breakdown_json(recipe: Recipe,
                          breakdown: MatchBreakdown,
                          tier: Optional[MatchTier] = None) -> Dict[str, Any]:
    """Format a match breakdown as a JSON-ready dictionary.

    Args:
        recipe: Recipe the breakdown was computed for
        breakdown: MatchBreakdown from explain_match
        tier: Presentation band (defaults to the standard 80/50 thresholds)

    Returns:
        Dictionary ready for JSON serialization
    """
    tier = tier or classify_score(breakdown.total)
    return {
        "recipe": {
            "id": recipe.id,
            "name": recipe.name,
            "cuisine": recipe.cuisine,
            "time": recipe.time,
            "calories": recipe.calories,
        },
        "total": breakdown.total,
        "tier": tier.tier,
        "label": tier.label,
        "inventory": {
            "score": breakdown.inventory.score,
            "max_score": breakdown.inventory.max_score,
            "matched_count": breakdown.inventory.matched_count,
            "total_ingredient_count": breakdown.inventory.total_ingredient_count,
            "matched_items": list(breakdown.inventory.matched_items),
        },
        "dietary": {
            "score": breakdown.dietary.score,
            "max_score": breakdown.dietary.max_score,
            "matched": breakdown.dietary.matched,
        },
        "time_calorie": {
            "score": breakdown.time_calorie.score,
            "max_score": breakdown.time_calorie.max_score,
            "time_ok": breakdown.time_calorie.time_ok,
            "calories_ok": breakdown.time_calorie.calories_ok,
        },
    }


def format_ranking_markdown(ranked: List[RankedRecipe]) -> str:
    """Format ranked recipes as a Markdown table, best match first."""
    lines = ["# Recipe Matches\n"]
    if not ranked:
        lines.append("No recipes match the current filters.")
        return "\n".join(lines)

    lines.append("| # | Recipe | Cuisine | Time | Calories | Match |")
    lines.append("|---|--------|---------|------|----------|-------|")
    for position, entry in enumerate(ranked, 1):
        recipe = entry.recipe
        lines.append(
            f"| {position} | {recipe.name or recipe.id} | {recipe.cuisine or '-'} "
            f"| {format_points(recipe.time)} min | {format_points(recipe.calories)} kcal "
            f"| {entry.score}% {entry.tier.label} |"
        )
    return "\n".join(lines)


def format_ranking_json(ranked: List[RankedRecipe]) -> Dict[str, Any]:
    """Format ranked recipes as a JSON-ready dictionary."""
    return {
        "count": len(ranked),
        "recipes": [
            {
                "id": entry.recipe.id,
                "name": entry.recipe.name,
                "cuisine": entry.recipe.cuisine,
                "score": entry.score,
                "tier": entry.tier.tier,
                "label": entry.tier.label,
            }
            for entry in ranked
        ],
    }


def format_json_string(payload: Dict[str, Any], indent: int = 2) -> str:
    """Serialize a formatter payload as a JSON string.

    Args:
        payload: Dictionary from one of the format_*_json functions
        indent: JSON indentation (default: 2)

    Returns:
        JSON string
    """
    return json.dumps(payload, indent=indent, ensure_ascii=False)
