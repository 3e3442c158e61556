#!/usr/bin/env python3
"""Command-line interface for ranking recipes against the household pantry."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pantrymatch.data_layer.exceptions import InvalidRecordError, RecipeNotFoundError
from pantrymatch.data_layer.pantry_db import PantryDB
from pantrymatch.data_layer.recipe_db import RecipeDB
from pantrymatch.data_layer.user_preferences import PreferencesLoader, ScoringConfigLoader
from pantrymatch.output.formatters import (
    format_breakdown_json,
    format_breakdown_markdown,
    format_json_string,
    format_ranking_json,
    format_ranking_markdown,
)
from pantrymatch.scoring.match_scorer import RecipeMatcher


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank recipes by how well they match your pantry and preferences"
    )
    parser.add_argument(
        "--preferences",
        type=str,
        default="config/user_preferences.yaml",
        help="Path to user preferences YAML file (default: config/user_preferences.yaml)"
    )
    parser.add_argument(
        "--recipes",
        type=str,
        default="data/recipes/recipes.json",
        help="Path to recipes JSON file (default: data/recipes/recipes.json)"
    )
    parser.add_argument(
        "--pantry",
        type=str,
        default="data/pantry/pantry.json",
        help="Path to pantry JSON file (default: data/pantry/pantry.json)"
    )
    parser.add_argument(
        "--scoring",
        type=str,
        help="Optional YAML file with a 'scoring' section overriding match weights"
    )
    parser.add_argument(
        "--recipe-id",
        type=str,
        help="Explain the match score of a single recipe instead of ranking all"
    )
    parser.add_argument(
        "--min-score",
        type=int,
        help="Only list recipes scoring at least this much (0-100)"
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of recipes to list"
    )
    parser.add_argument(
        "--output",
        type=str,
        choices=["markdown", "json", "both"],
        default="markdown",
        help="Output format: markdown (default), json, or both"
    )
    parser.add_argument(
        "--output-file",
        type=str,
        help="Optional file path to save output (default: print to stdout)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def _write_output(text: str, output_file: Optional[str], suffix: Optional[str]) -> None:
    if not output_file:
        print(text)
        return
    output_path = Path(output_file)
    if suffix:
        output_path = output_path.with_suffix(suffix)
    output_path.write_text(text)
    print(f"Output saved to {output_path}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Validate file paths
    required = [
        ("User preferences", args.preferences),
        ("Recipes", args.recipes),
        ("Pantry", args.pantry),
    ]
    if args.scoring:
        required.append(("Scoring config", args.scoring))
    for label, path in required:
        if not Path(path).exists():
            print(f"Error: {label} file not found: {path}", file=sys.stderr)
            return 1

    try:
        print(f"Loading preferences from {args.preferences}...", file=sys.stderr)
        preferences = PreferencesLoader(args.preferences).load()

        print(f"Loading recipes from {args.recipes}...", file=sys.stderr)
        recipe_db = RecipeDB(args.recipes)
        print(f"Found {len(recipe_db.get_all_recipes())} recipes", file=sys.stderr)

        print(f"Loading pantry from {args.pantry}...", file=sys.stderr)
        pantry_names = PantryDB(args.pantry).get_pantry_names()

        weights = ScoringConfigLoader(args.scoring).load() if args.scoring else None
        matcher = RecipeMatcher(weights)

        if args.recipe_id:
            recipe = recipe_db.require_recipe(args.recipe_id)
            breakdown = matcher.explain_match(recipe, pantry_names, preferences)
            tier = matcher.classify_score(breakdown.total)
            markdown_output = format_breakdown_markdown(recipe, breakdown, tier)
            json_payload = format_breakdown_json(recipe, breakdown, tier)
        else:
            ranked = matcher.rank_recipes(
                recipe_db.get_all_recipes(),
                pantry_names,
                preferences,
                min_score=args.min_score,
                limit=args.limit,
            )
            print(f"{len(ranked)} recipes listed", file=sys.stderr)
            markdown_output = format_ranking_markdown(ranked)
            json_payload = format_ranking_json(ranked)

        # Format output
        both = args.output == "both"
        if args.output in ["markdown", "both"]:
            _write_output(markdown_output, args.output_file, ".md" if both else None)
        if args.output in ["json", "both"]:
            if both and not args.output_file:
                print("\n" + "=" * 80 + "\n")
            _write_output(
                format_json_string(json_payload), args.output_file, ".json" if both else None
            )

    except (InvalidRecordError, RecipeNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 3
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.getLogger(__name__).debug("Unhandled error", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
