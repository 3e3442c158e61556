"""Recipe database for loading recipes from JSON."""
import json
import logging
from pathlib import Path
from typing import List, Optional

from pantrymatch.data_layer.exceptions import RecipeNotFoundError
from pantrymatch.data_layer.models import Recipe
from pantrymatch.data_layer.validation import parse_recipe

logger = logging.getLogger(__name__)


class RecipeDB:
    """Database for managing recipes loaded from JSON."""

    def __init__(self, json_path: str):
        """Initialize recipe database from JSON file.

        Args:
            json_path: Path to JSON file containing ``{"recipes": [...]}``
        """
        self.json_path = Path(json_path)
        self._recipes: List[Recipe] = []
        self._load_recipes()

    def _load_recipes(self):
        """Load and validate recipes from JSON file.

        Raises:
            FileNotFoundError: If the JSON file doesn't exist
            InvalidRecordError: If a recipe record fails validation
        """
        with open(self.json_path, "r") as f:
            data = json.load(f)

        for index, recipe_data in enumerate(data.get("recipes", [])):
            recipe = parse_recipe(recipe_data)
            if not recipe.id:
                # Fall back to position so every recipe stays addressable
                recipe.id = str(index + 1)
            self._recipes.append(recipe)

        logger.debug("Loaded %d recipes from %s", len(self._recipes), self.json_path)

    def get_all_recipes(self) -> List[Recipe]:
        """Get all recipes in the database.

        Returns:
            List of all Recipe objects, in file order
        """
        return self._recipes.copy()

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        """Get a recipe by its ID.

        Args:
            recipe_id: Unique recipe identifier

        Returns:
            Recipe object if found, None otherwise
        """
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def require_recipe(self, recipe_id: str) -> Recipe:
        """Get a recipe by its ID, raising if it is missing.

        Raises:
            RecipeNotFoundError: If no recipe has this ID
        """
        recipe = self.get_recipe_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe
