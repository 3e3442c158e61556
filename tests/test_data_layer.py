"""Tests for data layer components."""
import pytest
import json
import yaml
from pathlib import Path
from tempfile import NamedTemporaryFile

from pantrymatch.data_layer.exceptions import InvalidRecordError, RecipeNotFoundError
from pantrymatch.data_layer.models import UserPreferences
from pantrymatch.data_layer.recipe_db import RecipeDB
from pantrymatch.data_layer.pantry_db import PantryDB
from pantrymatch.data_layer.user_preferences import PreferencesLoader, ScoringConfigLoader
from pantrymatch.scoring.match_scorer import MatchWeights


def _write_temp(content: str, suffix: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=suffix, delete=False) as f:
        f.write(content)
        return f.name


@pytest.fixture
def temp_files():
    """Collect temp file paths and remove them after the test."""
    paths = []
    yield paths
    for path in paths:
        Path(path).unlink(missing_ok=True)


class TestRecipeDB:
    """Tests for RecipeDB."""

    def test_load_recipes_from_json(self, temp_files):
        """Test loading recipes from JSON file."""
        recipe_data = {
            "recipes": [
                {
                    "id": "recipe_001",
                    "name": "Chicken Stir Fry",
                    "ingredients": ["Chicken Breast", "Garlic", "Onions"],
                    "cuisine": "Asian",
                    "time": 30,
                    "calories": 450,
                },
                {
                    "id": "recipe_002",
                    "title": "Soft Boiled Eggs",
                    "ingredients": '[{"name": "Eggs"}]',
                    "time": "10",
                    "calories": None,
                },
            ]
        }
        temp_files.append(_write_temp(json.dumps(recipe_data), ".json"))

        db = RecipeDB(temp_files[0])
        recipes = db.get_all_recipes()
        assert len(recipes) == 2
        assert recipes[0].id == "recipe_001"
        assert recipes[0].ingredients == ["Chicken Breast", "Garlic", "Onions"]
        assert recipes[1].name == "Soft Boiled Eggs"
        assert recipes[1].ingredients == ["Eggs"]
        assert recipes[1].time == 10
        assert recipes[1].calories == 0

    def test_missing_id_falls_back_to_position(self, temp_files):
        """Test recipes without an id get their 1-based position."""
        data = {"recipes": [{"name": "A"}, {"id": "b", "name": "B"}, {"name": "C"}]}
        temp_files.append(_write_temp(json.dumps(data), ".json"))

        recipes = RecipeDB(temp_files[0]).get_all_recipes()
        assert [r.id for r in recipes] == ["1", "b", "3"]

    def test_get_recipe_by_id(self, temp_files):
        """Test lookup by id."""
        data = {"recipes": [{"id": "recipe_001", "name": "A"}]}
        temp_files.append(_write_temp(json.dumps(data), ".json"))

        db = RecipeDB(temp_files[0])
        assert db.get_recipe_by_id("recipe_001").name == "A"
        assert db.get_recipe_by_id("missing") is None

    def test_require_recipe_raises_for_unknown_id(self, temp_files):
        """Test require_recipe raises RecipeNotFoundError."""
        temp_files.append(_write_temp(json.dumps({"recipes": []}), ".json"))

        db = RecipeDB(temp_files[0])
        with pytest.raises(RecipeNotFoundError) as exc_info:
            db.require_recipe("recipe_404")
        assert exc_info.value.recipe_id == "recipe_404"

    def test_get_all_recipes_returns_copy(self, temp_files):
        """Test callers cannot alter the database's list."""
        data = {"recipes": [{"id": "a"}]}
        temp_files.append(_write_temp(json.dumps(data), ".json"))

        db = RecipeDB(temp_files[0])
        db.get_all_recipes().clear()
        assert len(db.get_all_recipes()) == 1

    def test_invalid_recipe_raises(self, temp_files):
        """Test an invalid record fails the load."""
        data = {"recipes": [{"id": "a", "time": -10}]}
        temp_files.append(_write_temp(json.dumps(data), ".json"))

        with pytest.raises(InvalidRecordError):
            RecipeDB(temp_files[0])

    def test_missing_file_raises(self):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            RecipeDB("does/not/exist.json")


class TestPantryDB:
    """Tests for PantryDB."""

    def test_load_items_mapping(self, temp_files):
        """Test loading the items mapping form."""
        data = {"items": [{"name": "Garlic", "quantity": 1}, {"name": "Onions", "quantity": 3}]}
        temp_files.append(_write_temp(json.dumps(data), ".json"))

        pantry = PantryDB(temp_files[0])
        assert pantry.get_pantry_names() == ["Garlic", "Onions"]
        assert len(pantry) == 2

    def test_load_bare_list(self, temp_files):
        """Test loading a bare list of names."""
        temp_files.append(_write_temp(json.dumps(["Garlic", "Rice"]), ".json"))

        assert PantryDB(temp_files[0]).get_pantry_names() == ["Garlic", "Rice"]


class TestPreferencesLoader:
    """Tests for PreferencesLoader."""

    def test_load_preferences_from_yaml(self, temp_files):
        """Test loading preferences from YAML file."""
        data = {
            "preferences": {
                "dietary_preferences": ["seafood"],
                "cuisine_preferences": ["Asian", "Italian"],
                "max_cook_time": 60,
                "max_calories": 800,
            }
        }
        temp_files.append(_write_temp(yaml.dump(data), ".yaml"))

        prefs = PreferencesLoader(temp_files[0]).load()
        assert prefs == UserPreferences(
            dietary_preferences=["seafood"],
            cuisine_preferences=["Asian", "Italian"],
            max_cook_time=60,
            max_calories=800,
        )

    def test_missing_section_means_no_preferences(self, temp_files):
        """Test a file without a preferences mapping yields defaults."""
        temp_files.append(_write_temp("other: 1\n", ".yaml"))

        assert PreferencesLoader(temp_files[0]).load() == UserPreferences()

    def test_empty_file(self, temp_files):
        """Test an empty YAML file yields defaults."""
        temp_files.append(_write_temp("", ".yaml"))

        assert PreferencesLoader(temp_files[0]).load() == UserPreferences()

    def test_invalid_limit_raises(self, temp_files):
        """Test an invalid limit raises InvalidRecordError."""
        temp_files.append(_write_temp("preferences:\n  max_cook_time: -1\n", ".yaml"))

        with pytest.raises(InvalidRecordError):
            PreferencesLoader(temp_files[0]).load()


class TestScoringConfigLoader:
    """Tests for ScoringConfigLoader."""

    def test_defaults_without_section(self, temp_files):
        """Test a file without a scoring mapping yields default weights."""
        temp_files.append(_write_temp("preferences: {}\n", ".yaml"))

        assert ScoringConfigLoader(temp_files[0]).load() == MatchWeights()

    def test_partial_override(self, temp_files):
        """Test keys present override defaults, others stay."""
        data = {"scoring": {"inventory": 60, "preference": 20, "constraint": 20, "great_threshold": 85}}
        temp_files.append(_write_temp(yaml.dump(data), ".yaml"))

        weights = ScoringConfigLoader(temp_files[0]).load()
        assert weights.inventory == 60
        assert weights.preference == 20
        assert weights.constraint == 20
        assert weights.great_threshold == 85
        assert weights.good_threshold == 50
        assert weights.overage_multiplier == 1.25

    def test_unknown_key_raises(self, temp_files):
        """Test typos in the scoring section are reported."""
        temp_files.append(_write_temp("scoring:\n  inventroy: 70\n", ".yaml"))

        with pytest.raises(ValueError, match="Unknown scoring keys: inventroy"):
            ScoringConfigLoader(temp_files[0]).load()

    def test_invalid_sum_raises(self, temp_files):
        """Test weights that do not add up to 100 are rejected."""
        temp_files.append(_write_temp("scoring:\n  inventory: 80\n", ".yaml"))

        with pytest.raises(ValueError, match="must sum to 100"):
            ScoringConfigLoader(temp_files[0]).load()

    def test_fractional_weight_raises(self, temp_files):
        """Test fractional weights are rejected rather than truncated."""
        data = {"scoring": {"inventory": 70.4, "preference": 15.3, "constraint": 15.3}}
        temp_files.append(_write_temp(yaml.dump(data), ".yaml"))

        with pytest.raises(ValueError, match="'inventory' must be a whole number"):
            ScoringConfigLoader(temp_files[0]).load()

    def test_whole_float_weight_accepted(self, temp_files):
        """Test a float with no fractional part is accepted as an integer."""
        temp_files.append(_write_temp("scoring:\n  great_threshold: 85.0\n", ".yaml"))

        weights = ScoringConfigLoader(temp_files[0]).load()
        assert weights.great_threshold == 85
        assert isinstance(weights.great_threshold, int)
