"""Loaders for user preferences and scoring configuration from YAML."""
import logging
from pathlib import Path

import yaml

from pantrymatch.data_layer.models import UserPreferences
from pantrymatch.data_layer.validation import parse_preferences
from pantrymatch.scoring.match_scorer import MatchWeights

logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> dict:
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    return data or {}


class PreferencesLoader:
    """Loader for user preferences from YAML."""

    def __init__(self, yaml_path: str):
        """Initialize preferences loader from YAML file.

        Args:
            yaml_path: Path to YAML file with a ``preferences`` mapping
        """
        self.yaml_path = Path(yaml_path)

    def load(self) -> UserPreferences:
        """Load user preferences from YAML file.

        A file without a ``preferences`` mapping yields empty preferences.

        Returns:
            UserPreferences object

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            InvalidRecordError: If a preference value cannot be coerced
        """
        data = _read_yaml(self.yaml_path)
        preferences = parse_preferences(data.get("preferences"))
        logger.debug(
            "Loaded preferences from %s: %d dietary, %d cuisine",
            self.yaml_path,
            len(preferences.dietary_preferences),
            len(preferences.cuisine_preferences),
        )
        return preferences


class ScoringConfigLoader:
    """Loader for match weights from the optional ``scoring`` YAML mapping."""

    FIELDS = (
        "inventory",
        "preference",
        "constraint",
        "overage_multiplier",
        "great_threshold",
        "good_threshold",
    )

    def __init__(self, yaml_path: str):
        self.yaml_path = Path(yaml_path)

    def load(self) -> MatchWeights:
        """Load match weights, falling back to defaults for missing keys.

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If the weights are invalid (see MatchWeights)
        """
        scoring = _read_yaml(self.yaml_path).get("scoring") or {}
        unknown = sorted(set(scoring) - set(self.FIELDS))
        if unknown:
            raise ValueError(f"Unknown scoring keys: {', '.join(unknown)}")

        overrides = {}
        for key, value in scoring.items():
            number = float(value)
            if key != "overage_multiplier":
                if not number.is_integer():
                    raise ValueError(f"Scoring key '{key}' must be a whole number, got {value}")
                number = int(number)
            overrides[key] = number
        return MatchWeights(**overrides)
