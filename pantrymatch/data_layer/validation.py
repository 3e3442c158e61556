"""Boundary validation for raw recipe, pantry and preference records.

Records arrive from JSON/YAML files or other services with loose shapes:
camelCase or snake_case keys, numbers as strings, nulls for missing values,
ingredients as strings, ``{"name": ...}`` objects or a JSON-encoded string.
The pydantic models here coerce them into the typed dataclasses the scorer
consumes, so the scorer itself never has to validate anything.
"""

import json
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from pantrymatch.data_layer.exceptions import InvalidRecordError
from pantrymatch.data_layer.models import Recipe, UserPreferences


def _name_of(item: Any) -> Any:
    if isinstance(item, dict):
        return item.get("name")
    return item


def _coerce_name_list(value: Any) -> Any:
    """Turn None, a JSON string, or a list of names/objects into a list of names."""
    if value is None:
        return []
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return []
        if stripped.startswith("["):
            try:
                value = json.loads(stripped)
            except json.JSONDecodeError as exc:
                raise ValueError(f"malformed JSON list: {exc.msg}") from exc
        else:
            return [part.strip() for part in stripped.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [_name_of(item) for item in value]
    return value


class RecipeRecord(BaseModel):
    """Raw recipe as stored by a recipe provider."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str = Field("", validation_alias=AliasChoices("name", "title"))
    ingredients: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("ingredients", "extendedIngredients"),
    )
    cuisine: str = ""
    time: float = Field(0, ge=0, validation_alias=AliasChoices("time", "readyInMinutes"))
    calories: float = Field(0, ge=0)
    instructions: List[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return "" if value is None else str(value)

    @field_validator("name", "cuisine", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return "" if value is None else value

    @field_validator("time", "calories", mode="before")
    @classmethod
    def _coerce_number(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    @field_validator("ingredients", mode="before")
    @classmethod
    def _coerce_ingredients(cls, value):
        if isinstance(value, str) and not value.strip().startswith("["):
            # A single free-form ingredient line
            return [value] if value.strip() else []
        return _coerce_name_list(value)

    @field_validator("instructions", mode="before")
    @classmethod
    def _coerce_instructions(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [line.strip() for line in value.splitlines() if line.strip()]
        return value

    def to_recipe(self) -> Recipe:
        return Recipe(
            id=self.id,
            name=self.name,
            ingredients=list(self.ingredients),
            cuisine=self.cuisine,
            time=self.time,
            calories=self.calories,
            instructions=list(self.instructions),
        )


class PreferencesRecord(BaseModel):
    """Raw user preferences as stored by a preferences provider."""

    model_config = ConfigDict(extra="ignore")

    dietary_preferences: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("dietary_preferences", "dietaryPreferences"),
    )
    cuisine_preferences: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("cuisine_preferences", "cuisinePreferences"),
    )
    max_cook_time: Optional[float] = Field(
        None, ge=0, validation_alias=AliasChoices("max_cook_time", "maxCookTime")
    )
    max_calories: Optional[float] = Field(
        None, ge=0, validation_alias=AliasChoices("max_calories", "maxCalories")
    )

    @field_validator("dietary_preferences", "cuisine_preferences", mode="before")
    @classmethod
    def _coerce_lists(cls, value):
        return _coerce_name_list(value)

    @field_validator("max_cook_time", "max_calories", mode="before")
    @classmethod
    def _coerce_limit(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_preferences(self) -> UserPreferences:
        return UserPreferences(
            dietary_preferences=list(self.dietary_preferences),
            cuisine_preferences=list(self.cuisine_preferences),
            max_cook_time=self.max_cook_time,
            max_calories=self.max_calories,
        )


class PantryItemRecord(BaseModel):
    """A single pantry entry; only the name takes part in matching."""

    model_config = ConfigDict(extra="ignore")

    name: str
    quantity: Optional[float] = None


class PantryRecord(BaseModel):
    """Raw pantry contents as stored by an inventory provider."""

    model_config = ConfigDict(extra="ignore")

    items: List[PantryItemRecord] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _coerce_items(cls, value):
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value


def _details(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def parse_recipe(data: dict) -> Recipe:
    """Validate and coerce a raw recipe dict.

    Args:
        data: Raw recipe record

    Returns:
        Recipe dataclass

    Raises:
        InvalidRecordError: If a field cannot be coerced (e.g. negative time)
    """
    try:
        return RecipeRecord.model_validate(data).to_recipe()
    except ValidationError as exc:
        raise InvalidRecordError("recipe", _details(exc)) from exc


def parse_preferences(data: Optional[dict]) -> UserPreferences:
    """Validate and coerce a raw preferences dict (None means no preferences).

    Raises:
        InvalidRecordError: If a field cannot be coerced
    """
    try:
        return PreferencesRecord.model_validate(data or {}).to_preferences()
    except ValidationError as exc:
        raise InvalidRecordError("preferences", _details(exc)) from exc


def parse_pantry_names(data: Any) -> List[str]:
    """Extract pantry item names from a raw pantry record.

    Accepts ``{"items": [...]}`` or a bare list; each entry is either a name
    or an object with a ``name`` key.

    Raises:
        InvalidRecordError: If an entry has no usable name
    """
    if data is None:
        return []
    if isinstance(data, (list, tuple)):
        data = {"items": data}
    try:
        record = PantryRecord.model_validate(data)
    except ValidationError as exc:
        raise InvalidRecordError("pantry", _details(exc)) from exc
    return [item.name for item in record.items]
