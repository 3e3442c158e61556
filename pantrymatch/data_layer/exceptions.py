"""Custom exceptions for the data layer."""


class InvalidRecordError(Exception):
    """Raised when a raw recipe, pantry or preferences record fails validation."""

    def __init__(self, record_type: str, details: str):
        """Initialize exception with record type and failure details.

        Args:
            record_type: Kind of record being validated ("recipe", "preferences", ...)
            details: Human-readable description of what was wrong
        """
        self.record_type = record_type
        self.details = details
        super().__init__(f"Invalid {record_type} record: {details}")


class RecipeNotFoundError(Exception):
    """Raised when a recipe id is not present in the recipe database."""

    def __init__(self, recipe_id: str):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe '{recipe_id}' not found in recipe database")
