"""Recipe match scoring against a household pantry and preferences."""

__version__ = "0.1.0"
