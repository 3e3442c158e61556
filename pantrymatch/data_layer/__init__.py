"""Data layer: records, boundary validation and file-backed providers."""
