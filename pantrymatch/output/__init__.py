"""Output formatting for match explanations and rankings."""

from pantrymatch.output.formatters import (
    format_breakdown_json,
    format_breakdown_markdown,
    format_ranking_json,
    format_ranking_markdown,
    format_json_string,
)

__all__ = [
    "format_breakdown_json",
    "format_breakdown_markdown",
    "format_ranking_json",
    "format_ranking_markdown",
    "format_json_string",
]
