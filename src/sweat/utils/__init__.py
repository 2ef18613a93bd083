"""Common utility functions and helpers for the sweat package."""

from sweat.utils.file import ensure_directory_exists, read_lines
from sweat.utils.formatting import format_summary, format_temperature

__all__ = [
    "ensure_directory_exists",
    "format_summary",
    "format_temperature",
    "read_lines",
]
