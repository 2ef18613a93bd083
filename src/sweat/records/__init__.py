"""ISD record handling - fixed-width layout, parser, and quality filter."""

from .parser import extract_fields, parse_line
from .quality import QualityFilter, is_admissible
from .schema import ISD_FIELDS, MIN_RECORD_LENGTH, FieldSpec

__all__ = [
    "FieldSpec",
    "ISD_FIELDS",
    "MIN_RECORD_LENGTH",
    "QualityFilter",
    "extract_fields",
    "is_admissible",
    "parse_line",
]
