"""Canonical re-formatting of .proto source text."""

from protolint.formatter.engine import format_proto
from protolint.formatter.models import FormatCategory, FormatToken

__all__ = [
    "FormatCategory",
    "FormatToken",
    "format_proto",
]
