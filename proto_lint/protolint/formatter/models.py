"""Formatter data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FormatCategory(str, Enum):
    """Kind of statement a formatted line holds."""

    syntax = "syntax"
    package = "package"
    import_ = "import"
    option = "option"
    comment = "comment"
    block = "block"
    rpc = "rpc"
    field = "field"
    enumval = "enumval"
    reserved = "reserved"
    close = "close"
    other = "other"


# Header statements: a blank line follows the last one of each run.
HEADER_CATEGORIES = (
    FormatCategory.syntax,
    FormatCategory.package,
    FormatCategory.import_,
    FormatCategory.option,
)


@dataclass(frozen=True)
class FormatToken:
    """One output line: normalized text, nesting depth and category."""

    text: str
    depth: int
    category: FormatCategory
