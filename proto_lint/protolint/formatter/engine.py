"""Proto file formatter: re-indents, normalizes spacing and blank lines.

Three passes over the source:

1. split statements that share a line with a closing brace,
2. classify each line into a FormatToken and compute its depth,
3. render the tokens, inserting blank lines by category adjacency.

The formatter never consults the validator; malformed input is re-flowed on a
best-effort basis.
"""

from __future__ import annotations

import logging
import re

from protolint.formatter.models import HEADER_CATEGORIES, FormatCategory, FormatToken
from protolint.patterns import (
    CLOSE_RE,
    ENUM_VALUE_RE,
    FIELD_ASSIGNMENT_RE,
    FORMAT_OPENER_RE,
    STATEMENT_THEN_CLOSE_RE,
    is_comment,
    strip_inline_comment,
)

logger = logging.getLogger(__name__)

INDENT = "  "

_KEYWORD_CATEGORIES: list[tuple[re.Pattern[str], FormatCategory]] = [
    (re.compile(r"^syntax\s*="), FormatCategory.syntax),
    (re.compile(r"^package\s"), FormatCategory.package),
    (re.compile(r"^import\s"), FormatCategory.import_),
    (re.compile(r"^option\s"), FormatCategory.option),
    (re.compile(r"^reserved\s"), FormatCategory.reserved),
    (re.compile(r"^rpc\s"), FormatCategory.rpc),
]


def format_proto(content: str) -> str:
    """Return the canonical layout of a .proto source text."""
    lines = split_closing_braces(content.split("\n"))
    tokens = classify_lines(lines)
    logger.debug("Formatting %d lines into %d tokens", len(lines), len(tokens))
    return render_tokens(tokens)


def split_closing_braces(lines: list[str]) -> list[str]:
    """Move a closing brace that follows a statement onto its own line."""
    result: list[str] = []
    in_block_comment = False

    for line in lines:
        trimmed = line.strip()
        if in_block_comment:
            in_block_comment = "*/" not in trimmed
            result.append(line)
            continue
        if trimmed.startswith("/*"):
            in_block_comment = "*/" not in trimmed
            result.append(line)
            continue

        match = STATEMENT_THEN_CLOSE_RE.match(trimmed)
        if match and not is_comment(trimmed):
            result.append(match.group(1))
            result.append(match.group(2))
        else:
            result.append(line)

    return result


def classify_lines(lines: list[str]) -> list[FormatToken]:
    """Turn physical lines into tokens, tracking depth by brace counting.

    Blank lines are dropped here; render_tokens decides where they go.
    """
    tokens: list[FormatToken] = []
    depth = 0
    in_block_comment = False
    i = 0

    while i < len(lines):
        trimmed = lines[i].strip()
        i += 1

        if in_block_comment:
            in_block_comment = "*/" not in trimmed
            tokens.append(FormatToken(trimmed, depth, FormatCategory.comment))
            continue
        if not trimmed:
            continue
        if trimmed.startswith("/*"):
            in_block_comment = "*/" not in trimmed
            tokens.append(FormatToken(trimmed, depth, FormatCategory.comment))
            continue

        if CLOSE_RE.match(trimmed):
            depth = max(0, depth - 1)
            tokens.append(FormatToken(trimmed, depth, FormatCategory.close))
            continue

        category, text = classify(trimmed)

        # Pull a lone '{' on a following line up onto its opener.
        if category is FormatCategory.block and "{" not in text and "//" not in text:
            brace_idx = _next_non_blank(lines, i)
            if brace_idx is not None and lines[brace_idx].strip() == "{":
                text = f"{text} {{"
                i = brace_idx + 1

        tokens.append(FormatToken(text, depth, category))
        if category is not FormatCategory.comment and strip_inline_comment(text).endswith("{"):
            depth += 1

    return tokens


def classify(trimmed: str) -> tuple[FormatCategory, str]:
    """Categorize one trimmed, non-blank line and normalize its spacing."""
    if trimmed.startswith("//"):
        return FormatCategory.comment, trimmed

    if FORMAT_OPENER_RE.match(trimmed):
        return FormatCategory.block, _normalize_opener(trimmed)

    for pattern, category in _KEYWORD_CATEGORIES:
        if pattern.match(trimmed):
            if category is FormatCategory.syntax:
                return category, re.sub(r"^syntax\s*=\s*", "syntax = ", trimmed)
            if category is FormatCategory.rpc:
                return category, _normalize_rpc(trimmed)
            return category, re.sub(r"\s+", " ", trimmed, count=1)

    if FIELD_ASSIGNMENT_RE.match(trimmed):
        return FormatCategory.field, _normalize_assignment(trimmed)
    if ENUM_VALUE_RE.match(trimmed):
        return FormatCategory.enumval, _normalize_assignment(trimmed)

    return FormatCategory.other, trimmed


def _normalize_opener(text: str) -> str:
    text = FORMAT_OPENER_RE.sub(r"\1 ", text, count=1)
    return re.sub(r"\s*\{$", " {", text)


def _normalize_rpc(text: str) -> str:
    text = re.sub(r"^rpc\s+", "rpc ", text)
    text = re.sub(r"\s*\(\s*", "(", text)
    text = re.sub(r"\s*\)", ")", text)
    text = re.sub(r"\)\s*returns\s*\(", ") returns (", text)
    text = re.sub(r"\s+;", ";", text)
    return re.sub(r"\s*\{$", " {", text)


def _normalize_assignment(text: str) -> str:
    text = re.sub(r"\s*=\s*", " = ", text, count=1)
    return re.sub(r"\s+;", ";", text, count=1)


def _next_non_blank(lines: list[str], start: int) -> int | None:
    for idx in range(start, len(lines)):
        if lines[idx].strip():
            return idx
    return None


def needs_blank_line(prev: FormatToken, cur: FormatToken) -> bool:
    """Blank-line policy between two consecutive tokens; first match wins."""
    if cur.depth > 0:
        return False
    if prev.category is FormatCategory.close:
        return cur.category is not FormatCategory.close
    if prev.depth > 0:
        return False
    for header in HEADER_CATEGORIES:
        if prev.category is header:
            return cur.category is not header
    if cur.category is FormatCategory.block:
        return prev.category is not FormatCategory.comment
    if cur.category is FormatCategory.comment:
        return prev.category not in (FormatCategory.comment, *HEADER_CATEGORIES)
    return False


def render_tokens(tokens: list[FormatToken]) -> str:
    """Render tokens with indentation and policy blank lines."""
    out: list[str] = []
    prev: FormatToken | None = None

    for token in tokens:
        if prev is not None and needs_blank_line(prev, token):
            out.append("")
        out.append(f"{INDENT * token.depth}{token.text}" if token.text else "")
        prev = token

    while out and out[-1] == "":
        out.pop()
    if not out:
        return ""
    return "\n".join(out) + "\n"
