"""Structural checks: brace balance, field numbers, malformed declarations.

A single line-oriented pass keeps a stack of open blocks. Every check is
derived from the current line plus the innermost open block, so the pass
never needs a parse tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from protolint.patterns import (
    BLOCK_OPENER_RE,
    ENUM_VALUE_TERMINATED_RE,
    ENUM_VALUE_UNTERMINATED_RE,
    SYNTAX_VALUE_RE,
    VALID_SYNTAX_VALUES,
    has_terminated_field_number,
    has_unterminated_field_number,
    is_comment,
    is_enum_value_candidate,
    is_field_declaration,
    is_known_top_level,
    is_well_formed_rpc,
    needs_semicolon,
    strip_inline_comment,
)
from protolint.validator.models import RuleId, ValidationIssue, make_issue


@dataclass
class StructuralContext:
    """One open block on the context stack."""

    kind: str
    name: str
    opened_at_line: int

    @property
    def label(self) -> str:
        return f'{self.kind} "{self.name}"' if self.name else self.kind


@dataclass
class ScanState:
    """Mutable state owned by a single structural scan."""

    stack: list[StructuralContext] = field(default_factory=list)
    # Opener seen without '{'; the next code line must supply it.
    pending: StructuralContext | None = None
    in_block_comment: bool = False
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def top_kind(self) -> str:
        return self.stack[-1].kind if self.stack else ""

    def report(self, line: int, message: str, column: int = 1) -> None:
        self.issues.append(make_issue(RuleId.syntax_error, line, message, column))


def check_structure(lines: list[str]) -> list[ValidationIssue]:
    """Scan the source lines and return every structural error found."""
    state = ScanState()

    for line_num, raw in enumerate(lines, start=1):
        trimmed = raw.strip()
        if state.in_block_comment:
            state.in_block_comment = "*/" not in trimmed
            continue
        if not trimmed:
            continue
        if is_comment(trimmed):
            if trimmed.startswith("/*"):
                state.in_block_comment = "*/" not in trimmed
            # A comment between an opener and its brace counts as the next line.
            if state.pending is not None:
                _report_missing_brace(state, state.pending)
                state.pending = None
            continue

        code = strip_inline_comment(trimmed)
        if not code:
            continue
        _scan_line(state, line_num, raw, code)

    if state.pending is not None:
        _report_missing_brace(state, state.pending)
        state.pending = None

    for unclosed in state.stack:
        state.report(
            unclosed.opened_at_line,
            f'Unclosed {unclosed.label}: missing closing brace "}}".',
        )

    return state.issues


def _scan_line(state: ScanState, line_num: int, raw: str, code: str) -> None:
    context = state.top_kind
    at_top_level = not state.stack and state.pending is None
    indent = len(raw) - len(raw.lstrip())

    if context in ("message", "oneof"):
        _check_field(state, line_num, code)
    elif context == "enum":
        _check_enum_value(state, line_num, code)

    claimed_brace = False
    if state.pending is not None:
        pending = state.pending
        state.pending = None
        if code.startswith("{"):
            state.stack.append(pending)
            claimed_brace = True
        else:
            _report_missing_brace(state, pending)

    opener = BLOCK_OPENER_RE.match(code)
    if opener:
        kind, name = opener.group(1), opener.group(2) or ""
        if not name:
            state.report(line_num, f"{kind} declaration is missing a name.")
        opened = StructuralContext(kind=kind, name=name, opened_at_line=line_num)
        if "{" in code:
            state.stack.append(opened)
            claimed_brace = True
        elif code[opener.end():].strip():
            _report_missing_brace(state, opened)
        else:
            state.pending = opened

    _track_braces(state, line_num, code, claimed_brace)

    if context == "service" and code.startswith("rpc "):
        if not is_well_formed_rpc(code):
            state.report(
                line_num,
                "Malformed rpc declaration. Expected: rpc Name(Request) returns (Response);",
            )

    syntax_match = SYNTAX_VALUE_RE.match(code)
    if syntax_match and syntax_match.group(1) not in VALID_SYNTAX_VALUES:
        state.report(
            line_num,
            f'Invalid syntax value "{syntax_match.group(1)}". Must be "proto2" or "proto3".',
        )

    if ";" in code and not code.endswith(";") and "{" not in code:
        last_semicolon = code.rindex(";")
        rest = code[last_semicolon + 1:].strip()
        if rest and not rest.startswith(("//", "/*")):
            state.report(
                line_num,
                f'Unexpected content "{rest}" after semicolon.',
                column=indent + last_semicolon + 2,
            )

    if at_top_level and not is_known_top_level(code):
        preview = code[:40] + ("..." if len(code) > 40 else "")
        state.report(line_num, f'Unrecognized statement: "{preview}".')

    if needs_semicolon(code):
        state.report(
            line_num,
            "Statement is missing a trailing semicolon.",
            column=indent + len(code),
        )


def _check_field(state: ScanState, line_num: int, code: str) -> None:
    if not is_field_declaration(code) or has_terminated_field_number(code):
        return
    if has_unterminated_field_number(code):
        state.report(line_num, "Field declaration is missing a trailing semicolon.")
    else:
        state.report(line_num, "Field declaration is missing a valid field number.")


def _check_enum_value(state: ScanState, line_num: int, code: str) -> None:
    if not is_enum_value_candidate(code) or ENUM_VALUE_TERMINATED_RE.match(code):
        return
    if ENUM_VALUE_UNTERMINATED_RE.match(code):
        state.report(line_num, "Enum value is missing a trailing semicolon.")
    else:
        state.report(line_num, "Enum value is missing a valid number assignment.")


def _track_braces(state: ScanState, line_num: int, code: str, claimed_brace: bool) -> None:
    """Push anonymous blocks for unclaimed '{', pop one context per '}'."""
    anonymous = code.count("{") - (1 if claimed_brace else 0)
    for _ in range(anonymous):
        state.stack.append(StructuralContext(kind="block", name="", opened_at_line=line_num))
    for _ in range(code.count("}")):
        if state.stack:
            state.stack.pop()
        else:
            state.report(line_num, 'Unexpected closing brace "}".')


def _report_missing_brace(state: ScanState, opened: StructuralContext) -> None:
    state.report(
        opened.opened_at_line,
        f'{opened.label} is missing opening brace "{{".',
    )
