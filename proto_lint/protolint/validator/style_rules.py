"""Google protobuf style guide checks.

Runs independently of the structural scan: a malformed file still gets style
findings for the parts that are recognizable.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from protolint.patterns import (
    ENUM_NAME_RE,
    ENUM_VALUE_RE,
    FIELD_ASSIGNMENT_RE,
    MAX_LINE_LENGTH,
    MESSAGE_NAME_RE,
    is_comment,
    is_pascal_case,
    is_snake_case,
    is_upper_snake_case,
    strip_inline_comment,
)
from protolint.validator.models import RuleId, ValidationIssue, make_issue


@dataclass
class EnumValue:
    name: str
    number: int
    line: int


@dataclass
class EnumAccumulator:
    """Values collected for the enum block currently open."""

    name: str
    start_line: int
    depth: int
    values: list[EnumValue] = field(default_factory=list)


@dataclass
class ImportRecord:
    line: int
    text: str
    is_public: bool


@dataclass
class StyleState:
    """Mutable state owned by a single style pass."""

    issues: list[ValidationIssue] = field(default_factory=list)
    syntax_line: int | None = None
    package_line: int | None = None
    imports: list[ImportRecord] = field(default_factory=list)
    prev_line_is_comment: bool = False
    brace_depth: int = 0
    service_depth: int | None = None
    current_enum: EnumAccumulator | None = None
    in_block_comment: bool = False

    def report(self, rule: RuleId, line: int, message: str, column: int = 1) -> None:
        self.issues.append(make_issue(rule, line, message, column))


def check_style(content: str, lines: list[str]) -> list[ValidationIssue]:
    """Apply every style rule to the source and return the findings."""
    state = StyleState()

    if content and not content.endswith("\n"):
        state.report(
            RuleId.trailing_newline,
            len(lines),
            "File should end with a trailing newline.",
        )

    for line_num, raw in enumerate(lines, start=1):
        _check_line(state, line_num, raw)

    check_file_structure(state)
    check_import_ordering(state)
    return state.issues


def _check_line(state: StyleState, line_num: int, raw: str) -> None:
    trimmed = raw.strip()
    comment = is_comment(trimmed)

    if len(raw) > MAX_LINE_LENGTH:
        state.report(
            RuleId.max_line_length,
            line_num,
            f"Line exceeds {MAX_LINE_LENGTH} characters ({len(raw)}).",
            column=MAX_LINE_LENGTH + 1,
        )

    if state.in_block_comment:
        state.in_block_comment = "*/" not in trimmed
        state.prev_line_is_comment = True
        return
    if trimmed.startswith("/*"):
        state.in_block_comment = "*/" not in trimmed

    if trimmed.startswith("syntax"):
        state.syntax_line = line_num
    if trimmed.startswith("package "):
        state.package_line = line_num
    if trimmed.startswith("import "):
        state.imports.append(
            ImportRecord(
                line=line_num,
                text=trimmed,
                is_public=trimmed.startswith("import public "),
            )
        )

    msg_match = MESSAGE_NAME_RE.match(trimmed)
    if msg_match and not is_pascal_case(msg_match.group(1)):
        state.report(
            RuleId.message_name_pascal_case,
            line_num,
            f'Message name "{msg_match.group(1)}" should be PascalCase.',
        )

    enum_match = ENUM_NAME_RE.match(trimmed)
    if enum_match:
        name = enum_match.group(1)
        if not is_pascal_case(name):
            state.report(
                RuleId.enum_name_pascal_case,
                line_num,
                f'Enum name "{name}" should be PascalCase.',
            )
        state.current_enum = EnumAccumulator(
            name=name, start_line=line_num, depth=state.brace_depth
        )
        _, brace, body = strip_inline_comment(trimmed).partition("{")
        if brace:
            # enum E { A = 0; B = 1; }
            for statement in body.split(";"):
                _collect_enum_value(state, state.current_enum, line_num, statement.strip())
    elif state.current_enum is not None:
        _collect_enum_value(state, state.current_enum, line_num, trimmed)

    field_match = FIELD_ASSIGNMENT_RE.match(trimmed)
    if field_match and state.current_enum is None:
        name = field_match.group(1)
        if not is_snake_case(name):
            state.report(
                RuleId.field_name_snake_case,
                line_num,
                f'Field name "{name}" should be snake_case.',
            )

    if trimmed.startswith("service "):
        if state.service_depth is None:
            state.service_depth = state.brace_depth
        if not state.prev_line_is_comment:
            state.report(RuleId.service_comment, line_num, "Service should have a comment.")
    elif state.service_depth is not None and trimmed.startswith("rpc "):
        if not state.prev_line_is_comment:
            state.report(RuleId.rpc_comment, line_num, "RPC should have a comment.")

    if not comment:
        _track_depth(state, strip_inline_comment(trimmed))

    state.prev_line_is_comment = comment


def _collect_enum_value(
    state: StyleState, accumulator: EnumAccumulator, line_num: int, trimmed: str,
) -> None:
    value_match = ENUM_VALUE_RE.match(trimmed)
    if not value_match:
        return
    name = value_match.group(1)
    accumulator.values.append(
        EnumValue(name=name, number=int(value_match.group(2)), line=line_num)
    )
    if not is_upper_snake_case(name):
        state.report(
            RuleId.enum_value_upper_snake_case,
            line_num,
            f'Enum value "{name}" should be UPPER_SNAKE_CASE.',
        )


def _track_depth(state: StyleState, code: str) -> None:
    """Follow brace depth; close the open service or enum when depth returns."""
    for ch in code:
        if ch == "{":
            state.brace_depth += 1
        elif ch == "}":
            state.brace_depth -= 1
            if state.service_depth is not None and state.brace_depth <= state.service_depth:
                state.service_depth = None
            enum = state.current_enum
            if enum is not None and state.brace_depth <= enum.depth:
                check_enum_first_value(state, enum)
                state.current_enum = None


def check_enum_first_value(state: StyleState, enum: EnumAccumulator) -> None:
    """The first value of an enum must be <NAME>_UNSPECIFIED = 0."""
    if not enum.values:
        return
    first = enum.values[0]
    if first.number != 0 or not first.name.endswith("UNSPECIFIED"):
        state.report(
            RuleId.enum_first_value_unspecified,
            enum.start_line,
            f'Enum "{enum.name}" should have an UNSPECIFIED value as the first entry (= 0).',
        )


def check_file_structure(state: StyleState) -> None:
    """syntax must be declared, a package should be, and syntax comes first."""
    if state.syntax_line is None:
        state.report(
            RuleId.syntax_declaration,
            1,
            'File should start with a syntax declaration (e.g., syntax = "proto3";).',
        )
    if state.package_line is None:
        state.report(RuleId.package_declaration, 1, "File should declare a package.")
    if (
        state.syntax_line is not None
        and state.package_line is not None
        and state.package_line < state.syntax_line
    ):
        state.report(
            RuleId.file_structure,
            state.package_line,
            "Package declaration should come after the syntax declaration.",
        )


def check_import_ordering(state: StyleState) -> None:
    """Public imports come before any other import."""
    seen_non_public = False
    for record in state.imports:
        if not record.is_public:
            seen_non_public = True
        elif seen_non_public:
            state.report(
                RuleId.import_ordering,
                record.line,
                "Public imports should come before other imports.",
            )
