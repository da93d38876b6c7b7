"""Validation data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    error = "error"
    warning = "warning"
    info = "info"


class RuleId(str, Enum):
    """Identifiers of every check the validator can report."""

    syntax_error = "syntax-error"
    trailing_newline = "trailing-newline"
    max_line_length = "max-line-length"
    syntax_declaration = "syntax-declaration"
    package_declaration = "package-declaration"
    file_structure = "file-structure"
    message_name_pascal_case = "message-name-pascal-case"
    enum_name_pascal_case = "enum-name-pascal-case"
    enum_value_upper_snake_case = "enum-value-upper-snake-case"
    enum_first_value_unspecified = "enum-first-value-unspecified"
    field_name_snake_case = "field-name-snake-case"
    service_comment = "service-comment"
    rpc_comment = "rpc-comment"
    import_ordering = "import-ordering"


RULE_SEVERITIES: dict[RuleId, ValidationSeverity] = {
    RuleId.syntax_error: ValidationSeverity.error,
    RuleId.trailing_newline: ValidationSeverity.warning,
    RuleId.max_line_length: ValidationSeverity.warning,
    RuleId.syntax_declaration: ValidationSeverity.error,
    RuleId.package_declaration: ValidationSeverity.warning,
    RuleId.file_structure: ValidationSeverity.error,
    RuleId.message_name_pascal_case: ValidationSeverity.error,
    RuleId.enum_name_pascal_case: ValidationSeverity.error,
    RuleId.enum_value_upper_snake_case: ValidationSeverity.error,
    RuleId.enum_first_value_unspecified: ValidationSeverity.error,
    RuleId.field_name_snake_case: ValidationSeverity.error,
    RuleId.service_comment: ValidationSeverity.warning,
    RuleId.rpc_comment: ValidationSeverity.warning,
    RuleId.import_ordering: ValidationSeverity.warning,
}


class ValidationIssue(BaseModel):
    """A single validation finding, located by 1-based line and column."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int = 1
    rule: RuleId
    message: str
    severity: ValidationSeverity


class ValidationReport(BaseModel):
    """Issues partitioned by severity, each list ordered by (line, column)."""

    valid: bool = True
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    info: list[ValidationIssue] = Field(default_factory=list)


def make_issue(rule: RuleId, line: int, message: str, column: int = 1) -> ValidationIssue:
    """Build an issue at the fixed severity of its rule."""
    return ValidationIssue(
        line=line,
        column=column,
        rule=rule,
        message=message,
        severity=RULE_SEVERITIES[rule],
    )
