"""Human-readable catalog of the style rules the validator enforces."""

from __future__ import annotations

from pydantic import BaseModel

from protolint.validator.models import RULE_SEVERITIES, RuleId, ValidationSeverity


class RuleDescription(BaseModel):
    name: str
    rule: RuleId
    description: str
    severity: ValidationSeverity


_DESCRIPTIONS: list[tuple[str, RuleId, str]] = [
    ("Syntax Declaration", RuleId.syntax_declaration, "Files must declare syntax version"),
    ("Package Name", RuleId.package_declaration, "Package should be declared"),
    ("File Structure", RuleId.file_structure, "Syntax is declared before the package"),
    ("PascalCase Messages", RuleId.message_name_pascal_case, "Message names use PascalCase"),
    ("PascalCase Enums", RuleId.enum_name_pascal_case, "Enum names use PascalCase"),
    ("snake_case Fields", RuleId.field_name_snake_case, "Field names use snake_case"),
    (
        "UPPER_SNAKE_CASE Enums",
        RuleId.enum_value_upper_snake_case,
        "Enum values use UPPER_SNAKE_CASE",
    ),
    (
        "Enum UNSPECIFIED",
        RuleId.enum_first_value_unspecified,
        "First enum value should be UNSPECIFIED = 0",
    ),
    ("Import Ordering", RuleId.import_ordering, "Public imports come first"),
    ("Service Comments", RuleId.service_comment, "Services should have comments"),
    ("RPC Comments", RuleId.rpc_comment, "RPCs should have comments"),
    ("Line Length", RuleId.max_line_length, "Lines should not exceed 80 characters"),
    ("Trailing Newline", RuleId.trailing_newline, "Files should end with a newline"),
]

RULE_CATALOG: list[RuleDescription] = [
    RuleDescription(
        name=name,
        rule=rule,
        description=description,
        severity=RULE_SEVERITIES[rule],
    )
    for name, rule, description in _DESCRIPTIONS
]
