"""Validation pipeline: runs both passes and merges their findings."""

from __future__ import annotations

import logging

from protolint.validator.models import ValidationIssue, ValidationReport, ValidationSeverity
from protolint.validator.structure import check_structure
from protolint.validator.style_rules import check_style

logger = logging.getLogger(__name__)


def validate(content: str) -> ValidationReport:
    """Validate .proto source text against structure and style rules.

    Never raises: malformed input is reported as issues, not exceptions.
    """
    lines = content.split("\n")

    style_issues = check_style(content, lines)
    structure_issues = check_structure(lines)
    logger.debug(
        "Style pass produced %d issues, structural pass produced %d issues over %d lines",
        len(style_issues),
        len(structure_issues),
        len(lines),
    )

    return build_report(style_issues + structure_issues)


def build_report(issues: list[ValidationIssue]) -> ValidationReport:
    """Sort issues by position and partition them by severity.

    The sort is stable, so issues at the same position keep emission order.
    """
    ordered = sorted(issues, key=lambda i: (i.line, i.column))
    errors = [i for i in ordered if i.severity == ValidationSeverity.error]
    warnings = [i for i in ordered if i.severity == ValidationSeverity.warning]
    info = [i for i in ordered if i.severity == ValidationSeverity.info]

    return ValidationReport(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        info=info,
    )
