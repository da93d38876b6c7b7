"""Validation pipeline for .proto source text."""

from protolint.validator.models import (
    RuleId,
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)
from protolint.validator.pipeline import validate

__all__ = [
    "RuleId",
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
    "validate",
]
