"""Output formatting for validation results."""

import json
from typing import Literal

from ..validators.base import Severity, ValidationIssue, ValidationResult


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_section(title: str, issues: list[ValidationIssue]) -> list[str]:
    lines = [f"{title}:"]
    if issues:
        lines.extend(f"  {_format_issue_text(issue)}" for issue in issues)
    else:
        lines.append("  (none)")
    return lines


def _format_text(result: ValidationResult) -> str:
    """Format result as human-readable text."""
    errors = result.errors
    warnings = result.warnings

    lines = _format_section("ERRORS", errors)
    lines.append("")
    lines.extend(_format_section("WARNINGS", warnings))

    if result.infos:
        lines.append("")
        lines.extend(_format_section("NOTES", result.infos))

    lines.append("")
    if result.is_valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue) -> str:
    """Format a single issue as text."""
    location = ""
    if issue.state:
        location = f"[{issue.state}"
        if issue.event:
            location += f" on {issue.event}"
        location += "] "

    if issue.severity == Severity.ERROR:
        symbol = "✘"
    elif issue.severity == Severity.WARNING:
        symbol = "⚠"
    else:
        symbol = "ℹ"

    return f"{symbol} {issue.code}: {location}{issue.message}"


def _format_json(result: ValidationResult) -> str:
    """Format result as JSON."""
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "state": issue.state,
                "event": issue.event,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)
