"""Tests for validation result formatting."""

import json

from flowline.output.formatter import format_validation_result
from flowline.validators.base import ValidationResult


class TestTextFormat:
    def test_clean_result(self):
        text = format_validation_result(ValidationResult())

        assert text.splitlines() == [
            "ERRORS:",
            "  (none)",
            "",
            "WARNINGS:",
            "  (none)",
            "",
            "Validation passed",
        ]

    def test_issue_location(self):
        result = ValidationResult()
        result.add_error("UNDEFINED_TARGET", "Transition targets undefined state 'X'", "A", "GO")

        text = format_validation_result(result)
        assert "  ✘ UNDEFINED_TARGET: [A on GO] Transition targets undefined state 'X'" in text
        assert text.endswith("Validation failed: 1 error(s), 0 warning(s)")

    def test_warnings_and_notes(self):
        result = ValidationResult()
        result.add_warning("DEAD_END_STATE", "stuck", "B")
        result.add_info("UNSTYLED_STATE", "plain", "C")

        lines = format_validation_result(result).splitlines()
        assert "  ⚠ DEAD_END_STATE: [B] stuck" in lines
        assert "NOTES:" in lines
        assert "  ℹ UNSTYLED_STATE: [C] plain" in lines
        assert lines[-1] == "Validation passed with 1 warning(s)"


class TestJsonFormat:
    def test_json_fields(self):
        result = ValidationResult()
        result.add_error("UNDEFINED_TARGET", "missing", "A", "GO", target="X")

        data = json.loads(format_validation_result(result, "json"))
        assert data["valid"] is False
        assert data["error_count"] == 1
        assert data["warning_count"] == 0
        assert data["issues"] == [
            {
                "code": "UNDEFINED_TARGET",
                "message": "missing",
                "severity": "error",
                "state": "A",
                "event": "GO",
                "details": {"target": "X"},
            }
        ]
