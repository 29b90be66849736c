"""Tests for validation result bookkeeping."""

from flowline.validators.base import Severity, ValidationResult


class TestValidationResult:
    def test_issues_split_by_severity(self):
        result = ValidationResult()
        result.add_error("UNDEFINED_TARGET", "missing", "A", "GO", target="X")
        result.add_warning("DEAD_END_STATE", "stuck", state="B")
        result.add("info", "UNSTYLED_STATE", "plain", "C")

        assert [i.code for i in result.errors] == ["UNDEFINED_TARGET"]
        assert result.errors[0].event == "GO"
        assert result.errors[0].details == {"target": "X"}
        assert result.warnings[0].state == "B"
        assert result.infos[0].severity is Severity.INFO
        assert not result.is_valid

    def test_merge(self):
        first = ValidationResult()
        first.add_warning("DEAD_END_STATE", "stuck", "B")
        second = ValidationResult()
        second.add_error("UNDEFINED_INITIAL", "missing", "Z")

        first.merge(second)
        assert [i.code for i in first.issues] == ["DEAD_END_STATE", "UNDEFINED_INITIAL"]
        assert first.has_errors and first.has_warnings
