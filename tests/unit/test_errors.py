"""Tests for findings, aggregation and reports."""

from manualcheck.validation.errors import (
    ErrorAggregator,
    ErrorKind,
    ValidationError,
    ValidationReport,
)


def _error(*path: str | int, kind: ErrorKind = ErrorKind.MISSING_FIELD) -> ValidationError:
    return ValidationError(tuple(path), "problem", kind)


class TestErrorAggregator:
    """Tests for ErrorAggregator."""

    def test_none_is_ignored(self) -> None:
        errors = ErrorAggregator()
        assert errors.add(None) is False
        assert errors.is_empty()

    def test_keeps_discovery_order(self) -> None:
        errors = ErrorAggregator()
        errors.add(_error("b"))
        errors.add(_error("a"))
        assert [e.path for e in errors.to_report().errors] == [("b",), ("a",)]

    def test_no_deduplication(self) -> None:
        errors = ErrorAggregator()
        errors.extend([_error("a"), _error("a"), None])
        assert len(errors) == 2

    def test_report_is_frozen_copy(self) -> None:
        errors = ErrorAggregator()
        errors.add(_error("a"))
        report = errors.to_report()
        errors.add(_error("b"))
        assert len(report.errors) == 1
        assert isinstance(report.errors, tuple)


class TestValidationReport:
    """Tests for ValidationReport."""

    def test_valid(self) -> None:
        report = ValidationReport.valid()
        assert report.is_valid
        assert report.to_dict() == {"valid": True, "error_count": 0, "errors": []}

    def test_invalid(self) -> None:
        report = ValidationReport((_error("tools", 0, "inputs"),))
        assert not report.is_valid
        assert report.to_dict()["errors"] == [
            {
                "path": "tools[0].inputs",
                "segments": ["tools", 0, "inputs"],
                "kind": "MissingField",
                "message": "problem",
            }
        ]

    def test_errors_by_path(self) -> None:
        report = ValidationReport(
            (
                ValidationError(("tools", 1, "name"), "first", ErrorKind.DUPLICATE_NAME),
                ValidationError(("version",), "second", ErrorKind.MISSING_FIELD),
                ValidationError(("tools", 1, "name"), "third", ErrorKind.EMPTY_VALUE),
            )
        )
        assert report.errors_by_path() == {
            "tools[1].name": ["first", "third"],
            "version": ["second"],
        }

    def test_of_kind(self) -> None:
        report = ValidationReport(
            (_error("a"), _error("b", kind=ErrorKind.TYPE_MISMATCH), _error("c"))
        )
        assert [e.path for e in report.of_kind(ErrorKind.MISSING_FIELD)] == [("a",), ("c",)]

    def test_error_str(self) -> None:
        assert str(_error("provider", "name")) == "provider.name: problem"
