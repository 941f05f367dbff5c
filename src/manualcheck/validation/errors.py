"""
Validation findings and their aggregation.

A ValidationError is a finding, not an exception: validators collect them
into an ErrorAggregator and hand back a frozen ValidationReport.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from manualcheck.validation.path import FieldPath, render_path


class ErrorKind(Enum):
    """Category of a structural violation."""

    MISSING_FIELD = "MissingField"
    TYPE_MISMATCH = "TypeMismatch"
    INVALID_ENUM = "InvalidEnum"
    EMPTY_VALUE = "EmptyValue"
    DUPLICATE_NAME = "DuplicateName"
    UNKNOWN_FIELD = "UnknownField"


@dataclass(frozen=True)
class ValidationError:
    """A single violation found in a manual."""

    path: FieldPath
    message: str
    kind: ErrorKind

    def render_path(self) -> str:
        """Path as an accessor string, e.g. ``tools[0].inputs``."""
        return render_path(self.path)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serialisable form."""
        return {
            "path": self.render_path(),
            "segments": list(self.path),
            "kind": self.kind.value,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{self.render_path()}: {self.message}"


@dataclass(frozen=True)
class ValidationReport:
    """
    Outcome of validating one document.

    Valid when ``errors`` is empty; otherwise Invalid with errors in
    discovery order (depth-first, declaration order).
    """

    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @classmethod
    def valid(cls) -> "ValidationReport":
        """Report with no findings."""
        return cls()

    @property
    def is_valid(self) -> bool:
        """True when no violations were found."""
        return not self.errors

    def errors_by_path(self) -> dict[str, list[str]]:
        """Group messages by rendered path, keeping discovery order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.render_path(), []).append(error.message)
        return grouped

    def of_kind(self, kind: ErrorKind) -> list[ValidationError]:
        """Errors of a single kind."""
        return [e for e in self.errors if e.kind is kind]

    def to_dict(self) -> dict[str, Any]:
        """JSON-serialisable form."""
        return {
            "valid": self.is_valid,
            "error_count": len(self.errors),
            "errors": [e.to_dict() for e in self.errors],
        }


class ErrorAggregator:
    """Accumulates findings in discovery order. Never raises, never dedupes."""

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def add(self, error: ValidationError | None) -> bool:
        """
        Record a finding.

        Args:
            error: Checker result; None means the check passed

        Returns:
            True if an error was recorded
        """
        if error is None:
            return False
        self._errors.append(error)
        return True

    def extend(self, errors: Iterable[ValidationError | None]) -> None:
        """Record several findings."""
        for error in errors:
            self.add(error)

    def is_empty(self) -> bool:
        return not self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def to_report(self) -> ValidationReport:
        """Freeze accumulated findings into a report."""
        return ValidationReport(errors=tuple(self._errors))
