"""
Shared state for one validation run.

Composite validators combine primitive checkers through a ValidationContext.
The context owns the path tracker and the error aggregator for a single call
and is never reused across calls.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from manualcheck.validation.checks import (
    require_enum,
    require_non_empty,
    require_present,
    require_type,
)
from manualcheck.validation.errors import ErrorAggregator, ErrorKind, ValidationError
from manualcheck.validation.generic import JsonKind
from manualcheck.validation.path import PathTracker


class ValidationContext:
    """Path tracker, error aggregator and options for one run."""

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self.path = PathTracker()
        self.errors = ErrorAggregator()

    def report(self, message: str, kind: ErrorKind, *extra: str | int) -> None:
        """Record a finding at the current path plus ``extra``."""
        self.errors.add(ValidationError(self.path.at(*extra), message, kind))

    def field(
        self,
        doc: Mapping[str, Any],
        name: str,
        expected: JsonKind,
        required: bool = True,
    ) -> Any | None:
        """
        Presence and type check for one field.

        An absent required field is reported once as MissingField and is
        not type checked. An absent optional field is skipped silently.

        Args:
            doc: Mapping that owns the field
            name: Field name
            expected: Required JSON kind
            required: Whether absence is a violation

        Returns:
            The value if present and of the right kind, else None
        """
        target = self.path.at(name)
        if doc.get(name) is None:
            if required:
                self.errors.add(require_present(doc, name, target))
            return None
        value = doc[name]
        if self.errors.add(require_type(value, expected, target)):
            return None
        return value

    def string(
        self,
        doc: Mapping[str, Any],
        name: str,
        required: bool = True,
        allow_empty: bool = False,
    ) -> str | None:
        """String field; blank strings are EmptyValue unless ``allow_empty``."""
        value = self.field(doc, name, JsonKind.STRING, required)
        if value is None:
            return None
        if not allow_empty and self.errors.add(require_non_empty(value, self.path.at(name))):
            return None
        return value

    def enum(
        self,
        doc: Mapping[str, Any],
        name: str,
        allowed: Iterable[Any],
        required: bool = True,
    ) -> Any | None:
        """Field restricted to a fixed set of literals."""
        target = self.path.at(name)
        if doc.get(name) is None:
            if required:
                self.errors.add(require_present(doc, name, target))
            return None
        value = doc[name]
        if self.errors.add(require_enum(value, allowed, target)):
            return None
        return value

    def string_list(
        self,
        doc: Mapping[str, Any],
        name: str,
        required: bool = True,
        unique: bool = False,
    ) -> list[str] | None:
        """
        Array of strings.

        Each non-string element is a TypeMismatch at its index. With
        ``unique``, repeats after the first occurrence are DuplicateName.

        Returns:
            The string elements, or None if the field itself failed
        """
        items = self.field(doc, name, JsonKind.ARRAY, required)
        if items is None:
            return None
        seen: set[str] = set()
        strings: list[str] = []
        with self.path.enter(name):
            for index, item in enumerate(items):
                if self.errors.add(require_type(item, JsonKind.STRING, self.path.at(index))):
                    continue
                if unique and item in seen:
                    self.report(f"duplicate value '{item}'", ErrorKind.DUPLICATE_NAME, index)
                    continue
                seen.add(item)
                strings.append(item)
        return strings

    def unknown_fields(self, doc: Mapping[str, Any], known: Iterable[str]) -> None:
        """In strict mode, flag keys outside ``known``."""
        if not self.strict:
            return
        allowed = set(known)
        for key in doc:
            if key not in allowed:
                self.report(f"unknown field '{key}'", ErrorKind.UNKNOWN_FIELD, key)
