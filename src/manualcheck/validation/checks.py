"""
Primitive checkers.

Each checker inspects one value at one path and returns either None (the
check passed) or a single ValidationError. Checkers never raise, never
recurse and never touch the document.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from manualcheck.validation.errors import ErrorKind, ValidationError
from manualcheck.validation.generic import JsonKind, describe, kind_of
from manualcheck.validation.path import FieldPath


def require_present(doc: Mapping[str, Any], name: str, path: FieldPath) -> ValidationError | None:
    """MissingField if ``name`` is absent from ``doc`` or is null."""
    if doc.get(name) is None:
        return ValidationError(path, f"missing required field '{name}'", ErrorKind.MISSING_FIELD)
    return None


def require_type(value: Any, expected: JsonKind, path: FieldPath) -> ValidationError | None:
    """TypeMismatch if ``value`` is not of the expected JSON kind."""
    if kind_of(value) is expected:
        return None
    return ValidationError(
        path,
        f"expected {expected.value}, got {describe(value)}",
        ErrorKind.TYPE_MISMATCH,
    )


def require_non_empty(value: str, path: FieldPath) -> ValidationError | None:
    """EmptyValue if a string is blank after trimming."""
    if value.strip():
        return None
    return ValidationError(path, "must not be empty", ErrorKind.EMPTY_VALUE)


def require_enum(value: Any, allowed: Iterable[Any], path: FieldPath) -> ValidationError | None:
    """InvalidEnum unless ``value`` structurally equals one member of ``allowed``."""
    options = list(allowed)
    if any(_same(value, option) for option in options):
        return None
    listed = ", ".join(repr(o) for o in options)
    return ValidationError(
        path,
        f"invalid value {value!r}; expected one of: {listed}",
        ErrorKind.INVALID_ENUM,
    )


def _same(a: Any, b: Any) -> bool:
    """Equality that does not confuse booleans with numbers."""
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False
    if kind is JsonKind.OBJECT:
        return a.keys() == b.keys() and all(_same(a[k], b[k]) for k in a)
    if kind is JsonKind.ARRAY:
        return len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    return bool(a == b)
