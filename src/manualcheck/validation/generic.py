"""
Helpers for untyped document values.

A document is the result of generic deserialization: mappings with string
keys, sequences, strings, numbers, booleans and None. These helpers classify
runtime values into JSON kinds so checkers can report type mismatches
instead of raising.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from manualcheck.exceptions import ContractViolationError


class JsonKind(Enum):
    """Runtime shape of a document value."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(value: Any) -> JsonKind | None:
    """
    Classify a value.

    Args:
        value: Any document value

    Returns:
        The JSON kind, or None for values no deserializer produces
    """
    # bool before number: bool is an int subclass
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    return None


def describe(value: Any) -> str:
    """Short kind name for messages."""
    kind = kind_of(value)
    return kind.value if kind else type(value).__name__


def ensure_document(value: Any) -> None:
    """
    Check that a value is a generic document tree.

    Walks the whole tree once. Mapping keys must be strings.

    Raises:
        ContractViolationError: If any node is not a document value
    """
    stack: list[tuple[Any, str]] = [(value, "<root>")]
    while stack:
        node, location = stack.pop()
        kind = kind_of(node)
        if kind is None:
            raise ContractViolationError(node, location)
        if kind is JsonKind.OBJECT:
            for key, child in node.items():
                if not isinstance(key, str):
                    raise ContractViolationError(key, f"{location} (mapping key)")
                stack.append((child, f"{location}.{key}"))
        elif kind is JsonKind.ARRAY:
            for index, child in enumerate(node):
                stack.append((child, f"{location}[{index}]"))
