"""
Input/output schema validation.

A tool's ``inputs`` and ``outputs`` are recursive type descriptors. Object
schemas declare ``properties`` and ``required``, array schemas declare
``items``, and ``anyOf`` schemas list alternatives. Every branch is walked;
a bad sub-schema never hides its siblings.
"""

from collections.abc import Mapping
from typing import Any

from manualcheck.validation.checks import require_type
from manualcheck.validation.context import ValidationContext
from manualcheck.validation.errors import ErrorKind
from manualcheck.validation.generic import JsonKind

SCHEMA_TYPES = ("object", "array", "string", "number", "integer", "boolean", "null", "anyOf")

SCHEMA_FIELDS = frozenset(
    {"type", "description", "title", "default", "enum", "properties", "required", "items", "anyOf"}
)


class SchemaValidator:
    """Validates one schema node and recurses into its children."""

    def __init__(self, ctx: ValidationContext) -> None:
        self.ctx = ctx

    def validate(self, node: Mapping[str, Any]) -> None:
        """
        Validate a schema mapping at the context's current path.

        Args:
            node: Schema node, already known to be a mapping
        """
        ctx = self.ctx
        schema_type = ctx.enum(node, "type", SCHEMA_TYPES)
        ctx.string(node, "description", required=False, allow_empty=True)
        ctx.field(node, "enum", JsonKind.ARRAY, required=False)

        if schema_type == "object":
            self._validate_object(node)
        elif schema_type == "array":
            self._validate_array(node)
        elif schema_type == "anyOf":
            self._validate_any_of(node)

        ctx.unknown_fields(node, SCHEMA_FIELDS)

    def _validate_child(self, container: Mapping[str, Any] | list[Any], key: str | int) -> None:
        """Type-check a nested schema and recurse if it is a mapping."""
        value = container[key]
        if self.ctx.errors.add(require_type(value, JsonKind.OBJECT, self.ctx.path.at(key))):
            return
        with self.ctx.path.enter(key):
            self.validate(value)

    def _validate_object(self, node: Mapping[str, Any]) -> None:
        ctx = self.ctx
        properties = ctx.field(node, "properties", JsonKind.OBJECT)
        if properties is not None:
            with ctx.path.enter("properties"):
                for name in properties:
                    self._validate_child(properties, name)

        required = ctx.string_list(node, "required")
        if properties is None or required is None:
            return
        for name in required:
            if name not in properties:
                ctx.report(
                    f"required property '{name}' is not declared in properties",
                    ErrorKind.MISSING_FIELD,
                    "properties",
                    name,
                )

    def _validate_array(self, node: Mapping[str, Any]) -> None:
        if self.ctx.field(node, "items", JsonKind.OBJECT) is not None:
            with self.ctx.path.enter("items"):
                self.validate(node["items"])

    def _validate_any_of(self, node: Mapping[str, Any]) -> None:
        ctx = self.ctx
        alternatives = ctx.field(node, "anyOf", JsonKind.ARRAY)
        if alternatives is None:
            return
        if not alternatives:
            ctx.report("must list at least one alternative", ErrorKind.EMPTY_VALUE, "anyOf")
            return
        with ctx.path.enter("anyOf"):
            for index in range(len(alternatives)):
                self._validate_child(alternatives, index)
