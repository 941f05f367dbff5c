"""Provider and tool descriptor validation."""

from collections.abc import Mapping, Sequence
from typing import Any

from manualcheck.validation.call_templates import CallTemplateValidator
from manualcheck.validation.checks import require_type
from manualcheck.validation.context import ValidationContext
from manualcheck.validation.errors import ErrorKind
from manualcheck.validation.generic import JsonKind
from manualcheck.validation.schema import SchemaValidator

PROVIDER_FIELDS = frozenset({"name", "description"})

TOOL_FIELDS = frozenset(
    {"name", "description", "inputs", "outputs", "tags", "callTemplate", "averageResponseSize"}
)


class ProviderValidator:
    """Validates the manual's ``provider`` block."""

    def __init__(self, ctx: ValidationContext) -> None:
        self.ctx = ctx

    def validate(self, node: Mapping[str, Any]) -> None:
        self.ctx.string(node, "name")
        self.ctx.string(node, "description", allow_empty=True)
        self.ctx.unknown_fields(node, PROVIDER_FIELDS)


class ToolValidator:
    """Validates a single tool descriptor."""

    def __init__(self, ctx: ValidationContext) -> None:
        self.ctx = ctx

    def validate(self, node: Mapping[str, Any]) -> None:
        """
        Validate one tool at the context's current path.

        Fields are checked in declaration order. Schemas and the call
        template are only walked when they are mappings.
        """
        ctx = self.ctx
        ctx.string(node, "name")
        ctx.string(node, "description", allow_empty=True)

        for key in ("inputs", "outputs"):
            schema = ctx.field(node, key, JsonKind.OBJECT)
            if schema is not None:
                with ctx.path.enter(key):
                    SchemaValidator(ctx).validate(schema)

        ctx.string_list(node, "tags", required=False, unique=True)
        ctx.field(node, "averageResponseSize", JsonKind.NUMBER, required=False)

        template = ctx.field(node, "callTemplate", JsonKind.OBJECT)
        if template is not None:
            with ctx.path.enter("callTemplate"):
                CallTemplateValidator(ctx).validate(template)

        ctx.unknown_fields(node, TOOL_FIELDS)


def validate_tools(ctx: ValidationContext, tools: Sequence[Any]) -> None:
    """
    Validate the ``tools`` array at the context's current path.

    Each tool is validated on its own so one broken tool never hides
    another. Duplicate names are checked afterwards across the whole list:
    the first occurrence is kept, every later one is flagged at its own
    element path (``tools[i]``).
    """
    with ctx.path.enter("tools"):
        for index, tool in enumerate(tools):
            if ctx.errors.add(require_type(tool, JsonKind.OBJECT, ctx.path.at(index))):
                continue
            with ctx.path.enter(index):
                ToolValidator(ctx).validate(tool)

        first_seen: dict[str, int] = {}
        for index, tool in enumerate(tools):
            name = _tool_name(tool)
            if name is None:
                continue
            if name in first_seen:
                ctx.report(
                    f"duplicate tool name '{name}' (first defined at tools[{first_seen[name]}])",
                    ErrorKind.DUPLICATE_NAME,
                    index,
                )
            else:
                first_seen[name] = index


def _tool_name(tool: Any) -> str | None:
    """Name usable for duplicate detection, if the tool has a valid one."""
    if not isinstance(tool, Mapping):
        return None
    name = tool.get("name")
    if isinstance(name, str) and name.strip():
        return name
    return None
