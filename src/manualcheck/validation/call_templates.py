"""
Call template kinds.

A tool's ``callTemplate`` describes how the tool is invoked. Its ``type``
selects a transport kind, and each kind declares the fields it needs. Only
structure is checked: a URL is a non-empty string, not a reachable endpoint.

Additional kinds can be registered at import time with
``register_call_template``.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from manualcheck.validation.context import ValidationContext
from manualcheck.validation.generic import JsonKind

logger = logging.getLogger(__name__)

COMMON_FIELDS = ("type", "name")


@dataclass(frozen=True)
class TemplateField:
    """One field of a call template kind."""

    name: str
    kind: JsonKind = JsonKind.STRING
    required: bool = False
    choices: tuple[Any, ...] = ()


@dataclass(frozen=True)
class CallTemplateKind:
    """Field layout for one transport kind."""

    name: str
    fields: tuple[TemplateField, ...] = ()

    @property
    def field_names(self) -> frozenset[str]:
        return frozenset(COMMON_FIELDS) | {f.name for f in self.fields}


HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")

_HEADERS = TemplateField("headers", JsonKind.OBJECT)

_KINDS: dict[str, CallTemplateKind] = {}


def register_call_template(kind: CallTemplateKind) -> None:
    """
    Register a call template kind.

    Args:
        kind: Kind to register; replaces any kind with the same name
    """
    if kind.name in _KINDS:
        logger.warning("Call template kind '%s' already registered - replacing", kind.name)
    _KINDS[kind.name] = kind


def get_call_template(name: str) -> CallTemplateKind | None:
    """Look up a registered kind by its ``type`` value."""
    return _KINDS.get(name)


def call_template_types() -> tuple[str, ...]:
    """Registered ``type`` values in registration order."""
    return tuple(_KINDS)


for _kind in (
    CallTemplateKind(
        "http",
        (
            TemplateField("url", required=True),
            TemplateField("method", choices=HTTP_METHODS),
            TemplateField("contentType"),
            TemplateField("bodyField"),
            _HEADERS,
        ),
    ),
    CallTemplateKind("sse", (TemplateField("url", required=True), _HEADERS)),
    CallTemplateKind("streamable_http", (TemplateField("url", required=True), _HEADERS)),
    CallTemplateKind(
        "websocket",
        (TemplateField("url", required=True), TemplateField("protocol"), _HEADERS),
    ),
    CallTemplateKind(
        "graphql",
        (
            TemplateField("url", required=True),
            TemplateField("operationType", choices=("query", "mutation", "subscription")),
            TemplateField("operationName"),
            _HEADERS,
        ),
    ),
    CallTemplateKind(
        "grpc",
        (
            TemplateField("host", required=True),
            TemplateField("port", JsonKind.NUMBER, required=True),
            TemplateField("serviceName"),
            TemplateField("methodName"),
            TemplateField("useSsl", JsonKind.BOOLEAN),
        ),
    ),
    CallTemplateKind(
        "cli",
        (
            TemplateField("command", required=True),
            TemplateField("workingDir"),
            TemplateField("env", JsonKind.OBJECT),
        ),
    ),
    CallTemplateKind("mcp", (TemplateField("config", JsonKind.OBJECT, required=True),)),
    CallTemplateKind("text", (TemplateField("path", required=True),)),
):
    register_call_template(_kind)


class CallTemplateValidator:
    """Validates a ``callTemplate`` mapping against its declared kind."""

    def __init__(self, ctx: ValidationContext) -> None:
        self.ctx = ctx

    def validate(self, node: Mapping[str, Any]) -> None:
        ctx = self.ctx
        type_name = ctx.enum(node, "type", call_template_types())
        ctx.string(node, "name", required=False)
        if type_name is None:
            return

        kind = _KINDS[type_name]
        for spec in kind.fields:
            if spec.choices:
                ctx.enum(node, spec.name, spec.choices, required=spec.required)
            elif spec.kind is JsonKind.STRING:
                ctx.string(node, spec.name, required=spec.required)
            else:
                ctx.field(node, spec.name, spec.kind, required=spec.required)

        ctx.unknown_fields(node, kind.field_names)
