"""Structural validation of manual documents."""

from manualcheck.validation.call_templates import (
    CallTemplateKind,
    TemplateField,
    call_template_types,
    get_call_template,
    register_call_template,
)
from manualcheck.validation.errors import (
    ErrorAggregator,
    ErrorKind,
    ValidationError,
    ValidationReport,
)
from manualcheck.validation.manual import (
    ManualValidator,
    SchemaManualValidator,
    create_validator,
    resolve_validator,
    validate_manual,
)
from manualcheck.validation.path import PathTracker, render_path

__all__ = [
    "CallTemplateKind",
    "ErrorAggregator",
    "ErrorKind",
    "ManualValidator",
    "PathTracker",
    "SchemaManualValidator",
    "TemplateField",
    "ValidationError",
    "ValidationReport",
    "call_template_types",
    "create_validator",
    "get_call_template",
    "register_call_template",
    "render_path",
    "resolve_validator",
    "validate_manual",
]
