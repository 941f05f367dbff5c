"""
manualcheck - structural validator for tool manuals.

A manual describes a provider and the callable tools it exposes. The
validator walks the whole document and reports every violation it finds,
each with the path of the offending field.

Public API for library consumers:
  validate_manual(document)    # one-shot validation
  SchemaManualValidator        # reusable validator
  load_document(path)          # JSON/YAML manual loading
"""

from manualcheck.config.loader import ConfigLoader
from manualcheck.config.schema import ManualCheckConfig
from manualcheck.core.logging import get_logger, setup_logging
from manualcheck.document import load_document, parse_document
from manualcheck.exceptions import (
    ConfigError,
    ContractViolationError,
    ManualCheckError,
    ManualInputError,
    ManualNotFoundError,
    ManualParseError,
    ValidatorUnavailableError,
)
from manualcheck.validation import (
    CallTemplateKind,
    ErrorAggregator,
    ErrorKind,
    ManualValidator,
    PathTracker,
    SchemaManualValidator,
    TemplateField,
    ValidationError,
    ValidationReport,
    create_validator,
    register_call_template,
    render_path,
    resolve_validator,
    validate_manual,
)

__version__ = "0.1.0"

__all__ = [
    # Validation
    "ErrorAggregator",
    "ErrorKind",
    "ManualValidator",
    "PathTracker",
    "SchemaManualValidator",
    "ValidationError",
    "ValidationReport",
    "create_validator",
    "render_path",
    "resolve_validator",
    "validate_manual",
    # Call templates
    "CallTemplateKind",
    "TemplateField",
    "register_call_template",
    # Documents
    "load_document",
    "parse_document",
    # Config
    "ConfigLoader",
    "ManualCheckConfig",
    # Logging
    "get_logger",
    "setup_logging",
    # Errors
    "ConfigError",
    "ContractViolationError",
    "ManualCheckError",
    "ManualInputError",
    "ManualNotFoundError",
    "ManualParseError",
    "ValidatorUnavailableError",
]
