"""
Manual validation entry point.

ManualValidator is the interface callers depend on. SchemaManualValidator is
the built-in implementation; a different one can be named in configuration
and is loaded with resolve_validator().
"""

import importlib
import logging
from abc import ABC, abstractmethod
from typing import Any

from manualcheck.exceptions import ValidatorUnavailableError
from manualcheck.validation.checks import require_type
from manualcheck.validation.context import ValidationContext
from manualcheck.validation.errors import ValidationReport
from manualcheck.validation.generic import JsonKind, ensure_document
from manualcheck.validation.tools import ProviderValidator, validate_tools

logger = logging.getLogger(__name__)

MANUAL_FIELDS = frozenset({"$schema", "version", "provider", "tools"})

DEFAULT_VALIDATOR = "manualcheck.validation.manual:create_validator"


class ManualValidator(ABC):
    """Validates a deserialized manual document."""

    @abstractmethod
    def validate(self, document: Any) -> ValidationReport:
        """
        Validate a document.

        Args:
            document: Generic tree produced by JSON/YAML deserialization

        Returns:
            Report with every violation found

        Raises:
            ContractViolationError: If ``document`` is not a generic tree
        """
        pass


class SchemaManualValidator(ManualValidator):
    """Structural validator for the built-in manual shape."""

    def __init__(self, strict: bool = False) -> None:
        """
        Initialize validator.

        Args:
            strict: Report fields that are not part of the manual shape
        """
        self.strict = strict

    def validate(self, document: Any) -> ValidationReport:
        ensure_document(document)
        ctx = ValidationContext(strict=self.strict)
        logger.debug("Validating manual (strict=%s)", self.strict)

        if ctx.errors.add(require_type(document, JsonKind.OBJECT, ctx.path.current)):
            return ctx.errors.to_report()

        ctx.string(document, "version")

        provider = ctx.field(document, "provider", JsonKind.OBJECT)
        if provider is not None:
            with ctx.path.enter("provider"):
                ProviderValidator(ctx).validate(provider)

        tools = ctx.field(document, "tools", JsonKind.ARRAY)
        if tools is not None:
            validate_tools(ctx, tools)

        ctx.unknown_fields(document, MANUAL_FIELDS)

        report = ctx.errors.to_report()
        logger.debug("Validation finished with %d error(s)", len(report.errors))
        return report


def create_validator(strict: bool = False) -> ManualValidator:
    """Default validator factory."""
    return SchemaManualValidator(strict=strict)


def validate_manual(document: Any, strict: bool = False) -> ValidationReport:
    """Validate a document with the built-in validator."""
    return SchemaManualValidator(strict=strict).validate(document)


def resolve_validator(spec: str = DEFAULT_VALIDATOR, strict: bool = False) -> ManualValidator:
    """
    Load a validator from a ``module:attribute`` factory path.

    The attribute is called with ``strict`` and must return a
    ManualValidator.

    Raises:
        ValidatorUnavailableError: If the module, the attribute or the
            built object is unusable
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValidatorUnavailableError(spec, "expected 'module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        raise ValidatorUnavailableError(spec, f"import failed: {e}") from e

    factory = getattr(module, attr, None)
    if not callable(factory):
        raise ValidatorUnavailableError(spec, f"'{attr}' is not a callable in {module_name}")

    try:
        validator = factory(strict=strict)
    except Exception as e:
        raise ValidatorUnavailableError(spec, f"factory failed: {e}") from e

    if not isinstance(validator, ManualValidator):
        raise ValidatorUnavailableError(
            spec, f"factory returned {type(validator).__name__}, not a ManualValidator"
        )
    logger.debug("Loaded validator %s", spec)
    return validator
