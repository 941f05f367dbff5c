"""
Exception hierarchy.

Validation findings are returned as values in a ValidationReport. The
exceptions here cover the stages that must stop a run before or instead of
validation: loading the validator, parsing input, and caller misuse.
"""

from pathlib import Path


class ManualCheckError(Exception):
    """Base class for all manualcheck failures."""


class ValidatorUnavailableError(ManualCheckError):
    """Raised when the configured validator cannot be imported or built."""

    def __init__(self, spec: str, reason: str) -> None:
        self.spec = spec
        self.reason = reason
        super().__init__(f"Failed to load validator '{spec}': {reason}")


class ConfigError(ManualCheckError):
    """Raised when configuration files or environment values are invalid."""


class ManualInputError(ManualCheckError):
    """Raised when a manual cannot be turned into a document."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        where = f" '{path}'" if path else ""
        super().__init__(f"Cannot read manual{where}: {reason}")


class ManualNotFoundError(ManualInputError):
    """Raised when the manual file does not exist."""


class ManualParseError(ManualInputError):
    """Raised when the manual text is not well-formed JSON or YAML."""


class ContractViolationError(ManualCheckError, TypeError):
    """Raised when validate() is given something that is not a document tree."""

    def __init__(self, value: object, location: str = "<root>") -> None:
        self.value = value
        self.location = location
        super().__init__(
            f"Expected a JSON-like document, got {type(value).__name__} at {location}"
        )
