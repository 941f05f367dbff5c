"""
Manual loading.

Turns JSON or YAML text into a generic document tree. Failures here happen
before validation and are raised as ManualInputError subclasses, never
folded into a ValidationReport.
"""

import json
import logging
from pathlib import Path
from typing import Any, Literal

import yaml

from manualcheck.exceptions import ContractViolationError, ManualNotFoundError, ManualParseError
from manualcheck.validation.generic import ensure_document

logger = logging.getLogger(__name__)

DocumentFormat = Literal["json", "yaml"]

_YAML_SUFFIXES = {".yaml", ".yml"}


def detect_format(path: Path) -> DocumentFormat:
    """Pick a parser from the file extension; JSON unless it looks like YAML."""
    return "yaml" if path.suffix.lower() in _YAML_SUFFIXES else "json"


def parse_document(text: str, fmt: DocumentFormat = "json", source: Path | None = None) -> Any:
    """
    Parse manual text.

    Args:
        text: Raw manual text
        fmt: Input format
        source: File the text came from, for error messages

    Returns:
        Generic document tree

    Raises:
        ManualParseError: If the text is not well-formed
    """
    if fmt == "json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ManualParseError(
                source, f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
            ) from e

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ManualParseError(source, f"invalid YAML: {e}") from e

    # YAML can produce dates, sets and non-string keys
    try:
        ensure_document(document)
    except ContractViolationError as e:
        raise ManualParseError(source, f"YAML value has no JSON equivalent: {e}") from e
    return document


def load_document(path: Path) -> Any:
    """
    Read and parse a manual file.

    Args:
        path: Manual file (.json, .yaml or .yml)

    Returns:
        Generic document tree

    Raises:
        ManualNotFoundError: If the file does not exist
        ManualParseError: If the file cannot be decoded or parsed
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise ManualNotFoundError(path, "file not found")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ManualParseError(path, f"not valid UTF-8: {e}") from e

    fmt = detect_format(path)
    logger.debug("Parsing %s as %s", path, fmt)
    return parse_document(text, fmt, source=path)
