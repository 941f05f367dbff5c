"""Tests for the public library API."""

import logging
import sys
from pathlib import Path

import manualcheck
from manualcheck import (
    ErrorKind,
    ManualCheckConfig,
    SchemaManualValidator,
    ValidationReport,
    get_logger,
    setup_logging,
    validate_manual,
)
from manualcheck.ui.report import render_json, render_text
from rich.console import Console
from rich.logging import RichHandler


class TestExports:
    """Tests for names exported from the package root."""

    def test_all_names_resolve(self) -> None:
        for name in manualcheck.__all__:
            assert hasattr(manualcheck, name), name

    def test_version(self) -> None:
        assert manualcheck.__version__ == "0.1.0"

    def test_validator_reusable(self) -> None:
        validator = SchemaManualValidator()
        first = validator.validate({})
        second = validator.validate({"version": "1", "provider": {}, "tools": []})
        assert len(first.errors) == 3
        assert [e.kind for e in second.errors] == [ErrorKind.MISSING_FIELD] * 2


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_levels(self, isolated_home: Path) -> None:
        logger = setup_logging(ManualCheckConfig(log_level="DEBUG"))
        assert logger.name == "manualcheck"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, isolated_home: Path, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "manualcheck.log"
        logger = setup_logging(ManualCheckConfig(log_file=log_file))
        assert len(logger.handlers) == 2
        assert log_file.parent.is_dir()
        for handler in logger.handlers:
            handler.close()

    def test_text_format_uses_rich(self, isolated_home: Path) -> None:
        logger = setup_logging(ManualCheckConfig())
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_json_format_uses_plain_stderr_records(self, isolated_home: Path) -> None:
        """JSON reports keep log records as plain lines on stderr."""
        config = ManualCheckConfig(log_level="DEBUG", output={"format": "json"})
        logger = setup_logging(config)
        (handler,) = logger.handlers
        assert not isinstance(handler, RichHandler)
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

        record = logging.LogRecord("manualcheck.cli", logging.DEBUG, __file__, 1, "hi", None, None)
        assert handler.format(record) == "DEBUG manualcheck.cli: hi"

    def test_repeated_setup_closes_file_handler(self, isolated_home: Path, tmp_path: Path) -> None:
        log_file = tmp_path / "manualcheck.log"
        first = setup_logging(ManualCheckConfig(log_file=log_file))
        (file_handler,) = [h for h in first.handlers if isinstance(h, logging.FileHandler)]

        second = setup_logging(ManualCheckConfig())
        assert file_handler not in second.handlers
        assert file_handler.stream is None

    def test_get_logger_prefix(self) -> None:
        assert get_logger("cli").name == "manualcheck.cli"


class TestRendering:
    """Tests for report rendering."""

    def test_text_valid(self) -> None:
        console = Console(record=True, width=120)
        render_text(ValidationReport.valid(), console)
        assert "Validation OK" in console.export_text()

    def test_text_invalid(self) -> None:
        console = Console(record=True, width=120)
        report = validate_manual({"version": "1", "provider": {"name": "p"}, "tools": []})
        render_text(report, console, source="manual.json")
        text = console.export_text()
        assert "1 validation error(s) in manual.json" in text
        assert "provider.description" in text
        assert "MissingField" in text

    def test_json(self) -> None:
        console = Console(record=True, width=120)
        render_json(validate_manual({}), console)
        assert '"error_count": 3' in console.export_text()
