"""
CLI entry point for manualcheck.

Loads configuration, resolves the validator, parses the manual and prints
the report. Each failure stage has its own exit code so scripts can tell a
broken manual from a broken installation. Bad command-line usage exits with
64 (EX_USAGE) so that 2 always means "validation failed".
"""

import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from manualcheck import __version__
from manualcheck.config.loader import load_config
from manualcheck.core.logging import setup_logging
from manualcheck.document import load_document
from manualcheck.exceptions import ConfigError, ManualInputError, ValidatorUnavailableError
from manualcheck.ui.report import render_json, render_text
from manualcheck.validation.manual import resolve_validator

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_VALIDATION_FAILED = 2
EXIT_SETUP_FAILED = 3
EXIT_USAGE_ERROR = 64


class ManualCheckCommand(click.Command):
    """Command whose usage errors exit with EXIT_USAGE_ERROR instead of click's 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = EXIT_USAGE_ERROR
            raise


@click.command(cls=ManualCheckCommand)
@click.version_option(version=__version__, prog_name="manualcheck")
@click.argument(
    "path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Report fields that are not part of the manual shape",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    help="Report format",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
def main(
    path: Path | None,
    config_file: Path | None,
    strict: bool | None,
    output_format: str | None,
    log_level: str | None,
) -> None:
    """
    Validate a tool manual.

    PATH defaults to the configured manual_path (./manuals/manual.json).
    """
    # Build CLI overrides
    cli_overrides: dict[str, Any] = {}

    if strict is not None:
        cli_overrides["validation"] = {"strict": strict}

    if output_format:
        cli_overrides["output"] = {"format": output_format}

    if log_level:
        cli_overrides["log_level"] = log_level

    try:
        config = load_config(cli_overrides, config_file)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_SETUP_FAILED)

    logger = setup_logging(config)

    try:
        validator = resolve_validator(config.validation.validator, strict=config.validation.strict)
    except ValidatorUnavailableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_SETUP_FAILED)

    manual_path = path or config.manual_path
    logger.info("Validating %s", manual_path)

    try:
        document = load_document(manual_path)
    except ManualInputError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_INPUT_ERROR)

    report = validator.validate(document)
    logger.info("Found %d error(s)", len(report.errors))

    console = Console(no_color=not config.output.color, soft_wrap=True)
    if config.output.format == "json":
        render_json(report, console)
    else:
        render_text(report, console, source=str(manual_path))

    sys.exit(EXIT_OK if report.is_valid else EXIT_VALIDATION_FAILED)


if __name__ == "__main__":
    main()
