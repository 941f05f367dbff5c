"""
Configuration schema using Pydantic.

Principles:
- All config values have sensible defaults
- Validation happens at load time
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from manualcheck.validation.manual import DEFAULT_VALIDATOR


class ValidationConfig(BaseModel):
    """Validator selection and behavior."""

    # Report fields outside the known manual shape
    strict: bool = False

    # Factory returning a ManualValidator, as "module:attribute"
    validator: str = Field(default=DEFAULT_VALIDATOR, pattern=r"^[\w.]+:\w+$")


class OutputConfig(BaseModel):
    """Report output configuration."""

    format: Literal["text", "json"] = "text"
    color: bool = True


class ManualCheckConfig(BaseSettings):
    """Root configuration for manualcheck."""

    model_config = SettingsConfigDict(
        env_prefix="MANUALCHECK_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Manual validated when no path is given on the command line
    manual_path: Path = Field(default=Path("./manuals/manual.json"))

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Environment variables win over values read from config files."""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @field_validator("manual_path")
    @classmethod
    def validate_manual_path(cls, v: Path) -> Path:
        """Expand user path."""
        return Path(v).expanduser()
