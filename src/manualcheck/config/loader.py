"""
Configuration loader with hierarchy support.

Hierarchy (lowest to highest priority):
1. Defaults (built into schema)
2. Global config (~/.manualcheck/config.yaml)
3. Project config (.manualcheck/config.yaml)
4. Local config (.manualcheck/config.local.yaml) - gitignored
5. Environment variables (MANUALCHECK_*)
6. CLI arguments
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import SettingsError

from manualcheck.config.schema import ManualCheckConfig
from manualcheck.exceptions import ConfigError


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary (takes precedence)

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml_config(path: Path) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        ConfigError: If the file is not valid YAML
    """
    if not path.exists():
        return {}

    try:
        with open(path) as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if isinstance(content, dict):
        return content
    return {}


def find_project_root(start: Path | None = None) -> Path | None:
    """
    Find project root by looking for .manualcheck directory or .git.

    Returns:
        Project root path or None if not in a project
    """
    current = (start or Path.cwd()).resolve()

    while current != current.parent:
        if (current / ".manualcheck").is_dir() or (current / ".git").is_dir():
            return current
        current = current.parent

    return None


class ConfigLoader:
    """Configuration loader with hierarchy support."""

    def __init__(
        self,
        global_config_dir: Path | None = None,
        project_root: Path | None = None,
    ) -> None:
        """
        Initialize configuration loader.

        Args:
            global_config_dir: Global config directory (default: ~/.manualcheck)
            project_root: Project root (auto-detected if None)
        """
        self.global_config_dir = (global_config_dir or Path("~/.manualcheck")).expanduser()
        self.project_root = project_root or find_project_root()

    def load(
        self,
        cli_overrides: dict[str, Any] | None = None,
        config_file: Path | None = None,
    ) -> ManualCheckConfig:
        """
        Load configuration with full hierarchy.

        Args:
            cli_overrides: CLI argument overrides
            config_file: Extra config file layered above project config

        Returns:
            Merged configuration

        Raises:
            ConfigError: If any layer is invalid
        """
        # Start with empty dict (defaults come from Pydantic)
        config: dict[str, Any] = {}

        # Layer 1: Global config
        config = deep_merge(config, load_yaml_config(self.global_config_dir / "config.yaml"))

        # Layer 2: Project config
        if self.project_root:
            project_dir = self.project_root / ".manualcheck"
            config = deep_merge(config, load_yaml_config(project_dir / "config.yaml"))

            # Layer 3: Local config (gitignored)
            config = deep_merge(config, load_yaml_config(project_dir / "config.local.yaml"))

        # Explicit --config file
        if config_file:
            config = deep_merge(config, load_yaml_config(config_file))

        try:
            # Layer 4: environment, resolved by pydantic-settings over the file layers
            settings = ManualCheckConfig(**config)

            # Layer 5: CLI overrides, validated without re-reading the environment
            if cli_overrides:
                merged = deep_merge(settings.model_dump(), cli_overrides)
                settings = ManualCheckConfig.model_validate(merged)
        except (PydanticValidationError, SettingsError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        return settings


def load_config(
    cli_overrides: dict[str, Any] | None = None,
    config_file: Path | None = None,
) -> ManualCheckConfig:
    """Load configuration from the default locations."""
    return ConfigLoader().load(cli_overrides, config_file)
