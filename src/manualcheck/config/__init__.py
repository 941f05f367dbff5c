"""Configuration module for manualcheck."""

from manualcheck.config.loader import ConfigLoader, load_config
from manualcheck.config.schema import ManualCheckConfig, OutputConfig, ValidationConfig

__all__ = [
    "ConfigLoader",
    "ManualCheckConfig",
    "OutputConfig",
    "ValidationConfig",
    "load_config",
]
