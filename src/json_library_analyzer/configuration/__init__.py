"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, resolve_log_level
from .runtime_settings import (
    AnalysisSettings,
    Configuration,
    LoggingSettings,
    OptimizationSettings,
    SchemaRetention,
    default_settings,
)

__all__ = [
    "AnalysisSettings",
    "Configuration",
    "LoggingSettings",
    "OptimizationSettings",
    "SchemaRetention",
    "default_settings",
    "ConfigurationError",
    "load_configuration",
    "resolve_log_level",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
