"""Configuration management for the Contract Compare system."""

from .config_manager import ConfigurationManager
from .models import (
    DEFAULT_SETTINGS,
    AnalysisConfig,
    ComparisonSettings,
    ConfigurationError,
    ValidationResult,
)

__all__ = [
    "ConfigurationManager",
    "DEFAULT_SETTINGS",
    "AnalysisConfig",
    "ComparisonSettings",
    "ConfigurationError",
    "ValidationResult",
]
