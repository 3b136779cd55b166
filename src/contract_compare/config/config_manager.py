"""Configuration Manager implementation for the Contract Compare system.

This module provides functionality to load, validate, and export the
comparison settings: status thresholds, risk vocabularies, clause keyword
tables and concurrency limits.
"""

import json
import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..analyzers.clause_patterns import ClausePattern, ReportingPattern
from ..models.enums import ClauseType, ReportingClauseType
from .models import (
    DEFAULT_SETTINGS,
    ComparisonSettings,
    ConfigurationError,
    ValidationResult,
    settings_to_dict,
)


logger = logging.getLogger(__name__)

ConfigSource = Union[str, Path, Dict[str, Any]]


class ConfigurationManager:
    """
    Manager for comparison settings.

    Loading never mutates an existing settings object: every successful
    load produces a new frozen ComparisonSettings built on top of the
    defaults.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional JSON file to load immediately.
        """
        self._config_path = Path(config_path) if config_path else None
        self._settings = DEFAULT_SETTINGS
        self._is_loaded = False
        if self._config_path is not None:
            self.load_settings(self._config_path)

    @property
    def settings(self) -> ComparisonSettings:
        """Get the current comparison settings."""
        return self._settings

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._is_loaded

    def load_settings(self, source: ConfigSource) -> ValidationResult:
        """
        Load and validate comparison settings.

        Keys absent from the source keep their default values.

        Args:
            source: JSON file path or dictionary.

        Returns:
            ValidationResult indicating success with any warnings.

        Raises:
            ConfigurationError: If validation fails.
        """
        data = self._parse_source(source)
        if not isinstance(data, dict):
            raise ConfigurationError("Settings source must be a JSON object")

        result = ValidationResult(is_valid=True)
        overrides: Dict[str, Any] = {}

        unknown = set(data) - set(settings_to_dict(DEFAULT_SETTINGS))
        for key in sorted(unknown):
            result.add_warning(f"Unknown setting '{key}' ignored")

        result = result.merge(self._validate_thresholds(data, overrides))
        for key in ("high_risk_terms", "medium_risk_terms"):
            if key in data:
                result = result.merge(self._validate_terms(key, data[key], overrides))
        if "clause_patterns" in data:
            result = result.merge(
                self._validate_clause_patterns(data["clause_patterns"], overrides)
            )
        if "reporting_patterns" in data:
            result = result.merge(
                self._validate_reporting_patterns(data["reporting_patterns"], overrides)
            )
        result = result.merge(self._validate_limits(data, overrides))

        if not result.is_valid:
            raise ConfigurationError(
                "Comparison settings validation failed",
                validation_result=result
            )

        self._settings = replace(DEFAULT_SETTINGS, **overrides)
        self._is_loaded = True
        logger.info(f"Loaded comparison settings ({len(overrides)} overrides)")
        for warning in result.warnings:
            logger.warning(warning)
        return result

    def _validate_thresholds(
        self, data: Dict[str, Any], overrides: Dict[str, Any]
    ) -> ValidationResult:
        """Validate the status thresholds."""
        result = ValidationResult(is_valid=True)
        values = {}
        for key in ("aligned_threshold", "partial_threshold"):
            value = data.get(key, getattr(DEFAULT_SETTINGS, key))
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                result.add_error(f"'{key}' must be a number")
            elif not 0.0 <= value <= 1.0:
                result.add_error(f"'{key}' must be between 0.0 and 1.0")
            else:
                values[key] = float(value)
                if key in data:
                    overrides[key] = float(value)

        if len(values) == 2 and values["partial_threshold"] > values["aligned_threshold"]:
            result.add_error(
                "'partial_threshold' must not exceed 'aligned_threshold'"
            )
        return result

    def _validate_terms(
        self, key: str, value: Any, overrides: Dict[str, Any]
    ) -> ValidationResult:
        """Validate a risk vocabulary."""
        result = ValidationResult(is_valid=True)
        if not isinstance(value, list) or not value:
            result.add_error(f"'{key}' must be a non-empty list")
        elif not all(isinstance(v, str) and v.strip() for v in value):
            result.add_error(f"All items in '{key}' must be non-empty strings")
        else:
            overrides[key] = tuple(v.strip().lower() for v in value)
        return result

    def _validate_clause_patterns(
        self, value: Any, overrides: Dict[str, Any]
    ) -> ValidationResult:
        """Validate the ordered clause keyword table."""
        result = ValidationResult(is_valid=True)
        if not isinstance(value, list) or not value:
            result.add_error("'clause_patterns' must be a non-empty list")
            return result

        patterns: List[ClausePattern] = []
        for i, entry in enumerate(value):
            prefix = f"Clause pattern [{i}]"
            if not isinstance(entry, dict):
                result.add_error(f"{prefix}: must be an object")
                continue
            clause_type = _lookup_enum(ClauseType, entry.get("clause_type"))
            if clause_type is None:
                result.add_error(
                    f"{prefix}: unknown clause type {entry.get('clause_type')!r}"
                )
                continue
            if clause_type is ClauseType.GENERAL_TERMS:
                result.add_error(
                    f"{prefix}: '{clause_type.value}' is the fallback type and "
                    f"cannot have keywords"
                )
                continue
            keywords = entry.get("keywords")
            if not isinstance(keywords, list) or not keywords or not all(
                isinstance(k, str) and k.strip() for k in keywords
            ):
                result.add_error(f"{prefix}: 'keywords' must be a non-empty list of strings")
                continue
            patterns.append(
                ClausePattern(clause_type, tuple(k.strip().lower() for k in keywords))
            )

        seen = [p.clause_type for p in patterns]
        duplicates = {t.value for t in seen if seen.count(t) > 1}
        if duplicates:
            result.add_error(f"Duplicate clause types in 'clause_patterns': {duplicates}")

        missing = set(ClauseType) - set(seen) - {ClauseType.GENERAL_TERMS}
        if missing and result.is_valid:
            result.add_warning(
                f"Clause types without keywords will never be assigned: "
                f"{sorted(t.value for t in missing)}"
            )

        if result.is_valid:
            overrides["clause_patterns"] = tuple(patterns)
        return result

    def _validate_reporting_patterns(
        self, value: Any, overrides: Dict[str, Any]
    ) -> ValidationResult:
        """Validate the ordered headline reporting table."""
        result = ValidationResult(is_valid=True)
        if not isinstance(value, list) or not value:
            result.add_error("'reporting_patterns' must be a non-empty list")
            return result

        patterns: List[ReportingPattern] = []
        for i, entry in enumerate(value):
            prefix = f"Reporting pattern [{i}]"
            if not isinstance(entry, dict):
                result.add_error(f"{prefix}: must be an object")
                continue
            clause_type = _lookup_enum(ReportingClauseType, entry.get("clause_type"))
            if clause_type is None:
                result.add_error(
                    f"{prefix}: unknown reporting type {entry.get('clause_type')!r}"
                )
                continue
            pattern = entry.get("pattern")
            if not isinstance(pattern, str) or not pattern:
                result.add_error(f"{prefix}: 'pattern' must be a non-empty string")
                continue
            try:
                re.compile(pattern)
            except re.error as e:
                result.add_error(f"{prefix}: 'pattern' is not a valid regex: {e}")
                continue
            patterns.append(ReportingPattern(clause_type, pattern))

        if result.is_valid:
            overrides["reporting_patterns"] = tuple(patterns)
        return result

    def _validate_limits(
        self, data: Dict[str, Any], overrides: Dict[str, Any]
    ) -> ValidationResult:
        """Validate concurrency and timeout limits."""
        result = ValidationResult(is_valid=True)

        if "max_workers" in data:
            workers = data["max_workers"]
            if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
                result.add_error("'max_workers' must be a positive integer")
            else:
                overrides["max_workers"] = workers

        for key in ("analysis_timeout", "extraction_timeout"):
            if key not in data:
                continue
            timeout = data[key]
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                result.add_error(f"'{key}' must be a positive number")
            else:
                overrides[key] = float(timeout)
        return result

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _parse_source(self, source: ConfigSource) -> Any:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                try:
                    return json.load(f)
                except json.JSONDecodeError as e:
                    raise ConfigurationError(f"Invalid JSON in {path}: {e}")

        return source

    def save_settings(self, path: Optional[Union[str, Path]] = None) -> None:
        """
        Save the current settings as JSON.

        Args:
            path: Destination file. Uses the loaded config path if None.
        """
        path = Path(path) if path else self._config_path
        if not path:
            raise ConfigurationError("No configuration path specified")

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def reset(self) -> None:
        """Reset configuration to the defaults."""
        self._settings = DEFAULT_SETTINGS
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export current settings as a dictionary."""
        return settings_to_dict(self._settings)


def _lookup_enum(enum_cls, value: Any):
    """Resolve an enum member by value ("Payment Terms") or name ("PAYMENT_TERMS")."""
    if not isinstance(value, str):
        return None
    for member in enum_cls:
        if value == member.value or value.upper() == member.name:
            return member
    return None
