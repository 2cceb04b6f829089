"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


_KNOWN_FIELDS = {
    "analysis": {"depth_pct", "target_qty"},
    "loader": {"skip_header", "delimiter"},
    "generator": {"filename", "levels", "mid_price", "tick_size", "min_size", "max_size"},
}


def _is_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_analysis_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate metric calculation parameters."""
        errors = []

        if "depth_pct" in params:
            value = params["depth_pct"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="analysis.depth_pct",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "target_qty" in params:
            value = params["target_qty"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="analysis.target_qty",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_loader_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate snapshot loader parameters."""
        errors = []

        if "skip_header" in params and not isinstance(params["skip_header"], bool):
            errors.append(ValidationError(
                field="loader.skip_header",
                message="Must be a boolean",
                value=params["skip_header"]
            ))

        if "delimiter" in params:
            value = params["delimiter"]
            if not isinstance(value, str) or len(value) != 1 or value.isspace():
                errors.append(ValidationError(
                    field="loader.delimiter",
                    message="Must be a single non-whitespace character",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_generator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate sample generator parameters."""
        errors = []

        if "levels" in params:
            value = params["levels"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="generator.levels",
                    message="Must be a positive integer",
                    value=value
                ))

        for name in ("mid_price", "tick_size", "min_size", "max_size"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=f"generator.{name}",
                        message="Must be a positive number",
                        value=value
                    ))

        min_size = params.get("min_size")
        max_size = params.get("max_size")
        if _is_number(min_size) and _is_number(max_size) and min_size > max_size:
            errors.append(ValidationError(
                field="generator.min_size",
                message="Must not exceed generator.max_size",
                value=min_size
            ))

        if "filename" in params and not isinstance(params["filename"], str):
            errors.append(ValidationError(
                field="generator.filename",
                message="Must be a string",
                value=params["filename"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, section_values in config.items():
            if section not in _KNOWN_FIELDS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=section_values
                ))
                continue
            if not isinstance(section_values, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=section_values
                ))
                continue
            for key in section_values:
                if key not in _KNOWN_FIELDS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration field",
                        value=section_values[key]
                    ))

        if isinstance(config.get("analysis"), dict):
            errors.extend(ConfigValidator.validate_analysis_params(config["analysis"]))

        if isinstance(config.get("loader"), dict):
            errors.extend(ConfigValidator.validate_loader_params(config["loader"]))

        if isinstance(config.get("generator"), dict):
            errors.extend(ConfigValidator.validate_generator_params(config["generator"]))

        return errors
