"""Configuration validation utilities."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_parser_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate quote record layout parameters."""
        errors = []

        if "delimiter" in params:
            value = params["delimiter"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(ValidationError(
                    field="delimiter",
                    message="Must be a single character",
                    value=value
                ))

        if "date_format" in params:
            value = params["date_format"]
            if not isinstance(value, str) or "%" not in value:
                errors.append(ValidationError(
                    field="date_format",
                    message="Must be a strftime pattern",
                    value=value
                ))

        # Field 0 holds the date, so the price cannot live there
        if "price_field" in params:
            value = params["price_field"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="price_field",
                    message="Must be an integer >= 1",
                    value=value
                ))

        if "has_header" in params:
            value = params["has_header"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="has_header",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_date_range_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate date range defaults."""
        errors = []

        if "default_start" in params:
            value = params["default_start"]
            valid = isinstance(value, date) and not isinstance(value, datetime)
            if isinstance(value, str):
                try:
                    datetime.strptime(value, "%Y-%m-%d")
                    valid = True
                except ValueError:
                    valid = False
            if not valid:
                errors.append(ValidationError(
                    field="default_start",
                    message="Must be a date in YYYY-MM-DD form",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_window(value: Any) -> list[ValidationError]:
        """Validate a single averaging window."""
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            return [ValidationError(
                field="window",
                message="Must be a non-negative integer",
                value=value
            )]
        return []

    @staticmethod
    def validate_averaging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate moving average choices."""
        errors = []

        if "allowed_windows" in params:
            value = params["allowed_windows"]
            if not isinstance(value, (list, tuple)) or not value:
                errors.append(ValidationError(
                    field="allowed_windows",
                    message="Must be a non-empty list of windows",
                    value=value
                ))
            else:
                for window in value:
                    for error in ConfigValidator.validate_window(window):
                        errors.append(ValidationError(
                            field="allowed_windows",
                            message=error.message,
                            value=window
                        ))

        if "default_window" in params:
            value = params["default_window"]
            window_errors = ConfigValidator.validate_window(value)
            errors.extend(ValidationError(
                field="default_window",
                message=error.message,
                value=value
            ) for error in window_errors)

            allowed = params.get("allowed_windows")
            if not window_errors and isinstance(allowed, (list, tuple)) and value not in allowed:
                errors.append(ValidationError(
                    field="default_window",
                    message="Must be one of allowed_windows",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_transport_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate quote provider transport parameters."""
        errors = []

        if "url_template" in params:
            value = params["url_template"]
            if not isinstance(value, str) or "{symbol}" not in value:
                errors.append(ValidationError(
                    field="url_template",
                    message="Must be a string containing a {symbol} placeholder",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "parser" in config:
            errors.extend(ConfigValidator.validate_parser_params(config["parser"]))

        if "date_range" in config:
            errors.extend(ConfigValidator.validate_date_range_params(config["date_range"]))

        if "averaging" in config:
            errors.extend(ConfigValidator.validate_averaging_params(config["averaging"]))

        if "transport" in config:
            errors.extend(ConfigValidator.validate_transport_params(config["transport"]))

        if "logging" in config:
            level = config["logging"].get("level")
            if level is not None and str(level).upper() not in (
                "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
            ):
                errors.append(ValidationError(
                    field="level",
                    message="Must be a standard logging level name",
                    value=level
                ))

        return errors
