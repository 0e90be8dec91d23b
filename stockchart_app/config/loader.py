"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import CallerUsageError
from .defaults import DefaultConfig, get_default_config

CONFIG_FILENAME = "stockchart.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load the YAML configuration file, or nothing if it does not exist."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        return file_config or {}

    def merge_config(
        self,
        symbol: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call overrides (highest priority)
        2. Config file, with per-symbol sections applied over its globals
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        file_config = dict(self.load_file_config())
        symbol_sections = file_config.pop("symbols", None) or {}
        config = self._deep_merge(config, file_config)

        if symbol:
            config = self._deep_merge(config, symbol_sections.get(symbol.upper(), {}))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_config(
        self,
        symbol: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge configuration and rebuild it as typed parameter objects."""
        merged = self.merge_config(symbol, overrides)
        sections = {}

        for section in fields(self.defaults):
            default_params = getattr(self.defaults, section.name)
            values = merged.get(section.name, {})
            known = {f.name for f in fields(default_params)}
            unknown = set(values) - known
            if unknown:
                raise CallerUsageError(
                    f"Unknown {section.name} settings: {', '.join(sorted(unknown))}",
                    argument=section.name,
                    value=sorted(unknown)
                )
            sections[section.name] = replace(default_params, **values)

        config = replace(self.defaults, **sections)
        return self._coerce(config)

    def _coerce(self, config: DefaultConfig) -> DefaultConfig:
        """Normalize YAML scalar types (dates as strings, windows as lists)."""
        default_start = config.date_range.default_start
        if isinstance(default_start, str):
            default_start = datetime.strptime(default_start, "%Y-%m-%d").date()
        elif isinstance(default_start, datetime):
            default_start = default_start.date()

        return replace(
            config,
            date_range=replace(config.date_range, default_start=default_start),
            averaging=replace(
                config.averaging,
                allowed_windows=tuple(config.averaging.allowed_windows)
            ),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

