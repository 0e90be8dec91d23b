"""Unit tests for configuration management."""

import pytest
from datetime import date
from pathlib import Path

from stockchart_app.config.defaults import DefaultConfig, get_default_config
from stockchart_app.config.loader import ConfigLoader
from stockchart_app.config.validation import ConfigValidator
from stockchart_app.errors import CallerUsageError


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Config directory with a global override and a per-symbol section."""
    (tmp_path / "stockchart.yaml").write_text(
        "date_range:\n"
        "  default_start: 2010-01-01\n"
        "averaging:\n"
        "  allowed_windows: [0, 3, 7]\n"
        "transport:\n"
        "  timeout_seconds: 5\n"
        "symbols:\n"
        "  BRK-B:\n"
        "    parser:\n"
        "      price_field: 6\n"
    )
    return tmp_path


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.parser.price_field == 4
        assert config.parser.has_header is True
        assert config.date_range.default_start == date(2000, 1, 1)
        assert config.averaging.default_window == 0
        assert 0 in config.averaging.allowed_windows


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["parser"]["price_field"] == 4
        assert config["averaging"]["default_window"] == 0

    def test_file_overrides_defaults(self, config_dir: Path) -> None:
        loader = ConfigLoader.create(config_dir)
        config = loader.load_config()

        assert config.date_range.default_start == date(2010, 1, 1)
        assert config.averaging.allowed_windows == (0, 3, 7)
        assert config.transport.timeout_seconds == 5
        # Untouched defaults remain
        assert config.parser.delimiter == ","

    def test_symbol_section_applied(self, config_dir: Path) -> None:
        loader = ConfigLoader.create(config_dir)

        assert loader.load_config("brk-b").parser.price_field == 6
        assert loader.load_config("MSFT").parser.price_field == 4

    def test_call_overrides_win(self, config_dir: Path) -> None:
        loader = ConfigLoader.create(config_dir)
        config = loader.load_config("BRK-B", {"parser": {"price_field": 2}})

        assert config.parser.price_field == 2

    def test_string_date_coerced(self, tmp_path: Path) -> None:
        (tmp_path / "stockchart.yaml").write_text(
            "date_range:\n  default_start: '2015-06-01'\n"
        )
        config = ConfigLoader.create(tmp_path).load_config()
        assert config.date_range.default_start == date(2015, 6, 1)

    def test_unknown_setting_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "stockchart.yaml").write_text("parser:\n  colour: blue\n")

        with pytest.raises(CallerUsageError):
            ConfigLoader.create(tmp_path).load_config()

    def test_shipped_config_is_valid(self) -> None:
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader.merge_config()) == []
        assert isinstance(loader.load_config(), DefaultConfig)


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_parser_params(self) -> None:
        errors = ConfigValidator.validate_parser_params({
            "delimiter": ";",
            "date_format": "%d.%m.%Y",
            "price_field": 1,
            "has_header": False,
        })
        assert errors == []

    def test_price_field_zero(self) -> None:
        errors = ConfigValidator.validate_parser_params({"price_field": 0})
        assert len(errors) == 1
        assert errors[0].field == "price_field"

    def test_multi_character_delimiter(self) -> None:
        errors = ConfigValidator.validate_parser_params({"delimiter": ",,"})
        assert [e.field for e in errors] == ["delimiter"]

    def test_invalid_has_header(self) -> None:
        errors = ConfigValidator.validate_parser_params({"has_header": "yes"})
        assert errors[0].field == "has_header"

    def test_invalid_default_start(self) -> None:
        errors = ConfigValidator.validate_date_range_params({"default_start": "01/01/2000"})
        assert errors[0].field == "default_start"

    def test_valid_default_start(self) -> None:
        assert ConfigValidator.validate_date_range_params({"default_start": date(2000, 1, 1)}) == []
        assert ConfigValidator.validate_date_range_params({"default_start": "2000-01-01"}) == []

    @pytest.mark.parametrize("window", [-1, 2.5, "5", True])
    def test_invalid_window(self, window) -> None:
        assert len(ConfigValidator.validate_window(window)) == 1

    def test_default_window_must_be_allowed(self) -> None:
        errors = ConfigValidator.validate_averaging_params({
            "allowed_windows": [0, 5],
            "default_window": 10,
        })
        assert [e.field for e in errors] == ["default_window"]

    def test_invalid_allowed_windows(self) -> None:
        errors = ConfigValidator.validate_averaging_params({"allowed_windows": [0, -5]})
        assert errors[0].field == "allowed_windows"
        assert errors[0].value == -5

    def test_url_template_needs_symbol(self) -> None:
        errors = ConfigValidator.validate_transport_params({"url_template": "https://example.com/q"})
        assert errors[0].field == "url_template"

    def test_invalid_timeout(self) -> None:
        errors = ConfigValidator.validate_transport_params({"timeout_seconds": 0})
        assert errors[0].field == "timeout_seconds"

    def test_invalid_log_level(self) -> None:
        errors = ConfigValidator.validate_config({"logging": {"level": "LOUD"}})
        assert errors[0].field == "level"
