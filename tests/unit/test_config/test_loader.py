"""Unit tests for the relevance configuration loader."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config.loader import ConfigLoader, ConfigValidationError, load_config
from src.config.schemas.relevance import RelevanceConfig


FIXTURES_DIR = Path(__file__).parent.parent.parent / "fixtures" / "config"


class TestRelevanceConfig:
    """Tests for the RelevanceConfig schema."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """Defaults match the digest workflow."""
        config = RelevanceConfig()
        assert config.top_n == 20
        assert config.min_score is None
        assert config.market_moving_only is False
        assert config.feed_max_chars == 500
        assert config.diagnostic_limit == 20

    @pytest.mark.unit
    def test_frozen(self) -> None:
        """Config is immutable."""
        config = RelevanceConfig()
        with pytest.raises(ValidationError):
            config.top_n = 5  # type: ignore[misc]

    @pytest.mark.unit
    def test_rejects_unknown_fields(self) -> None:
        """Unknown keys are errors."""
        with pytest.raises(ValidationError):
            RelevanceConfig.model_validate({"topn": 5})


class TestConfigLoader:
    """Tests for ConfigLoader."""

    @pytest.mark.unit
    def test_load_fixture(self) -> None:
        """A valid file loads with checksum and duration."""
        loader = ConfigLoader()
        config = loader.load(FIXTURES_DIR / "relevance.yaml")

        assert config.top_n == 2
        assert config.min_score == 3
        assert config.feed_max_chars == 200
        assert loader.config == config
        assert loader.file_checksum is not None
        assert len(loader.file_checksum) == 64
        assert loader.validation_duration_ms >= 0
        assert loader.validation_errors == []

    @pytest.mark.unit
    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty file means all defaults."""
        path = tmp_path / "relevance.yaml"
        path.write_text("", encoding="utf-8")
        assert ConfigLoader().load(path) == RelevanceConfig()

    @pytest.mark.unit
    def test_schema_error(self, tmp_path: Path) -> None:
        """Schema violations are reported with location and type."""
        path = tmp_path / "relevance.yaml"
        path.write_text("top_n: -1\n", encoding="utf-8")
        loader = ConfigLoader()

        with pytest.raises(ConfigValidationError) as exc_info:
            loader.load(path)

        errors = exc_info.value.errors
        assert errors[0]["loc"] == "top_n"
        assert errors[0]["type"] == "greater_than_equal"
        assert exc_info.value.file_path == str(path)
        assert loader.validation_errors == errors
        assert loader.config is None

    @pytest.mark.unit
    def test_unknown_key(self, tmp_path: Path) -> None:
        """Unknown keys are reported as extra_forbidden."""
        path = tmp_path / "relevance.yaml"
        path.write_text("limit: 3\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader().load(path)

        assert exc_info.value.errors[0]["type"] == "extra_forbidden"

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is a file_not_found error."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader().load(tmp_path / "missing.yaml")
        assert exc_info.value.errors[0]["type"] == "file_not_found"

    @pytest.mark.unit
    def test_directory_path(self, tmp_path: Path) -> None:
        """A directory in place of a file is a file_read_error."""
        loader = ConfigLoader()

        with pytest.raises(ConfigValidationError) as exc_info:
            loader.load(tmp_path)

        assert exc_info.value.errors[0]["type"] == "file_read_error"
        assert exc_info.value.file_path == str(tmp_path)
        assert loader.config is None

    @pytest.mark.unit
    def test_bad_yaml(self, tmp_path: Path) -> None:
        """Broken YAML is a yaml_parse_error."""
        path = tmp_path / "relevance.yaml"
        path.write_text("top_n: [1, 2\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader().load(path)

        assert exc_info.value.errors[0]["type"] == "yaml_parse_error"


class TestLoadConfig:
    """Tests for load_config."""

    @pytest.mark.unit
    def test_none_gives_defaults(self) -> None:
        """No path means built-in defaults."""
        assert load_config(None) == RelevanceConfig()

    @pytest.mark.unit
    def test_path_is_loaded(self) -> None:
        """A path is loaded through ConfigLoader."""
        assert load_config(FIXTURES_DIR / "relevance.yaml").top_n == 2
