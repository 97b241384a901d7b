"""Unit tests for application configuration.

Tests cover:
- List parsing
- YAML layering and deep merge
- Environment overrides
- Environment helpers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipe_service.core.config import RecipeSourceMode, Settings, get_settings
from recipe_service.core.config.settings import parse_list
from recipe_service.core.config.yaml_source import deep_merge, load_yaml_dir


if TYPE_CHECKING:
    from pathlib import Path


pytestmark = pytest.mark.unit


class TestParseList:
    """Tests for parse_list helper function."""

    def test_parses_comma_separated_string(self) -> None:
        """Should parse comma-separated string."""
        assert parse_list("http://a.test, http://b.test") == ["http://a.test", "http://b.test"]

    def test_filters_empty_values(self) -> None:
        """Should drop empty entries."""
        assert parse_list("a,,b,") == ["a", "b"]

    def test_passes_through_list(self) -> None:
        """Should return list as-is."""
        assert parse_list(["x"]) == ["x"]


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_merges_nested_dicts(self) -> None:
        """Should merge nested sections key by key."""
        base = {"logging": {"level": "INFO", "format": "json"}, "app": {"name": "a"}}
        override = {"logging": {"level": "DEBUG"}}

        assert deep_merge(base, override) == {
            "logging": {"level": "DEBUG", "format": "json"},
            "app": {"name": "a"},
        }

    def test_replaces_lists(self) -> None:
        """Should replace non-dict values wholesale."""
        assert deep_merge({"files": ["a", "b"]}, {"files": ["c"]}) == {"files": ["c"]}

    def test_does_not_mutate_inputs(self) -> None:
        """Should leave both inputs unchanged."""
        base = {"a": {"b": 1}}
        deep_merge(base, {"a": {"b": 2}})

        assert base == {"a": {"b": 1}}


class TestYamlLayering:
    """Tests for YAML loading across base and environment directories."""

    @pytest.fixture
    def config_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
        """Config tree with a base file and a staging override."""
        (tmp_path / "base").mkdir()
        (tmp_path / "environments" / "staging").mkdir(parents=True)
        (tmp_path / "base" / "app.yaml").write_text(
            "app:\n  name: Base Name\n  version: 1.2.3\n"
            "recipe_search:\n  default_page_size: 12\n",
            encoding="utf-8",
        )
        (tmp_path / "environments" / "staging" / "app.yaml").write_text(
            "app:\n  name: Staging Name\n", encoding="utf-8"
        )
        monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
        monkeypatch.setenv("APP_ENV", "staging")
        return tmp_path

    def test_load_yaml_dir_missing_directory(self, tmp_path: Path) -> None:
        """Should return an empty mapping for a missing directory."""
        assert load_yaml_dir(tmp_path / "absent") == {}

    def test_environment_overrides_base(self, config_dir: Path) -> None:
        """Should layer environment files over base files."""
        settings = Settings()

        assert settings.app.name == "Staging Name"
        assert settings.app.version == "1.2.3"
        assert settings.recipe_search.default_page_size == 12

    def test_environment_variables_win(
        self, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should let nested environment variables override YAML."""
        monkeypatch.setenv("APP__NAME", "From Env")
        monkeypatch.setenv("RECIPE_SOURCE__MODE", "spoonacular")

        settings = Settings()

        assert settings.app.name == "From Env"
        assert settings.recipe_source.mode == RecipeSourceMode.SPOONACULAR
        assert settings.use_mock_data is False


class TestSettings:
    """Tests for Settings defaults and helpers."""

    def test_defaults(self) -> None:
        """Should provide the documented search limits."""
        search = Settings().recipe_search

        assert search.default_page_size == 9
        assert search.max_page_size == 100
        assert search.max_page == 1000
        assert search.max_query_length == 200

    def test_test_environment_loaded(self) -> None:
        """Should load the test environment overrides."""
        settings = Settings()

        assert settings.APP_ENV == "test"
        assert settings.rate_limiting.enabled is False
        assert settings.is_non_production is True
        assert settings.is_production is False

    def test_mock_mode_by_default(self) -> None:
        """Should serve bundled data unless configured otherwise."""
        settings = Settings()

        assert settings.use_mock_data is True
        assert settings.recipe_source.mock_data_dir.is_dir()

    def test_api_key_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read the provider key from the environment."""
        monkeypatch.setenv("SPOONACULAR_API_KEY", "env-key")

        assert Settings().SPOONACULAR_API_KEY == "env-key"

    def test_get_settings_is_cached(self) -> None:
        """Should return the same instance until the cache is cleared."""
        assert get_settings() is get_settings()
