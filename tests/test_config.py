"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from wikirecord.config import DEFAULT_BASE_URL, AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.base_url == "https://en.wikipedia.org/wiki/"
        assert config.timeout == 20.0
        assert config.cache_max_entries is None
        assert config.import_path is None

    def test_base_url_gets_trailing_slash(self) -> None:
        """Should append a trailing slash to the base URL."""
        assert AppConfig(base_url="https://fr.wikipedia.org/wiki").base_url == "https://fr.wikipedia.org/wiki/"

    @pytest.mark.parametrize("kwargs", [{"timeout": 0}, {"cache_max_entries": 0}])
    def test_invalid_values(self, kwargs: dict) -> None:
        """Should reject out-of-range values."""
        with pytest.raises(ValueError):
            AppConfig(**kwargs)

    def test_from_env_defaults(self) -> None:
        """Should fall back to defaults with an empty environment."""
        config = AppConfig.from_env({})
        assert config.base_url == DEFAULT_BASE_URL
        assert config.cache_max_entries is None

    def test_from_env_overrides(self) -> None:
        """Should read every WIKIRECORD variable."""
        config = AppConfig.from_env(
            {
                "WIKIRECORD_BASE_URL": "http://localhost:9000/wiki/",
                "WIKIRECORD_TIMEOUT": "5",
                "WIKIRECORD_USER_AGENT": "tests",
                "WIKIRECORD_CACHE_MAX_ENTRIES": "10",
                "WIKIRECORD_IMPORT_PATH": "out/records.jsonl",
            }
        )
        assert config.base_url == "http://localhost:9000/wiki/"
        assert config.timeout == 5.0
        assert config.user_agent == "tests"
        assert config.cache_max_entries == 10
        assert config.import_path == Path("out/records.jsonl")
