"""Tests for api_regions.config — environment-driven settings."""

import logging

import pytest

from api_regions.config import LOG_FORMAT, ApiRegionsConfig, configure_logging


class TestApiRegionsConfig:
    """Tests for ApiRegionsConfig.from_env()."""

    def test_defaults(self):
        """Without environment variables the defaults apply."""
        config = ApiRegionsConfig.from_env()
        assert config.log_level == "INFO"
        assert config.json_indent is None
        assert config.extension_name == "api-regions"

    def test_from_env(self, monkeypatch):
        """Every setting is read from its environment variable."""
        monkeypatch.setenv("API_REGIONS_LOG_LEVEL", "debug")
        monkeypatch.setenv("API_REGIONS_JSON_INDENT", "2")
        monkeypatch.setenv("API_REGIONS_EXTENSION_NAME", "regions")

        config = ApiRegionsConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.json_indent == 2
        assert config.extension_name == "regions"

    def test_blank_indent_means_compact(self, monkeypatch):
        """A blank indent is treated as unset."""
        monkeypatch.setenv("API_REGIONS_JSON_INDENT", "  ")
        assert ApiRegionsConfig.from_env().json_indent is None

    def test_invalid_indent(self, monkeypatch):
        """A non-numeric indent raises ValueError."""
        monkeypatch.setenv("API_REGIONS_JSON_INDENT", "wide")
        with pytest.raises(ValueError):
            ApiRegionsConfig.from_env()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_passes_level_and_format(self, monkeypatch):
        """basicConfig receives the configured level and format."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging(ApiRegionsConfig(log_level="WARNING"))

        assert calls == [{"level": "WARNING", "format": LOG_FORMAT}]

    def test_reads_environment_by_default(self, monkeypatch):
        """Without a config the environment is used."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("API_REGIONS_LOG_LEVEL", "error")

        configure_logging()

        assert calls[0]["level"] == "ERROR"
