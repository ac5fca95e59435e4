"""tests/unit/test_settings.py"""

import logging

import pytest

from urlsplit.utils.settings import Settings, parse_bool


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default settings with an empty environment."""
        settings = Settings.from_env({})
        assert settings.require_url is False
        assert settings.log_level == logging.WARNING

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_require_url_true(self, value):
        """Test truthy URLSPLIT_REQUIRE_URL values."""
        assert Settings.from_env({"URLSPLIT_REQUIRE_URL": value}).require_url is True

    @pytest.mark.parametrize("value", ["", "0", "false", "No", "off"])
    def test_require_url_false(self, value):
        """Test falsy URLSPLIT_REQUIRE_URL values."""
        assert Settings.from_env({"URLSPLIT_REQUIRE_URL": value}).require_url is False

    def test_require_url_invalid(self):
        """Test that an unparsable boolean raises ValueError."""
        with pytest.raises(ValueError, match="Invalid boolean value"):
            Settings.from_env({"URLSPLIT_REQUIRE_URL": "maybe"})

    def test_log_level(self):
        """Test that level names are case-insensitive."""
        assert Settings.from_env({"URLSPLIT_LOG_LEVEL": "debug"}).log_level == logging.DEBUG

    def test_log_level_invalid(self):
        """Test that unknown level names raise ValueError."""
        with pytest.raises(ValueError, match="Invalid log level"):
            Settings.from_env({"URLSPLIT_LOG_LEVEL": "loud"})

    def test_reads_os_environ_by_default(self, monkeypatch):
        """Test that from_env() falls back to os.environ."""
        monkeypatch.setenv("URLSPLIT_REQUIRE_URL", "1")
        monkeypatch.delenv("URLSPLIT_LOG_LEVEL", raising=False)
        assert Settings.from_env().require_url is True


def test_parse_bool_strips_whitespace():
    """Test boolean parsing helper."""
    assert parse_bool("  TRUE\n") is True
