"""Tests for logging setup."""

import pytest
from loguru import logger

from page_utils.helpers.logging_helpers import configure_logger, console_level


class TestConsoleLevel:
    """Tests for console_level."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "quiet, verbose, expected",
        [
            (False, 0, "WARNING"),
            (False, 1, "INFO"),
            (False, 2, "DEBUG"),
            (False, 5, "DEBUG"),
            (True, 2, "ERROR"),
        ],
    )
    def test_flags(self, clean_env, quiet, verbose, expected):
        assert console_level(quiet=quiet, verbose=verbose) == expected

    @pytest.mark.unit
    def test_env_override(self, clean_env, monkeypatch):
        monkeypatch.setenv("PAGE_UTILS_LOG_LEVEL", "debug")
        assert console_level(quiet=True) == "DEBUG"


class TestConfigureLogger:
    """Tests for configure_logger."""

    @pytest.mark.unit
    def test_file_sink_written_when_log_dir_set(self, clean_env, monkeypatch, tmp_path):
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("PAGE_UTILS_LOG_DIR", str(log_dir))

        configure_logger(source="test", quiet=True)
        logger.debug("hello from the test")

        files = list(log_dir.glob("test_*.log"))
        assert len(files) == 1
        assert "hello from the test" in files[0].read_text()
        logger.remove()

    @pytest.mark.unit
    def test_no_log_dir_created_without_env(self, clean_env, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        configure_logger(source="test")
        logger.remove()
        assert list(tmp_path.iterdir()) == []


class TestUnknownLevelOverride:
    """Tests for an unusable PAGE_UTILS_LOG_LEVEL."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["verbose", "loud", "  "])
    def test_ignored_in_favour_of_flags(self, clean_env, monkeypatch, value):
        monkeypatch.setenv("PAGE_UTILS_LOG_LEVEL", value)
        assert console_level(verbose=1) == "INFO"

    @pytest.mark.unit
    def test_configure_logger_does_not_raise(self, clean_env, monkeypatch):
        monkeypatch.setenv("PAGE_UTILS_LOG_LEVEL", "verbose")
        configure_logger(source="test", quiet=True)
        logger.remove()

    @pytest.mark.unit
    def test_override_is_trimmed(self, clean_env, monkeypatch):
        monkeypatch.setenv("PAGE_UTILS_LOG_LEVEL", " info ")
        assert console_level(quiet=True) == "INFO"
