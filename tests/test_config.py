"""Tests for configuration loading and logging setup."""

import logging

import pytest

from shared_diff.config import Config
from shared_diff.log import setup_logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ("SHARED_DIFF_LOG_LEVEL", "SHARED_DIFF_LOG_DIR",
                "SHARED_DIFF_SUMMARY_TOP_N"):
        monkeypatch.delenv(key, raising=False)
    # Keep CWD / home lookups away from any real config file
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


class TestConfig:
    def test_defaults(self):
        cfg = Config()

        assert cfg.LOG_LEVEL == "WARNING"
        assert cfg.LOG_DIR == ""
        assert cfg.SUMMARY_TOP_N == 0

    def test_yaml_values(self):
        cfg = Config({"log_level": "debug", "summary_top_n": 5})

        assert cfg.LOG_LEVEL == "DEBUG"
        assert cfg.SUMMARY_TOP_N == 5

    def test_env_overrides_yaml(self, monkeypatch):
        monkeypatch.setenv("SHARED_DIFF_SUMMARY_TOP_N", "3")
        cfg = Config({"summary_top_n": 5})

        assert cfg.SUMMARY_TOP_N == 3

    def test_invalid_number_falls_back(self):
        cfg = Config({"summary_top_n": "lots"})

        assert cfg.SUMMARY_TOP_N == 0

    def test_load_from_cwd(self, tmp_path):
        (tmp_path / ".shared_diff.yaml").write_text("log_level: info\n")

        cfg = Config.load()

        assert cfg.LOG_LEVEL == "INFO"

    def test_load_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yml"
        path.write_text("summary_top_n: 7\n")

        assert Config.load(str(path)).SUMMARY_TOP_N == 7

    def test_missing_explicit_path(self, tmp_path):
        cfg = Config.load(str(tmp_path / "nope.yaml"))

        assert cfg.SUMMARY_TOP_N == 0

    def test_invalid_yaml_uses_defaults(self, tmp_path):
        (tmp_path / ".shared_diff.yaml").write_text("log_level: [unclosed\n")

        assert Config.load().LOG_LEVEL == "WARNING"

    def test_non_mapping_yaml_uses_defaults(self, tmp_path):
        (tmp_path / ".shared_diff.yaml").write_text("- just\n- a list\n")

        assert Config.load().LOG_LEVEL == "WARNING"


class TestSetupLogger:
    def test_level_and_handlers(self):
        logger = setup_logger(Config({"log_level": "debug"}))

        assert logger.name == "shared_diff"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_calls_do_not_stack(self):
        setup_logger()
        logger = setup_logger()

        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = setup_logger(Config({"log_dir": str(log_dir)}))
        logging.getLogger("shared_diff.parser").warning("hello")
        for handler in logger.handlers:
            handler.flush()

        files = list(log_dir.iterdir())
        assert len(files) == 1
        assert "hello" in files[0].read_text(encoding="utf-8")

        # Release the file handle before tmp_path cleanup
        setup_logger()

    def test_unknown_level_falls_back(self):
        logger = setup_logger(Config({"log_level": "chatty"}))

        assert logger.level == logging.WARNING
