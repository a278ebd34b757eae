"""
Tests for configuration, validators and logging setup.
"""

import json
import logging
import os
from pathlib import Path

import pytest

from release_checker.config import (CONFIG_ENV_VAR, DEFAULT_USER_AGENT,
                                    CheckerConfig, Config)
from release_checker.utils.logging import (get_log_file_path, get_logger,
                                           is_logging_configured, setup_logging)
from release_checker.utils.validators import (ConfigValidator,
                                              SourceIdValidator,
                                              ValidationError)


@pytest.fixture
def restore_root_logging():
    """Put root logger handlers back the way they were after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestConfig:
    """Test Config loading and saving."""

    def test_defaults(self):
        config = Config()
        assert config.checker.user_agent == DEFAULT_USER_AGENT
        assert DEFAULT_USER_AGENT.startswith("release-checker/")
        assert config.checker.request_timeout == 10.0
        assert config.checker.max_workers == 4
        assert config.checker.comparator == "decimal"
        assert config.logging.file_path == ""
        assert config.validate() is True

    def test_save_and_load(self, temp_directory):
        path = temp_directory / "nested" / "config.json"
        config = Config()
        config.checker.max_workers = 8
        config.checker.comparator = "semantic"
        config.save_to_file(str(path))

        loaded = Config.load_from_file(str(path))
        assert loaded.checker.max_workers == 8
        assert loaded.checker.comparator == "semantic"
        assert loaded.to_dict() == config.to_dict()

    def test_missing_file_uses_defaults(self, temp_directory):
        config = Config.load_from_file(str(temp_directory / "absent.json"))
        assert config.to_dict() == Config().to_dict()

    def test_invalid_json_uses_defaults(self, temp_directory):
        path = temp_directory / "config.json"
        path.write_text("{not json", encoding="utf-8")

        config = Config.load_from_file(str(path))
        assert config.checker == CheckerConfig()

    def test_non_object_root_uses_defaults(self, temp_directory):
        path = temp_directory / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")

        config = Config.load_from_file(str(path))
        assert config.checker == CheckerConfig()

    def test_unknown_keys_ignored(self, temp_directory):
        path = temp_directory / "config.json"
        path.write_text(json.dumps({
            "checker": {"request_timeout": 3, "retries": 5},
            "cache": {"ttl": 60},
        }), encoding="utf-8")

        config = Config.load_from_file(str(path))
        assert config.checker.request_timeout == 3
        assert not hasattr(config.checker, "retries")

    def test_default_path(self):
        path = Path(Config.get_default_config_path())
        assert path.name == "config.json"
        assert path.parent.name == "release_checker"

    def test_default_path_from_environment(self, monkeypatch, temp_directory):
        target = str(temp_directory / "custom.json")
        monkeypatch.setenv(CONFIG_ENV_VAR, target)
        assert Config.get_default_config_path() == target

    def test_validate_rejects_bad_values(self):
        config = Config()
        config.checker.request_timeout = 0
        config.checker.comparator = "calver"
        config.logging.level = "LOUD"
        assert config.validate() is False

    def test_apply_logging_to_file(self, temp_directory, restore_root_logging):
        config = Config()
        config.logging.file_path = str(temp_directory / "logs" / "checker.log")
        config.logging.log_to_console = False
        config.apply_logging()

        assert get_log_file_path() == os.path.abspath(temp_directory / "logs" / "checker.log")
        assert is_logging_configured()


class TestValidators:
    """Test validators."""

    def test_source_id(self):
        validator = SourceIdValidator()
        assert validator.is_valid("owner/repo")
        assert validator.is_valid("12345")
        assert not validator.is_valid("")
        assert not validator.is_valid("  \t")
        assert not validator.is_valid(12345)

    def test_require(self):
        validator = SourceIdValidator()
        assert validator.require("abc") == "abc"
        with pytest.raises(ValidationError, match="blank"):
            validator.require(" ")

    def test_checker_config_errors(self):
        errors = ConfigValidator().validate_checker_config({
            "request_timeout": -1,
            "max_workers": 0,
            "user_agent": "",
            "comparator": "decimal",
        })
        assert len(errors) == 3

    def test_boolean_is_not_a_number(self):
        errors = ConfigValidator().validate_checker_config({
            "request_timeout": True,
            "max_workers": True,
            "user_agent": "x",
            "comparator": "lexical",
        })
        assert len(errors) == 2

    def test_logging_config_errors(self):
        errors = ConfigValidator().validate_logging_config({
            "level": "debug",
            "max_file_size": 10,
            "backup_count": -1,
        })
        assert errors == [
            "max_file_size must be at least 1024 bytes",
            "backup_count cannot be negative",
        ]


class TestLogging:
    """Test logging helpers."""

    def test_get_logger(self):
        assert get_logger("release_checker.test").name == "release_checker.test"
        assert get_logger() is logging.getLogger()

    def test_package_logger_has_null_handler(self):
        import release_checker  # noqa: F401
        handlers = logging.getLogger("release_checker").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_setup_logging_console(self, restore_root_logging):
        setup_logging(level="debug", log_file=None)
        root_logger = logging.getLogger()

        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers)
        assert get_log_file_path() is None
        assert logging.getLogger("urllib3.connectionpool").level == logging.WARNING

    def test_setup_logging_keeps_host_handlers(self, restore_root_logging):
        root_logger = logging.getLogger()
        host_handler = logging.NullHandler()
        root_logger.addHandler(host_handler)
        before = root_logger.handlers[:]

        setup_logging(level="info")
        installed = [h for h in root_logger.handlers if h not in before]
        setup_logging(level="info")

        assert len(installed) == 1
        assert all(h in root_logger.handlers for h in before)
        assert installed[0] not in root_logger.handlers
        assert len(root_logger.handlers) == len(before) + 1
