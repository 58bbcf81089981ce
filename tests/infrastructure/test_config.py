"""Tests for settings and logging setup."""

import logging
from contextlib import contextmanager
from pathlib import Path

from catalog.infrastructure.config import Settings
from catalog.infrastructure.logging_config import configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.data_dir == Path("data")
        assert settings.organization_registry_url == "http://localhost:8081"
        assert settings.organization_registry_timeout == 5.0
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CATALOG_ORGANIZATION_REGISTRY_URL", "http://orgs:9000")
        monkeypatch.setenv("CATALOG_ORGANIZATION_REGISTRY_TIMEOUT", "1.5")

        settings = Settings()

        assert settings.data_dir == tmp_path
        assert settings.organization_registry_url == "http://orgs:9000"
        assert settings.organization_registry_timeout == 1.5


@contextmanager
def preserved_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)


class TestConfigureLogging:

    def test_single_stdout_handler_at_level(self):
        with preserved_root_logger() as root:
            configure_logging("debug")
            configure_logging("debug")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        with preserved_root_logger() as root:
            configure_logging("chatty")
            assert root.level == logging.INFO
