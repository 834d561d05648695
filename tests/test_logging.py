"""Tests for logging setup."""

import logging

import pytest
from unittest.mock import patch

from toolscout.core.config import settings
from toolscout.core.logging import QUIET_LOGGERS, setup_logging


@pytest.fixture
def restore_root_level():
    """Put the root logger level back after the test."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


class TestSetupLogging:
    def test_log_level_from_settings(self, restore_root_level):
        with patch.object(settings, "debug", False), patch.object(settings, "log_level", "warning"):
            setup_logging()

        assert restore_root_level.level == logging.WARNING

    def test_debug_overrides_log_level(self, restore_root_level):
        with patch.object(settings, "debug", True), patch.object(settings, "log_level", "ERROR"):
            setup_logging()

        assert restore_root_level.level == logging.DEBUG

    def test_third_party_loggers_quieted(self, restore_root_level):
        setup_logging()

        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
