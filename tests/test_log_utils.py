"""
Tests for the shared logger setup (log_utils.py).
"""

import logging
import os
import sys
from unittest.mock import patch

ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from log_utils import LOG_FORMAT, get_logger, setup_logging


class TestSetupLogging:

    def test_level_read_from_env_at_call_time(self, monkeypatch):
        monkeypatch.setenv("GES_LOG_LEVEL", "debug")
        with patch("log_utils.logging.basicConfig") as basic:
            setup_logging()
        basic.assert_called_once_with(level=logging.DEBUG, format=LOG_FORMAT)

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("GES_LOG_LEVEL", "DEBUG")
        with patch("log_utils.logging.basicConfig") as basic:
            setup_logging("warning")
        basic.assert_called_once_with(level=logging.WARNING, format=LOG_FORMAT)

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("GES_LOG_LEVEL", "chatty")
        with patch("log_utils.logging.basicConfig") as basic:
            setup_logging()
        basic.assert_called_once_with(level=logging.INFO, format=LOG_FORMAT)


def test_get_logger_returns_named_logger():
    assert get_logger("bridge").name == "bridge"
