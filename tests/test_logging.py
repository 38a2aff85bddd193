"""Test logging setup."""
import logging

from core.observability.logging_setup import HANDLER_NAME, setup_logging


def test_setup_logging_sets_level():
    root = setup_logging("debug")
    assert root.level == logging.DEBUG


def test_setup_logging_installs_single_handler():
    setup_logging("info")
    setup_logging("info")
    ours = [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1


def test_setup_logging_reads_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert setup_logging().level == logging.WARNING


def test_handler_is_identified_by_name():
    setup_logging("info")
    names = [h.get_name() for h in logging.getLogger().handlers]
    assert names.count(HANDLER_NAME) == 1
