"""Tests for logging configuration."""

import logging

import pytest

from envelope_api.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_configure_logging_sets_level():
    configure_logging("debug")

    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    configure_logging("chatty")

    assert logging.getLogger().level == logging.INFO
