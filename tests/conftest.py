"""Shared fixtures for the OTP Entry test suite.

Settings and the logger are configured at import time, so the environment
is prepared here before any application module is imported.
"""

import os

os.environ["LOG_TO_FILE"] = "false"
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def dash_at_3():
    """Formatter that always places a dash in cell 3."""
    from utils.formatters import make_fixed_character_formatter

    return make_fixed_character_formatter({3: "-"})
