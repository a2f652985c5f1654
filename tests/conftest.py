# tests/conftest.py
"""
Pytest configuration and shared fixtures.
"""

import os

import pytest

from wallet_display.utils.constants import LOCALE_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_locale_environment():
    """Start every test without a configured display locale and restore
    the environment afterwards."""
    original_env = os.environ.copy()
    os.environ.pop(LOCALE_ENV_VAR, None)
    yield
    os.environ.clear()
    os.environ.update(original_env)
