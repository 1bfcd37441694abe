# -*- coding: utf-8 -*-
"""
Shared fixtures for all tests.
"""

import pytest

from viewable.defaults import DEFAULT_CONFIG_PACKAGE
from viewable.support import Config, EnvHelper


# =============================================================================
# CONFIG ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def clean_config():
    """Reset runtime overrides and loaded config modules around each test."""
    Config.clear_runtime_overrides()
    Config.use_package(DEFAULT_CONFIG_PACKAGE)
    yield
    Config.clear_runtime_overrides()
    Config.use_package(DEFAULT_CONFIG_PACKAGE)
    EnvHelper.reset()


# =============================================================================
# DATA FIXTURES
# =============================================================================

@pytest.fixture
def alice() -> dict:
    """Simple record used across the scenarios."""
    return {'name': 'Alice'}


@pytest.fixture
def item() -> dict:
    """Record with several fields for displays taking arguments."""
    return {'text': 'some data', 'id': 'my-id', 'value': 42}


@pytest.fixture
def span():
    """Default display wrapping the name in a span."""
    return lambda d: f"<span>{d['name']}</span>"
