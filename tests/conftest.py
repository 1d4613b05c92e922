"""Shared test fixtures for the vapisim test suite.

Provides simulator applications, HTTP test clients and configuration
objects used across the unit tests.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vapisim.access.models import AccessSetting
from vapisim.config.settings import ApplianceConfig, Settings
from vapisim.simulator import create_app


# ---------------------------------------------------------------------------
# Settings Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of any config file."""
    return Settings()


@pytest.fixture
def preset_settings() -> Settings:
    """Settings with every access method enabled at start."""
    return Settings(
        appliance=ApplianceConfig(
            consolecli_enabled=True,
            dcui_enabled=True,
            ssh_enabled=True,
            shell_enabled=True,
            shell_timeout=600,
        )
    )


# ---------------------------------------------------------------------------
# Application Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh simulator application."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """A test client for the simulator application."""
    return TestClient(app)


@pytest.fixture(params=list(AccessSetting), ids=lambda s: s.value)
def setting(request: pytest.FixtureRequest) -> AccessSetting:
    """Each access setting in turn."""
    return request.param
