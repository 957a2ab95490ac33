"""Shared test fixtures for the api_kit test suite."""

from __future__ import annotations

import os

import pytest

from api_kit import bootstrap, wrapper
from api_kit.config.api_config import ApiConfig
from api_kit.config.settings import ApiKitSettings


# ---------------------------------------------------------------------------
# Ensure required env vars are set for ApiKitSettings in tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set minimal env vars so ApiKitSettings can be instantiated in tests."""
    if "API_KIT_BASE_URL" not in os.environ:
        monkeypatch.setenv("API_KIT_BASE_URL", "http://localhost:3000/api/v1")


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Every test starts and ends without a process-wide configuration."""
    wrapper.reset()
    bootstrap._state.clear()
    yield
    wrapper.reset()
    bootstrap._state.clear()


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> ApiKitSettings:
    """Test settings with safe defaults."""
    return ApiKitSettings(
        base_url="http://localhost:3000/api/v1",
        connect_timeout_seconds=5.0,
        receive_timeout_seconds=10.0,
        headers={"Accept": "application/json"},
    )


@pytest.fixture
def status_200_config() -> ApiConfig:
    """Resolver used by the end-to-end scenarios: success iff status == 200."""
    return ApiConfig(is_success=lambda status: status == 200)

