"""Isolation for framework unit tests: fresh config singleton, no inherited overrides."""

import pytest

from testsuites.ui_testing.framework.config_loader import ConfigLoader


OVERRIDE_ENV_KEYS = (
    "UI_BASE_URL",
    "UI_BROWSER",
    "UI_HEADLESS",
    "UI_SLOW_MO",
    "UI_TIMEOUT_MS",
    "UI_DEMO_PAUSE_MS",
    "UI_PROBE_TIMEOUT_S",
    "CREDENTIALS_USERNAME",
    "CREDENTIALS_PASSWORD",
    "LOGGING_LEVEL",
    "LOGGING_FILE",
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    for key in OVERRIDE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
