"""
================================================================================
UI Settings & Test Data Models
================================================================================

Typed views over the `ui` and `credentials` configuration sections.

Models:
    - UISettings: target URL, browser selection and pacing
    - Credentials: username/password pair used by the login flows

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config_loader import ConfigLoader, ConfigurationError


DEFAULT_BASE_URL = "https://www.saucedemo.com"
INVENTORY_PATH = "/inventory.html"
APP_TITLE = "Swag Labs"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class UISettings:
    """Browser and target application settings."""

    base_url: str = DEFAULT_BASE_URL
    browser: str = "chromium"
    headless: bool = True
    slow_mo: int = 0
    timeout_ms: int = 10000
    demo_pause_ms: int = 1000
    probe_timeout_s: float = 10.0

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("ui.base_url must not be empty")
        if self.browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"Unsupported browser {self.browser!r}; "
                f"expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )
        if self.demo_pause_ms < 0 or self.timeout_ms <= 0:
            raise ConfigurationError("ui timeouts must be positive")
        # Normalise so that f"{base_url}{path}" never doubles the slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "UISettings":
        config = config or ConfigLoader()
        return cls(
            base_url=config.get("ui.base_url", DEFAULT_BASE_URL),
            browser=str(config.get("ui.browser", "chromium")).lower(),
            headless=config.get("ui.headless", True),
            slow_mo=config.get("ui.slow_mo", 0),
            timeout_ms=config.get("ui.timeout_ms", 10000),
            demo_pause_ms=config.get("ui.demo_pause_ms", 1000),
            probe_timeout_s=config.get("ui.probe_timeout_s", 10.0),
        )

    @property
    def inventory_url(self) -> str:
        """Absolute URL of the page shown after a successful login."""
        return f"{self.base_url}{INVENTORY_PATH}"


@dataclass(frozen=True)
class Credentials:
    """
    Login credentials.

    Both values must be non-empty strings. The password is excluded from
    the repr so it never ends up in logs or assertion messages.
    """

    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        for name in ("username", "password"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string")

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "Credentials":
        config = config or ConfigLoader()
        return cls(
            username=config.get("credentials.username", "standard_user"),
            password=config.get("credentials.password", "secret_sauce"),
        )


__all__ = [
    "APP_TITLE",
    "Credentials",
    "DEFAULT_BASE_URL",
    "INVENTORY_PATH",
    "SUPPORTED_BROWSERS",
    "UISettings",
]
