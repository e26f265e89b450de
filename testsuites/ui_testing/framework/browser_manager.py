"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Single browser instance per session for performance
    - Context isolation so every test gets its own cookies/storage
    - Base URL and default timeout applied to each new context

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    BrowserType,
    Error as PlaywrightError,
    Playwright,
)

from .settings import SUPPORTED_BROWSERS, UISettings


class BrowserManager:
    """
    Manages the browser instance and its contexts for UI testing.

    Usage:
        async with BrowserManager(base_url="https://www.saucedemo.com") as manager:
            context = await manager.new_context()
            page = await context.new_page()
            await page.goto("/")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": ["--ignore-certificate-errors"],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
        slow_mo: int = 0,
        base_url: Optional[str] = None,
        default_timeout_ms: Optional[int] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            slow_mo: Delay (ms) inserted between Playwright operations
            base_url: Base URL applied to every new context
            default_timeout_ms: Default action timeout applied to every new context
        """
        if browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser type {browser_type!r}; "
                f"expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )
        self.headless = headless
        self.browser_type = browser_type
        self.slow_mo = slow_mo
        self.base_url = base_url
        self.default_timeout_ms = default_timeout_ms

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    @classmethod
    def from_settings(cls, settings: UISettings) -> "BrowserManager":
        return cls(
            headless=settings.headless,
            browser_type=settings.browser,
            slow_mo=settings.slow_mo,
            base_url=settings.base_url,
            default_timeout_ms=settings.timeout_ms,
        )

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _launcher(self) -> BrowserType:
        if self.browser_type == "firefox":
            return self._playwright.firefox
        if self.browser_type == "webkit":
            return self._playwright.webkit
        return self._playwright.chromium

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        if self._browser is not None:
            return

        self._playwright = await async_playwright().start()

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }
        if self.slow_mo:
            launch_options["slow_mo"] = self.slow_mo
        # webkit/firefox reject chromium switches
        if self.browser_type != "chromium":
            launch_options.pop("args", None)

        self._browser = await self._launcher().launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless}, slow_mo={self.slow_mo})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in list(self._contexts):
            await self.close_context(context)

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options (override defaults)

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        if self.base_url and "base_url" not in context_options:
            context_options["base_url"] = self.base_url

        context = await self._browser.new_context(**context_options)
        if self.default_timeout_ms:
            context.set_default_timeout(self.default_timeout_ms)
        self._contexts.append(context)
        return context

    async def close_context(self, context: BrowserContext) -> None:
        """Close a context created by this manager. Already-closed contexts are ignored."""
        if context in self._contexts:
            self._contexts.remove(context)
        try:
            await context.close()
        except PlaywrightError as e:
            logger.debug(f"Context already closed: {e}")

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser

    @property
    def is_started(self) -> bool:
        return self._browser is not None

    @property
    def open_contexts(self) -> int:
        return len(self._contexts)


__all__ = [
    "BrowserManager",
]
