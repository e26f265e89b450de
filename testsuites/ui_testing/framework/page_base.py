"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and URL handling
    - Title / URL assertions
    - Demo pacing between steps
    - Failure capture for reports

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page, expect

from .config_loader import ConfigLoader
from .settings import DEFAULT_BASE_URL


class BasePage:
    """
    Base class for all page objects.

    A page object never creates or closes the page handle it wraps; the
    fixtures own its lifecycle.

    Usage:
        class InventoryPage(BasePage):
            URL_PATH = "/inventory.html"

            async def verify_loaded(self):
                await self.expect_url()
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        demo_pause_ms: Optional[int] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (defaults to `ui.base_url`)
            demo_pause_ms: Pause used by `pause()` (defaults to `ui.demo_pause_ms`)
        """
        self.page = page
        if not base_url or demo_pause_ms is None:
            config = ConfigLoader()
            base_url = base_url or config.get("ui.base_url", DEFAULT_BASE_URL)
            if demo_pause_ms is None:
                demo_pause_ms = config.get("ui.demo_pause_ms", 1000)
        self.base_url = base_url.rstrip("/")
        self.demo_pause_ms = demo_pause_ms

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate_to(self, url: str, wait_for: str = "load") -> None:
        """Navigate to an absolute URL or a path relative to the context base URL."""
        with allure.step(f"Navigate to {url}"):
            await self.page.goto(url, wait_until=wait_for)
            logger.debug(f"Navigated to: {url}")

    async def pause(self, ms: Optional[int] = None) -> None:
        """Hold the page still so a headed run can be followed by eye."""
        ms = self.demo_pause_ms if ms is None else ms
        if ms > 0:
            await self.page.wait_for_timeout(ms)

    # =========================================================================
    # Assertions
    # =========================================================================

    async def expect_title(self, title: Optional[str] = None) -> None:
        """Assert the document title (defaults to PAGE_TITLE)."""
        await expect(self.page).to_have_title(title or self.PAGE_TITLE)

    async def expect_url(self, url: Optional[str] = None) -> None:
        """Assert the current URL (defaults to this page's URL)."""
        await expect(self.page).to_have_url(url or self.url)

    # =========================================================================
    # Failure Capture
    # =========================================================================

    async def capture_failure(self, test_name: str) -> None:
        """Attach a full-page screenshot and the current URL to the report."""
        if self.page.is_closed():
            return
        with allure.step("Capture failure details"):
            png = await self.page.screenshot(full_page=True)
            allure.attach(
                png,
                name=f"failure_{test_name}",
                attachment_type=allure.attachment_type.PNG,
            )
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )
        logger.debug(f"Failure captured for {test_name} at {self.page.url}")


__all__ = [
    "BasePage",
]
