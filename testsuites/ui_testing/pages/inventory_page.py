"""
================================================================================
Inventory Page Object (Async / Playwright)
================================================================================

Landing page after a successful login (`/inventory.html`).

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from playwright.async_api import Page, expect

from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.settings import APP_TITLE, INVENTORY_PATH


class InventoryPage(BasePage):
    """Inventory page object (async)."""

    URL_PATH = INVENTORY_PATH
    PAGE_TITLE = APP_TITLE
    HEADER_TEXT = APP_TITLE

    HEADER = ".app_logo"

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        demo_pause_ms: Optional[int] = None,
    ):
        super().__init__(page, base_url=base_url, demo_pause_ms=demo_pause_ms)
        self.header = page.locator(self.HEADER)

    @allure.step("Verify inventory page loaded")
    async def verify_loaded(self) -> None:
        await self.expect_url()
        await expect(self.header).to_have_text(self.HEADER_TEXT)


__all__ = [
    "InventoryPage",
]
