"""
================================================================================
Scenario World (BDD)
================================================================================

Per-scenario runtime for pytest-bdd suites.

pytest-bdd step functions are synchronous while the page objects in this
repository are async. A ScenarioWorld owns a private event loop plus a
freshly launched browser and page, and exposes `run()` so steps can drive
the async API one interaction at a time:

    world = ScenarioWorld(settings)
    world.start()
    world.run(world.page.goto("/"))
    world.close()

================================================================================
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Optional, TypeVar

from loguru import logger
from playwright.async_api import Page

from .browser_manager import BrowserManager
from .settings import UISettings


T = TypeVar("T")


class ScenarioWorld:
    """Browser, page and event loop shared by the steps of one scenario."""

    def __init__(
        self,
        settings: UISettings,
        manager: Optional[BrowserManager] = None,
    ):
        self.settings = settings
        self.manager = manager or BrowserManager.from_settings(settings)
        self.loop = asyncio.new_event_loop()
        self.page: Optional[Page] = None

    def run(self, awaitable: Awaitable[T]) -> T:
        """Run a single browser interaction to completion on the scenario loop."""
        return self.loop.run_until_complete(awaitable)

    def start(self) -> Page:
        """Launch browser, open an isolated context and a page."""
        self.run(self.manager.start())
        context = self.run(self.manager.new_context())
        self.page = self.run(context.new_page())
        logger.debug(f"Scenario page opened ({self.settings.browser})")
        return self.page

    def pause(self, ms: Optional[int] = None) -> None:
        ms = self.settings.demo_pause_ms if ms is None else ms
        if self.page is not None and ms > 0:
            self.run(self.page.wait_for_timeout(ms))

    def screenshot(self, full_page: bool = True) -> Optional[bytes]:
        if self.page is None or self.page.is_closed():
            return None
        return self.run(self.page.screenshot(full_page=full_page))

    def close(self) -> None:
        """Close page and browser, then the loop. Runs even if start() failed midway."""
        try:
            if self.page is not None and not self.page.is_closed():
                self.run(self.page.close())
            self.run(self.manager.close())
        finally:
            self.page = None
            self.loop.close()
            logger.debug("Scenario browser closed")

    def __enter__(self) -> "ScenarioWorld":
        self.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = [
    "ScenarioWorld",
]
