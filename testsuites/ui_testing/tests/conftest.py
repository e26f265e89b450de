"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures shared by every login suite (basic, fixtures, pom, bdd).

Dependency graph:

    ui_settings ──┬── target_available ─────────────┐
                  └── browser_manager ── context ── page ──┬── login_page
                                                           └── inventory_page
    credentials

Key Features:
- Session-wide browser, isolated context + page per test
- Environment problems (no browser binary, target offline) become skips
- Screenshot attached to Allure when a test fails

================================================================================
"""

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Error as PlaywrightError, Page

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.settings import Credentials, UISettings
from testsuites.ui_testing.pages.inventory_page import InventoryPage
from testsuites.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Settings Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings() -> UISettings:
    """Typed `ui` configuration section."""
    settings = UISettings.from_config()
    logger.info(
        f"UI target: {settings.base_url} "
        f"(browser={settings.browser}, headless={settings.headless})"
    )
    return settings


@pytest.fixture(scope="session")
def target_available(ui_settings: UISettings) -> str:
    """
    Skip UI tests when the application under test cannot be reached.

    Returns the base URL so dependants can use it directly.
    """
    try:
        response = httpx.get(
            ui_settings.base_url,
            timeout=ui_settings.probe_timeout_s,
            follow_redirects=True,
        )
    except httpx.HTTPError as e:
        pytest.skip(f"Target {ui_settings.base_url} unreachable: {e}")
    if response.status_code >= 500:
        pytest.skip(f"Target {ui_settings.base_url} unhealthy: HTTP {response.status_code}")
    return ui_settings.base_url


@pytest.fixture
def credentials() -> Credentials:
    """Login credentials for the standard user."""
    return Credentials.from_config()


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(ui_settings: UISettings) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Launches a single browser for the whole session to keep startup cost low.
    """
    manager = BrowserManager.from_settings(ui_settings)
    try:
        await manager.start()
    except PlaywrightError as e:
        await manager.close()
        pytest.skip(f"Browser {ui_settings.browser} could not be launched: {e}")
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context()
    yield context
    await browser_manager.close_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    request: pytest.FixtureRequest,
    context: BrowserContext,
    target_available: str,
) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Creates a new page for each test within the browser context. If the
    test (or a fixture depending on this page) failed, a full-page
    screenshot is attached before the page is closed.
    """
    page = await context.new_page()
    yield page

    if _test_failed(request.node):
        try:
            await BasePage(page, base_url=target_available, demo_pause_ms=0).capture_failure(
                request.node.name
            )
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, ui_settings: UISettings) -> LoginPage:
    """
    Provides LoginPage instance.

    Use this fixture for tests that interact with the login page.
    """
    return LoginPage(page, base_url=ui_settings.base_url, demo_pause_ms=ui_settings.demo_pause_ms)


@pytest.fixture
def inventory_page(page: Page, ui_settings: UISettings) -> InventoryPage:
    """Provides InventoryPage instance."""
    return InventoryPage(page, base_url=ui_settings.base_url, demo_pause_ms=ui_settings.demo_pause_ms)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

def _test_failed(item: pytest.Item) -> bool:
    for when in ("setup", "call"):
        report = getattr(item, f"rep_{when}", None)
        if report is not None and report.failed:
            return True
    return False


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Keep each phase's report on the item (`item.rep_setup`, `item.rep_call`)
    so fixture teardown can tell whether the test failed.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
    if report.failed and report.when in ("setup", "call"):
        logger.error(f"{item.nodeid} failed during {report.when}")
