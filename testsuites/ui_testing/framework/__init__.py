"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the Swag Labs login suites.

Components:
    - config_loader: YAML configuration with environment overrides
    - settings: typed UI settings and credentials
    - log_config: Loguru setup
    - browser_manager: Browser lifecycle management
    - page_base: Base page object for common operations
    - scenario_world: per-scenario browser runtime for BDD steps

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError
from .settings import Credentials, UISettings
from .log_config import init_logger
from .browser_manager import BrowserManager
from .page_base import BasePage
from .scenario_world import ScenarioWorld

__all__ = [
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "Credentials",
    "ScenarioWorld",
    "UISettings",
    "init_logger",
]
