"""
Swag Labs E2E

Browser scenarios for the Sauce Demo store, driven through Playwright.
"""

__version__ = "0.1.0"

from .config import SuiteConfig
from .browser_engine import BrowserEngine
from .runner import ScenarioRunner
from .report import RunReport, ScenarioResult
from .scenarios import SCENARIOS, Scenario, get_scenario, select_scenarios

__all__ = [
    "SuiteConfig",
    "BrowserEngine",
    "ScenarioRunner",
    "RunReport",
    "ScenarioResult",
    "SCENARIOS",
    "Scenario",
    "get_scenario",
    "select_scenarios"
]
