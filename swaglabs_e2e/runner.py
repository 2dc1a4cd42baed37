import logging
import os
import time
from typing import Iterable, Optional

from playwright.async_api import Error as PlaywrightError

from .browser_engine import BrowserEngine
from .config import SuiteConfig
from .report import RunReport, ScenarioResult
from .scenarios import Scenario

logger = logging.getLogger(__name__)


class ScenarioRunner:
    """Runs catalog scenarios one after another, each on its own page"""

    def __init__(self, engine: BrowserEngine, config: Optional[SuiteConfig] = None):
        self.engine = engine
        self.config = config or engine.config

    async def run_scenario(self, scenario: Scenario) -> ScenarioResult:
        page = await self.engine.new_page()
        started = time.monotonic()
        error = None
        screenshot = None

        try:
            await scenario.run(page, self.config)
        except (AssertionError, PlaywrightError) as e:
            error = str(e) or type(e).__name__
            logger.error("Scenario %s failed: %s", scenario.name, error)
            screenshot = await self._capture(page, scenario)
        finally:
            duration_ms = int((time.monotonic() - started) * 1000)
            final_url = page.url
            await self.engine.close_page(page)

        if error is None:
            logger.info("Scenario %s passed in %dms", scenario.name, duration_ms)

        return ScenarioResult(
            name=scenario.name,
            title=scenario.title,
            status="failed" if error is not None else "passed",
            duration_ms=duration_ms,
            final_url=final_url,
            error=error,
            screenshot=screenshot
        )

    async def run(self, scenarios: Iterable[Scenario]) -> RunReport:
        report = RunReport(base_url=self.config.base_url, browser=self.config.browser)

        for scenario in scenarios:
            report.add(await self.run_scenario(scenario))

        return report.finish()

    async def _capture(self, page, scenario: Scenario) -> Optional[str]:
        if not self.config.artifacts_dir:
            return None

        os.makedirs(self.config.artifacts_dir, exist_ok=True)
        path = os.path.join(self.config.artifacts_dir, f"{scenario.name}.png")
        try:
            await self.engine.take_screenshot(page, path)
        except PlaywrightError as e:
            logger.warning("Could not capture screenshot for %s: %s", scenario.name, e)
            return None
        return path
