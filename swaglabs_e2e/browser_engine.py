import logging
from typing import Dict, Optional

from playwright.async_api import async_playwright, expect, Browser, BrowserContext, Page

from .config import SuiteConfig

logger = logging.getLogger(__name__)


class BrowserEngine:
    """Owns the Playwright browser and hands out one isolated page per scenario"""

    def __init__(self, config: Optional[SuiteConfig] = None):
        self.config = config or SuiteConfig()
        self.playwright = None
        self.browser: Optional[Browser] = None
        self.contexts: Dict[Page, BrowserContext] = {}

    async def __aenter__(self) -> "BrowserEngine":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.cleanup()

    async def initialize(self):
        """Start Playwright and launch the configured browser"""
        self.playwright = await async_playwright().start()
        browser_type = getattr(self.playwright, self.config.browser)

        args = ['--no-sandbox', '--disable-setuid-sandbox'] if self.config.browser == "chromium" else []
        self.browser = await browser_type.launch(headless=self.config.headless, args=args)

        expect.set_options(timeout=self.config.timeout_ms)
        logger.info("Launched %s (headless=%s)", self.config.browser, self.config.headless)

    async def new_page(self) -> Page:
        """Open a fresh context and page"""
        if self.browser is None:
            raise RuntimeError("BrowserEngine.initialize() must be awaited first")

        context = await self.browser.new_context()
        try:
            page = await context.new_page()
            page.set_default_timeout(self.config.timeout_ms)
            page.set_default_navigation_timeout(self.config.navigation_timeout_ms)
        except Exception:
            await context.close()
            raise

        page.on("console", lambda msg: logger.debug("Console %s: %s", msg.type, msg.text))
        page.on("pageerror", lambda err: logger.warning("Page error: %s", err))

        self.contexts[page] = context
        return page

    async def close_page(self, page: Page):
        context = self.contexts.pop(page, None)
        if context is not None:
            await context.close()

    async def take_screenshot(self, page: Page, path: Optional[str] = None) -> bytes:
        return await page.screenshot(path=path, full_page=True)

    async def cleanup(self):
        """Clean up browser resources"""
        for context in list(self.contexts.values()):
            await context.close()
        self.contexts.clear()

        if self.browser:
            await self.browser.close()
            self.browser = None
        if self.playwright:
            await self.playwright.stop()
            self.playwright = None
