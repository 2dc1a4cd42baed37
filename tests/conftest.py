import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio

from swaglabs_e2e.browser_engine import BrowserEngine
from swaglabs_e2e.config import SuiteConfig

E2E_ENABLED = os.getenv("SAUCEDEMO_E2E", "0") == "1"


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: drives the live Sauce Demo site in a real browser")


def pytest_collection_modifyitems(config, items):
    if E2E_ENABLED:
        return
    skip = pytest.mark.skip(reason="live browser tests are disabled, set SAUCEDEMO_E2E=1")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def suite_config():
    return SuiteConfig.from_env()


@pytest_asyncio.fixture
async def page(suite_config):
    """Real page in its own context, torn down after the test"""
    async with BrowserEngine(suite_config) as engine:
        yield await engine.new_page()


@pytest.fixture
def locator():
    """Locator double whose actions are awaitable and whose chaining returns itself"""
    mock = MagicMock()
    mock.fill = AsyncMock()
    mock.click = AsyncMock()
    mock.nth.return_value = mock
    mock.first = mock
    return mock


@pytest.fixture
def fake_page(locator):
    mock = MagicMock()
    mock.url = "https://www.saucedemo.com/"
    mock.goto = AsyncMock()
    mock.get_by_placeholder.return_value = locator
    mock.get_by_role.return_value = locator
    mock.get_by_text.return_value = locator
    mock.locator.return_value = locator
    return mock


class RecordingLocator:
    """Locator double that writes every action into its page's log"""

    def __init__(self, page, query):
        self.page = page
        self.query = query

    def nth(self, index):
        return RecordingLocator(self.page, self.query + ("nth", index))

    @property
    def first(self):
        return RecordingLocator(self.page, self.query + ("first",))

    async def fill(self, value):
        self.page.log.append(("fill", self.query, value))

    async def click(self):
        self.page.log.append(("click", self.query))


class RecordingPage:
    """Page double that logs navigation and hands out recording locators"""

    def __init__(self):
        self.url = "https://www.saucedemo.com/"
        self.log = []
        self.handlers = {}
        self.console_on_load = []

    def get_by_placeholder(self, text):
        return RecordingLocator(self, ("placeholder", text))

    def get_by_role(self, role, name=None):
        if hasattr(name, "pattern"):
            name = name.pattern
        return RecordingLocator(self, ("role", role, name))

    def get_by_text(self, text):
        return RecordingLocator(self, ("text", text))

    def locator(self, selector):
        return RecordingLocator(self, ("css", selector))

    def on(self, event, handler):
        self.handlers.setdefault(event, []).append(handler)

    async def goto(self, url):
        self.log.append(("goto", url))
        for msg_type, text in self.console_on_load:
            for handler in self.handlers.get("console", []):
                handler(SimpleNamespace(type=msg_type, text=text))

    async def wait_for_timeout(self, timeout):
        self.log.append(("wait", timeout))


class RecordingExpect:
    """Stands in for playwright's expect, logging (target, assertion, args)"""

    def __init__(self, page):
        self.page = page

    def __call__(self, target):
        key = "page" if target is self.page else target.query
        return RecordedAssertions(self.page.log, key)


class RecordedAssertions:

    def __init__(self, log, key):
        self._log = log
        self._key = key

    def __getattr__(self, name):
        async def assertion(*args, **kwargs):
            args = tuple(a.pattern if hasattr(a, "pattern") else a for a in args)
            self._log.append(("expect", self._key, name) + args)
        return assertion


@pytest.fixture
def recording_page():
    return RecordingPage()


@pytest.fixture
def recorded_expect(recording_page):
    recorder = RecordingExpect(recording_page)
    with patch("swaglabs_e2e.pages.expect", recorder), \
            patch("swaglabs_e2e.scenarios.expect", recorder):
        yield recorder
