"""
Scenario catalog for the Sauce Demo store.

Each scenario is a flat navigate -> act -> assert script run against a fresh
page. Waiting and retrying are left to Playwright's ``expect``.
"""

import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, FrozenSet, Iterable, List, Optional

from playwright.async_api import Page, expect

from . import site
from .config import SuiteConfig
from .pages import CartPage, CheckoutPage, InventoryPage, LoginPage, Menu

# console noise the store always emits
IGNORED_CONSOLE_ERRORS = ("favicon", "404", "net::ERR_")

ScenarioFn = Callable[[Page, SuiteConfig], Awaitable[None]]


@dataclass(frozen=True)
class Scenario:
    name: str
    title: str
    tags: FrozenSet[str]
    run: ScenarioFn


SCENARIOS: Dict[str, Scenario] = {}


def scenario(title: str, *tags: str):
    """Register the decorated coroutine in the catalog under its function name"""
    def register(fn: ScenarioFn) -> ScenarioFn:
        SCENARIOS[fn.__name__] = Scenario(fn.__name__, title, frozenset(tags), fn)
        return fn
    return register


async def _logged_in(page: Page, config: SuiteConfig) -> InventoryPage:
    login = LoginPage(page, config.base_url)
    await login.open()
    await login.login(site.STANDARD_USER)
    return InventoryPage(page, config.base_url)


@scenario("Application loads and displays login page", "smoke")
async def app_loads(page: Page, config: SuiteConfig):
    login = LoginPage(page, config.base_url)
    await login.open()
    await login.expect_ready()


@scenario("User can login with valid credentials", "smoke")
async def valid_login(page: Page, config: SuiteConfig):
    inventory = await _logged_in(page, config)
    await inventory.expect_loaded()


@scenario("Error handling for invalid login", "smoke", "checkout")
async def invalid_login(page: Page, config: SuiteConfig):
    login = LoginPage(page, config.base_url)
    await login.open()
    await login.login(site.INVALID_USER)
    await login.expect_rejected()


@scenario("Shopping cart functionality works", "smoke")
async def cart_badge(page: Page, config: SuiteConfig):
    inventory = await _logged_in(page, config)
    await inventory.expect_route(site.INVENTORY)

    await inventory.add_to_cart(0)
    await inventory.expect_cart_count(1)

    await inventory.open_cart()
    cart = CartPage(page, config.base_url)
    await cart.expect_route(site.CART)
    await cart.expect_items(1)


@scenario("Navigation menu works correctly", "smoke")
async def navigation_menu(page: Page, config: SuiteConfig):
    await _logged_in(page, config)
    menu = Menu(page)

    await expect(menu.open_button).to_be_visible()
    await menu.open()
    await menu.expect_open()

    await menu.close()
    await menu.expect_closed()


@scenario("Application handles empty states gracefully", "smoke")
async def empty_cart(page: Page, config: SuiteConfig):
    inventory = await _logged_in(page, config)
    await inventory.open_cart()

    cart = CartPage(page, config.base_url)
    await cart.expect_items(0)

    await expect(cart.continue_shopping_button).to_be_visible()
    await cart.continue_shopping()
    await cart.expect_route(site.INVENTORY)


@scenario("Standard user can complete a checkout", "checkout")
async def standard_checkout(page: Page, config: SuiteConfig):
    inventory = await _logged_in(page, config)
    await inventory.expect_loaded()

    await inventory.add_to_cart(0)
    await inventory.add_to_cart(1)
    await inventory.expect_cart_count(2)

    await inventory.open_cart()
    cart = CartPage(page, config.base_url)
    await cart.expect_route(site.CART)
    await cart.expect_items(2)

    await cart.checkout()
    checkout = CheckoutPage(page, config.base_url)
    await checkout.expect_route(site.CHECKOUT_STEP_ONE)

    await checkout.fill_information(site.CHECKOUT_CUSTOMER)
    await checkout.continue_()
    await checkout.expect_route(site.CHECKOUT_STEP_TWO)

    await checkout.finish()
    await checkout.expect_complete()


@scenario("Login page loads within budget without console errors", "performance")
async def login_page_performance(page: Page, config: SuiteConfig):
    errors: List[str] = []
    page.on("console", lambda msg: errors.append(msg.text) if msg.type == "error" else None)

    login = LoginPage(page, config.base_url)
    started = time.monotonic()
    await login.open()
    await expect(login.username).to_be_visible()
    load_ms = (time.monotonic() - started) * 1000

    assert load_ms < config.load_budget_ms, (
        f"login page took {load_ms:.0f}ms, budget is {config.load_budget_ms}ms"
    )

    # let late errors arrive
    await page.wait_for_timeout(1000)

    critical = critical_console_errors(errors)
    assert not critical, f"console errors: {critical}"


def critical_console_errors(messages: Iterable[str]) -> List[str]:
    return [m for m in messages if not any(noise in m for noise in IGNORED_CONSOLE_ERRORS)]


def get_scenario(name: str) -> Scenario:
    try:
        return SCENARIOS[name]
    except KeyError:
        raise KeyError(f"Unknown scenario: {name}") from None


def scenarios_tagged(tag: str) -> List[Scenario]:
    return [s for s in SCENARIOS.values() if tag in s.tags]


def all_tags() -> List[str]:
    return sorted({tag for s in SCENARIOS.values() for tag in s.tags})


def select_scenarios(
        names: Optional[Iterable[str]] = None,
        tags: Optional[Iterable[str]] = None
) -> List[Scenario]:
    """Scenarios matching any given name or tag, in catalog order"""
    wanted = {get_scenario(name).name for name in (names or [])}
    tags = set(tags or [])

    return [
        s for s in SCENARIOS.values()
        if s.name in wanted or s.tags & tags
    ]
