import re

from playwright.async_api import Page, Locator, expect

from . import site
from .site import Credentials, Customer


class BasePage:
    """Shared header hooks available on every logged-in page"""

    def __init__(self, page: Page, base_url: str = site.BASE_URL):
        self.page = page
        self.base_url = base_url

    @property
    def cart_link(self) -> Locator:
        return self.page.locator('[data-test="shopping-cart-link"]')

    @property
    def cart_badge(self) -> Locator:
        return self.page.locator('[data-test="shopping-cart-badge"]')

    @property
    def title(self) -> Locator:
        return self.page.locator('#header_container [data-test="title"]')

    async def open_cart(self):
        await self.cart_link.click()

    async def expect_route(self, route: str):
        await expect(self.page).to_have_url(site.route_pattern(route))

    async def expect_cart_count(self, count: int):
        await expect(self.cart_badge).to_be_visible()
        await expect(self.cart_badge).to_have_text(str(count))


class LoginPage(BasePage):

    @property
    def username(self) -> Locator:
        return self.page.get_by_placeholder("Username")

    @property
    def password(self) -> Locator:
        return self.page.get_by_placeholder("Password")

    @property
    def login_button(self) -> Locator:
        return self.page.get_by_role("button", name="Login")

    @property
    def error(self) -> Locator:
        return self.page.get_by_text(site.LOGIN_ERROR_PREFIX)

    async def open(self):
        await self.page.goto(self.base_url)

    async def login(self, credentials: Credentials):
        await self.username.fill(credentials.username)
        await self.password.fill(credentials.password)
        await self.login_button.click()

    async def expect_ready(self):
        """Form is rendered and interactive"""
        await expect(self.page).to_have_title(re.compile(site.TITLE))
        for field in (self.username, self.password, self.login_button):
            await expect(field).to_be_visible()
        for field in (self.username, self.password, self.login_button):
            await expect(field).to_be_enabled()

    async def expect_rejected(self):
        await expect(self.error).to_be_visible()
        await expect(self.page).to_have_url(self.base_url)


class InventoryPage(BasePage):

    @property
    def items(self) -> Locator:
        return self.page.locator(".inventory_item")

    @property
    def add_to_cart_buttons(self) -> Locator:
        return self.page.get_by_role("button", name=re.compile("Add to cart", re.IGNORECASE))

    async def add_to_cart(self, index: int = 0):
        # a clicked button turns into "Remove", so indexes shift after each add
        await self.add_to_cart_buttons.nth(index).click()

    async def expect_loaded(self):
        await self.expect_route(site.INVENTORY)
        await expect(self.title).to_be_visible()
        await expect(self.title).to_have_text(site.PRODUCTS_TITLE)
        await expect(self.items.first).to_be_visible()


class Menu:
    """The burger side menu"""

    def __init__(self, page: Page):
        self.page = page

    @property
    def open_button(self) -> Locator:
        return self.page.locator("#react-burger-menu-btn")

    @property
    def close_button(self) -> Locator:
        return self.page.locator("#react-burger-cross-btn")

    def item(self, label: str) -> Locator:
        return self.page.get_by_text(label)

    async def open(self):
        await self.open_button.click()

    async def close(self):
        await self.close_button.click()

    async def expect_open(self):
        for label in site.MENU_ITEMS:
            await expect(self.item(label)).to_be_visible()

    async def expect_closed(self):
        await expect(self.item(site.MENU_ITEMS[0])).not_to_be_visible()


class CartPage(BasePage):

    @property
    def heading(self) -> Locator:
        return self.page.get_by_text(site.CART_TITLE)

    @property
    def items(self) -> Locator:
        return self.page.locator(".cart_item")

    @property
    def checkout_button(self) -> Locator:
        return self.page.get_by_role("button", name="Checkout")

    @property
    def continue_shopping_button(self) -> Locator:
        return self.page.get_by_role("button", name="Continue Shopping")

    async def checkout(self):
        await self.checkout_button.click()

    async def continue_shopping(self):
        await self.continue_shopping_button.click()

    async def expect_items(self, count: int):
        await expect(self.heading).to_be_visible()
        await expect(self.items).to_have_count(count)


class CheckoutPage(BasePage):
    """Covers step one (information), step two (overview) and completion"""

    @property
    def first_name(self) -> Locator:
        return self.page.get_by_placeholder("First Name")

    @property
    def last_name(self) -> Locator:
        return self.page.get_by_placeholder("Last Name")

    @property
    def postal_code(self) -> Locator:
        return self.page.get_by_placeholder("Zip/Postal Code")

    @property
    def confirmation(self) -> Locator:
        return self.page.get_by_role("heading", name=site.ORDER_CONFIRMATION)

    async def fill_information(self, customer: Customer):
        await self.first_name.fill(customer.first_name)
        await self.last_name.fill(customer.last_name)
        await self.postal_code.fill(customer.postal_code)

    async def continue_(self):
        await self.page.get_by_role("button", name="Continue").click()

    async def finish(self):
        await self.page.get_by_role("button", name="Finish").click()

    async def expect_complete(self):
        await self.expect_route(site.CHECKOUT_COMPLETE)
        await expect(self.confirmation).to_be_visible()
