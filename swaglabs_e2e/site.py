"""
Facts about the Sauce Demo store: where it lives, what it calls things,
and the accounts it ships with.
"""

import re
from dataclasses import dataclass
from typing import Pattern

BASE_URL = "https://www.saucedemo.com/"
TITLE = "Swag Labs"

# routes
INVENTORY = "inventory.html"
CART = "cart.html"
CHECKOUT_STEP_ONE = "checkout-step-one.html"
CHECKOUT_STEP_TWO = "checkout-step-two.html"
CHECKOUT_COMPLETE = "checkout-complete.html"

# copy shown by the store
PRODUCTS_TITLE = "Products"
CART_TITLE = "Your Cart"
LOGIN_ERROR_PREFIX = "Epic sadface:"
ORDER_CONFIRMATION = "Thank you for your order!"
MENU_ITEMS = ("All Items", "About", "Logout", "Reset App State")


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


@dataclass(frozen=True)
class Customer:
    first_name: str
    last_name: str
    postal_code: str


STANDARD_USER = Credentials("standard_user", "secret_sauce")
INVALID_USER = Credentials("invalid_user", "wrong_password")
CHECKOUT_CUSTOMER = Customer("Jane", "Doe", "12345")


def route_pattern(route: str) -> Pattern[str]:
    """URL matcher for a route, e.g. inventory.html -> /.*inventory\\.html/"""
    return re.compile(".*" + re.escape(route))
