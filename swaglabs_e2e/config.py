import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from .site import BASE_URL

BROWSERS = ("chromium", "firefox", "webkit")
ENV_PREFIX = "SAUCEDEMO_"


class SuiteConfig(BaseModel):
    """Runtime settings for a run against the demo store"""

    base_url: str = BASE_URL
    browser: str = "chromium"
    headless: bool = True
    timeout_ms: int = 5000
    navigation_timeout_ms: int = 30_000
    load_budget_ms: int = 5000
    artifacts_dir: Optional[str] = None

    @field_validator("base_url")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else value + "/"

    @field_validator("browser")
    @classmethod
    def _known_browser(cls, value: str) -> str:
        value = value.lower()
        if value not in BROWSERS:
            raise ValueError(f"browser must be one of {', '.join(BROWSERS)}")
        return value

    @field_validator("timeout_ms", "navigation_timeout_ms", "load_budget_ms")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be positive")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "SuiteConfig":
        """Build config from SAUCEDEMO_* variables, explicit overrides win"""
        environ = os.environ if environ is None else environ

        values = {}
        for field in cls.model_fields:
            raw = environ.get(ENV_PREFIX + field.upper())
            if raw not in (None, ""):
                values[field] = raw

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
