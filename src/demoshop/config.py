"""
Configuration management for demoshop-e2e.

Settings are read from ``E2E_``-prefixed environment variables and,
optionally, from a TOML file named by ``E2E_CONFIG_FILE``.

Environment Variables:
    E2E_BASE_URL              - Shop under test (default: https://demowebshop.tricentis.com)
    E2E_TEST_USER_PASSWORD    - Password for generated accounts (alias: PASSWORD)
    E2E_TIMEOUT               - Default action timeout in ms (default: 30000)
    E2E_NAVIGATION_TIMEOUT    - Navigation timeout in ms (default: 30000)
    E2E_EXPECT_TIMEOUT        - Budget for asynchronously appearing UI in ms (default: 5000)
    E2E_SOFT_TIMEOUT          - Budget for optional-element probes in ms (default: 2000)
    E2E_CREDENTIALS_FILE      - Credential handoff file (default: tests/testData.json)
    E2E_RESULTS_DIR           - Test artifacts directory (default: test-results)
    E2E_SCREENSHOT_ON_FAILURE - Screenshot on failure (default: true)
    E2E_RECORD_TRACE          - Record a Playwright trace per test (default: false)
    E2E_LOG_LEVEL             - Log level (default: INFO)
    E2E_BROWSER_NAME          - chromium, firefox or webkit (default: chromium)
    E2E_BROWSER_CHANNEL       - Browser channel, e.g. chrome or msedge
    E2E_BROWSER_HEADLESS      - Run headless (default: true)
    E2E_BROWSER_SLOW_MO       - Slow motion delay in ms (default: 0)
"""

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError, MissingConfigError

DEFAULT_BASE_URL = "https://demowebshop.tricentis.com"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


def _safe_name(name: str) -> str:
    """Sanitize a test name for use as a file name."""
    return "".join(c if c.isalnum() or c in "-_" else "_" for c in name)


class BrowserSettings(BaseSettings):
    """Browser launch and context settings."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_BROWSER_",
        extra="ignore",
    )

    name: str = Field(default="chromium", description="Browser engine")
    channel: Optional[str] = Field(
        None, description="Browser channel: chrome, chrome-beta, msedge"
    )
    headless: bool = Field(default=True, description="Run in headless mode")
    slow_mo: int = Field(default=0, ge=0, description="Slow motion delay in ms")
    viewport_width: int = Field(default=1280, ge=1)
    viewport_height: int = Field(default=720, ge=1)
    locale: str = Field(default="en-US", description="Browser locale")
    timezone_id: str = Field(default="America/New_York", description="Timezone")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate the browser engine name."""
        v_lower = v.lower()
        if v_lower not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Browser must be one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        return v_lower

    def with_overrides(
        self,
        name: Optional[str] = None,
        headed: bool = False,
        channel: Optional[str] = None,
        slow_mo: Optional[int] = None,
    ) -> "BrowserSettings":
        """
        Apply command-line browser options on top of these settings.

        Unset options (None, False or 0) keep the configured value.
        """
        updates: dict[str, Any] = {}
        if name:
            updates["name"] = self.validate_name(name)
        if headed:
            updates["headless"] = False
        if channel:
            updates["channel"] = channel
        if slow_mo:
            updates["slow_mo"] = slow_mo
        return self.model_copy(update=updates)

    def to_launch_options(self) -> dict[str, Any]:
        """Convert to Playwright browser launch options."""
        options: dict[str, Any] = {
            "headless": self.headless,
            "slow_mo": self.slow_mo,
        }
        if self.channel:
            options["channel"] = self.channel
        return options

    def to_context_options(self, base_url: str) -> dict[str, Any]:
        """Convert to Playwright browser context options."""
        return {
            "viewport": {
                "width": self.viewport_width,
                "height": self.viewport_height,
            },
            "locale": self.locale,
            "timezone_id": self.timezone_id,
            "base_url": base_url,
        }


class Settings(BaseSettings):
    """Suite settings aggregating all configuration."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_",
        extra="ignore",
        populate_by_name=True,
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Shop under test")
    password: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("E2E_TEST_USER_PASSWORD", "PASSWORD"),
        description="Shared password for generated test accounts",
    )

    # Timeouts (ms)
    timeout: int = Field(default=30000, ge=0, description="Default action timeout")
    navigation_timeout: int = Field(default=30000, ge=0)
    expect_timeout: int = Field(
        default=5000, ge=0, description="Budget for flyouts and notification bars"
    )
    soft_timeout: int = Field(
        default=2000, ge=0, description="Budget for optional-element probes"
    )

    # Artifacts
    credentials_file: Path = Field(default=Path("tests/testData.json"))
    results_dir: Path = Field(default=Path("test-results"))
    screenshot_on_failure: bool = Field(default=True)
    record_trace: bool = Field(default=False)

    log_level: str = Field(default="INFO", description="Log level")

    browser: BrowserSettings = Field(default_factory=BrowserSettings)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @classmethod
    def from_toml(cls, path: str | Path) -> "Settings":
        """
        Load settings from a TOML configuration file.

        The file may contain an ``[e2e]`` table with suite settings and a
        ``[browser]`` table with browser settings. Environment variables
        still fill in anything the file leaves out.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Settings instance with loaded configuration.

        Raises:
            MissingConfigError: If the file does not exist.
            InvalidConfigError: If the file cannot be parsed.
        """
        path = Path(path)
        if not path.exists():
            raise MissingConfigError(str(path))

        try:
            with open(path, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise InvalidConfigError(
                config_key="E2E_CONFIG_FILE",
                value=str(path),
                reason=f"Failed to parse TOML: {e}",
            )

        settings_kwargs: dict[str, Any] = dict(config_data.get("e2e", {}))
        if "browser" in config_data:
            settings_kwargs["browser"] = BrowserSettings(**config_data["browser"])
        return cls(**settings_kwargs)

    def require_password(self) -> str:
        """
        Return the shared account password, failing fast if it is unset.

        Raises:
            MissingConfigError: If no password is configured.
        """
        if not self.password or not self.password.strip():
            raise MissingConfigError("E2E_TEST_USER_PASSWORD")
        return self.password

    @property
    def screenshots_dir(self) -> Path:
        return self.results_dir / "screenshots"

    @property
    def traces_dir(self) -> Path:
        return self.results_dir / "traces"

    def ensure_directories(self) -> None:
        """Ensure artifact output directories exist."""
        self.screenshots_dir.mkdir(parents=True, exist_ok=True)
        self.traces_dir.mkdir(parents=True, exist_ok=True)

    def screenshot_path(self, test_name: str) -> Path:
        """Get the screenshot path for a test."""
        return self.screenshots_dir / f"{_safe_name(test_name)}.png"

    def trace_path(self, test_name: str) -> Path:
        """Get the trace path for a test."""
        return self.traces_dir / f"{_safe_name(test_name)}.zip"

    def summary(self) -> dict[str, Any]:
        """Effective settings for display, with the password masked."""
        return {
            "base_url": self.base_url,
            "password": "********" if self.password else "(not set)",
            "timeout": self.timeout,
            "navigation_timeout": self.navigation_timeout,
            "expect_timeout": self.expect_timeout,
            "soft_timeout": self.soft_timeout,
            "credentials_file": str(self.credentials_file),
            "results_dir": str(self.results_dir),
            "screenshot_on_failure": self.screenshot_on_failure,
            "record_trace": self.record_trace,
            "log_level": self.log_level,
            "browser": self.browser.name,
            "channel": self.browser.channel or "(default)",
            "headless": self.browser.headless,
            "slow_mo": self.browser.slow_mo,
        }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached suite settings.

    Loads from ``E2E_CONFIG_FILE`` when it points at an existing file,
    otherwise from the environment alone.
    """
    config_file = os.getenv("E2E_CONFIG_FILE")

    if config_file and Path(config_file).exists():
        return Settings.from_toml(config_file)
    return Settings()


def reload_settings() -> Settings:
    """Reload settings, clearing the cache."""
    get_settings.cache_clear()
    return get_settings()
