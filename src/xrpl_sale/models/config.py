"""
Configuration models for XRPL.Sale client.

Immutable configuration structures following state-first design.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from ..constants import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
    PRODUCTION_URL,
    RETRY_STATUS_CODES,
    TESTNET_URL,
)
from ..utils import parse_bool, validate_url


class Environment(Enum):
    """API environment enumeration."""
    PRODUCTION = "production"
    TESTNET = "testnet"

    @classmethod
    def parse(cls, value: Union["Environment", str]) -> "Environment":
        """Accept an Environment or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(
            f"Unknown environment {value!r} (expected 'production' or 'testnet')"
        )

    @property
    def base_url(self) -> str:
        """Fixed API host for this environment."""
        if self is Environment.TESTNET:
            return TESTNET_URL
        return PRODUCTION_URL


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for request retry behavior."""
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    backoff_factor: float = DEFAULT_BACKOFF_FACTOR
    retry_on_status: tuple[int, ...] = RETRY_STATUS_CODES

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        if self.retry_delay < 0:
            raise ValueError("retry_delay cannot be negative")

    def delay_for(self, attempt: int) -> float:
        """Backoff delay before retry number ``attempt`` (0-based)."""
        return self.retry_delay * (self.backoff_factor ** attempt)


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for XRPL.Sale client connection."""
    api_key: Optional[str] = None
    environment: Environment = Environment.PRODUCTION
    base_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    webhook_secret: Optional[str] = field(default=None, repr=False)
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "environment", Environment.parse(self.environment))

        if self.base_url is not None:
            if not validate_url(self.base_url):
                raise ValueError("Base URL must be a valid HTTP/HTTPS URL")
            object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")
        if self.max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        if self.retry_delay < 0:
            raise ValueError("retry_delay cannot be negative")

    @property
    def resolved_base_url(self) -> str:
        """Explicit base URL, or the environment's default host."""
        return self.base_url or self.environment.base_url

    @property
    def retry_config(self) -> RetryConfig:
        return RetryConfig(max_retries=self.max_retries, retry_delay=self.retry_delay)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "api_key": self.api_key,
            "environment": self.environment.value,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "retry_delay": self.retry_delay,
            "webhook_secret": self.webhook_secret,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientConfig":
        """Create config from a mapping, ignoring unknown keys."""
        known = {
            "api_key", "environment", "base_url", "timeout",
            "max_retries", "retry_delay", "webhook_secret", "debug",
        }
        values = {k: v for k, v in data.items() if k in known and v is not None}
        if "timeout" in values:
            values["timeout"] = float(values["timeout"])
        if "max_retries" in values:
            values["max_retries"] = int(values["max_retries"])
        if "retry_delay" in values:
            values["retry_delay"] = float(values["retry_delay"])
        if "debug" in values:
            values["debug"] = parse_bool(values["debug"])
        return cls(**values)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from XRPL_SALE_* environment variables (and .env)."""
        load_dotenv()
        return cls.from_dict({
            "api_key": os.getenv("XRPL_SALE_API_KEY") or None,
            "environment": os.getenv("XRPL_SALE_ENVIRONMENT") or None,
            "base_url": os.getenv("XRPL_SALE_BASE_URL") or None,
            "timeout": os.getenv("XRPL_SALE_TIMEOUT") or None,
            "max_retries": os.getenv("XRPL_SALE_MAX_RETRIES") or None,
            "retry_delay": os.getenv("XRPL_SALE_RETRY_DELAY") or None,
            "webhook_secret": os.getenv("XRPL_SALE_WEBHOOK_SECRET") or None,
            "debug": os.getenv("XRPL_SALE_DEBUG") or None,
        })

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ClientConfig":
        """
        Load config from a YAML file.

        Settings may sit at the top level or under an ``xrpl_sale`` key.
        """
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        section = data.get("xrpl_sale", data)
        if not isinstance(section, dict):
            raise ValueError(f"'xrpl_sale' section in {path} must be a mapping")
        return cls.from_dict(section)
