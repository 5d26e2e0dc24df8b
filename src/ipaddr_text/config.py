"""Configuration module for the ipaddr-text command line tool."""

import math
import os
import logging
from typing import Optional

DEFAULT_PUBLISH_TIMEOUT = 2.0


class Config:
    """Application configuration."""

    def __init__(
        self,
        publish_url: Optional[str] = None,
        publish_timeout: float = DEFAULT_PUBLISH_TIMEOUT,
        publish_token: Optional[str] = None,
    ):
        self.publish_url = publish_url
        self.publish_timeout = publish_timeout
        self.publish_token = publish_token

    @property
    def publish_enabled(self) -> bool:
        return bool(self.publish_url)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables.

        Reads IPADDR_PUBLISH_URL, IPADDR_PUBLISH_TIMEOUT and
        IPADDR_PUBLISH_TOKEN from the environment. All are optional; without
        a URL nothing is published.

        Raises:
            ValueError: If IPADDR_PUBLISH_TIMEOUT is not a positive finite number.
        """
        publish_url = os.getenv("IPADDR_PUBLISH_URL") or None
        publish_token = os.getenv("IPADDR_PUBLISH_TOKEN") or None

        raw_timeout = os.getenv("IPADDR_PUBLISH_TIMEOUT")
        if raw_timeout:
            try:
                publish_timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(
                    f"IPADDR_PUBLISH_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from None
            if not math.isfinite(publish_timeout) or publish_timeout <= 0:
                raise ValueError(
                    f"IPADDR_PUBLISH_TIMEOUT must be a positive finite number, got {raw_timeout!r}"
                )
        else:
            publish_timeout = DEFAULT_PUBLISH_TIMEOUT

        return cls(
            publish_url=publish_url,
            publish_timeout=publish_timeout,
            publish_token=publish_token,
        )

    def setup_logging(self) -> None:
        """Configure logging for the application."""
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # Reduce noise from third-party libraries
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)

    def __repr__(self) -> str:
        """Return string representation with masked token."""
        def _mask(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            if len(value) <= 12:
                return "***"
            return value[:4] + "***" + value[-4:]

        return (
            f"Config(publish_url={self.publish_url!r}, "
            f"publish_timeout={self.publish_timeout}, "
            f"publish_token={_mask(self.publish_token)!r})"
        )
