"""Client configuration read from environment variables.

Environment variables (read when settings are first loaded):
- TERMINUS_HOST (optional; default "terminus.pantheon.io")
- TERMINUS_PORT (optional; default 443)
- TERMINUS_PROTOCOL (optional; default "https")
- TERMINUS_TIMEOUT (optional; seconds, default 30)
- TERMINUS_VERIFY_HOST_CERT (optional; default "true")
- TERMINUS_SESSION_TOKEN (optional; sent as a bearer token)
- LOG_LEVEL (optional; default "INFO")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_HOST = "terminus.pantheon.io"
ONEBOX_MARKER = "onebox"

logger = logging.getLogger(__name__)


def _get_bool(env_value: str | None, default: bool) -> bool:
    if env_value is None:
        return default
    return env_value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Connection settings for the hosting platform API."""

    host: str = DEFAULT_HOST
    port: int = 443
    protocol: str = "https"
    timeout: float = 30.0
    verify_host_cert: bool = True
    session_token: Optional[str] = None
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}/api/"

    @property
    def is_onebox(self) -> bool:
        """True when pointed at a onebox (internal testing) deployment."""
        return is_onebox_host(self.host)


def is_onebox_host(host: Optional[str]) -> bool:
    return ONEBOX_MARKER in (host or "")


def load_settings() -> Settings:
    """Build settings from the current environment.

    Raises:
        ValueError: If TERMINUS_PORT or TERMINUS_TIMEOUT is not a number.
    """
    raw_port = os.getenv("TERMINUS_PORT", "443")
    raw_timeout = os.getenv("TERMINUS_TIMEOUT", "30")
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise ValueError(f"TERMINUS_PORT must be an integer, got {raw_port!r}") from exc
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ValueError(f"TERMINUS_TIMEOUT must be a number, got {raw_timeout!r}") from exc

    settings = Settings(
        host=os.getenv("TERMINUS_HOST") or DEFAULT_HOST,
        port=port,
        protocol=os.getenv("TERMINUS_PROTOCOL") or "https",
        timeout=timeout,
        verify_host_cert=_get_bool(os.getenv("TERMINUS_VERIFY_HOST_CERT"), True),
        session_token=os.getenv("TERMINUS_SESSION_TOKEN") or None,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
    logger.debug(
        "settings_loaded | host=%s port=%s protocol=%s onebox=%s",
        settings.host,
        settings.port,
        settings.protocol,
        settings.is_onebox,
    )
    return settings


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return process-wide settings, loading them lazily."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next `get_settings` re-reads the environment."""
    global _settings
    _settings = None
