"""Runtime environment helpers: development identity and env parsing."""

import os
from typing import Optional, Set
from urllib.parse import urlparse

_LOCAL_HOSTS: Set[str] = {"localhost", "127.0.0.1", "::1"}

DEV_USER_ID = "00000000-0000-0000-0000-00000000dev0"
DEV_USER_EMAIL = "dev@localhost"


def env_flag(name: str, default: bool = False) -> bool:
    """Parse a true/false style environment variable."""
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off", ""}:
        return False
    return default


def env_list(name: str) -> Set[str]:
    """Comma-separated env value as a lowercase set (quotes and blanks dropped)."""
    values = set()
    for entry in os.getenv(name, "").split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            values.add(cleaned.lower())
    return values


def _hostname(url_value: str) -> Optional[str]:
    url_value = (url_value or "").strip()
    if not url_value:
        return None
    candidate = url_value if "://" in url_value else f"http://{url_value}"
    return urlparse(candidate).hostname


def dev_mode_active() -> bool:
    """Return True if DEV_MODE is on and allowed here; raise if misconfigured.

    The development identity bypasses Cognito, so it is only honoured when
    APP_BASE_URL points at a local host (or one listed in
    DEV_MODE_ALLOWED_HOSTS), or when ALLOW_DEV_MODE=true is set explicitly.
    """
    if not env_flag("DEV_MODE"):
        return False

    allowed = set(_LOCAL_HOSTS) | env_list("DEV_MODE_ALLOWED_HOSTS")
    hostname = _hostname(os.getenv("APP_BASE_URL", ""))
    if hostname and hostname.lower() not in allowed:
        raise RuntimeError(
            f"DEV_MODE refused: APP_BASE_URL host '{hostname}' is not one of {sorted(allowed)}"
        )
    if not hostname and not env_flag("ALLOW_DEV_MODE") and not os.getenv("PYTEST_CURRENT_TEST"):
        raise RuntimeError("DEV_MODE refused: set APP_BASE_URL to a local URL or ALLOW_DEV_MODE=true")
    return True
