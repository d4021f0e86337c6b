from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

from .transport import HALTransport, TransportConfig

DEFAULT_TIMEOUT_SECONDS = 10.0


def _get_bool_env(name: str, default: bool) -> bool:
    """Parse a boolean environment variable with a safe default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if val in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def load_env_config(*, use_dotenv: bool = True) -> TransportConfig:
    """Load transport settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    return TransportConfig(
        timeout_seconds=_get_float_env("HAL_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        follow_redirects=_get_bool_env("HAL_FOLLOW_REDIRECTS", False),
    )


def load_env_credentials(*, use_dotenv: bool = True) -> Optional[str]:
    """Return 'USER:PASS' from HAL_USERNAME/HAL_PASSWORD, or None if unset."""
    if use_dotenv:
        load_dotenv()
    username = os.getenv("HAL_USERNAME", "").strip()
    password = os.getenv("HAL_PASSWORD", "")
    if not username:
        return None
    return f"{username}:{password}"


def create_transport_from_env(**kwargs) -> HALTransport:
    """Create a HALTransport configured from environment variables."""
    return HALTransport(load_env_config(), **kwargs)


__all__ = ["load_env_config", "load_env_credentials", "create_transport_from_env"]
