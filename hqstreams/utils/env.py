import os
from typing import Set

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Return True if the environment variable is set to a truthy value (1, true, yes, on)."""
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in _TRUTHY


def get_disabled_providers() -> Set[str]:
    """Provider keys listed in DISABLED_PROVIDERS (comma-separated)"""
    raw = os.getenv("DISABLED_PROVIDERS", "")
    return {key.strip().lower() for key in raw.split(",") if key.strip()}
