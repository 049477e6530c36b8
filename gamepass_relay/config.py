# gamepass_relay/config.py

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_INVENTORY_URL = "https://inventory.roblox.com/v2/users/{user_id}/inventory"
DEFAULT_TIMEOUT_S = 10.0
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    inventory_url: str = DEFAULT_INVENTORY_URL
    request_timeout_s: float = DEFAULT_TIMEOUT_S
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables, falling back to defaults
        for anything unset or empty.
        """
        env = os.environ if environ is None else environ

        port = _parse_number(env, "PORT", int, DEFAULT_PORT)
        timeout = _parse_number(env, "REQUEST_TIMEOUT_S", float, DEFAULT_TIMEOUT_S)
        if timeout <= 0:
            raise ValueError(f"REQUEST_TIMEOUT_S must be positive, got {timeout}")

        log_level = (env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        return cls(
            port=port,
            host=env.get("HOST") or DEFAULT_HOST,
            inventory_url=env.get("INVENTORY_API_URL") or DEFAULT_INVENTORY_URL,
            request_timeout_s=timeout,
            log_level=log_level,
        )


def _parse_number(env: Mapping[str, str], name: str, cast, default):
    raw = env.get(name)
    if not raw:
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # resolved once per process
    return Settings.from_env()
