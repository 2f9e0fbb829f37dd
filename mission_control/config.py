"""Configuration for the Mission Control client."""

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_TIMEOUT_MS = 5000


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_timeout_ms(name: str) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_MS
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {DEFAULT_TIMEOUT_MS}")
        return DEFAULT_TIMEOUT_MS
    return value


@dataclass
class MissionControlConfig:
    """Per-call settings for talking to Mission Control.

    Callers build one (or reuse one) and pass it to every client call; the
    client never stores it.
    """

    base_url: str
    enabled: bool
    agent_id: str
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    @classmethod
    def from_env(cls) -> "MissionControlConfig":
        """Create config from MISSION_CONTROL_* environment variables."""
        load_dotenv()
        base_url = os.getenv("MISSION_CONTROL_URL", "").strip()
        if base_url.endswith("/"):
            base_url = base_url[:-1]
        return cls(
            base_url=base_url,
            enabled=_env_flag("MISSION_CONTROL_ENABLED"),
            agent_id=os.getenv("MISSION_CONTROL_AGENT_ID", "").strip(),
            timeout_ms=_env_timeout_ms("MISSION_CONTROL_TIMEOUT_MS"),
        )
