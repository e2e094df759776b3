# config.py - settings loaded once at startup and passed to the client / apps
import os
import sys
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger("fulcrum_mcp")

DEFAULT_BASE_URL = "https://api.fulcrumpro.com"
DEFAULT_TIMEOUT = 30.0
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def normalize_token(token: Optional[str]) -> str:
    """Strip whitespace and an optional leading 'Bearer ' from a raw token."""
    t = (token or "").strip()
    if t.lower().startswith("bearer "):
        t = t[7:].strip()
    return t


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    api_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    http_host: str = "0.0.0.0"
    http_port: int = 3000

    @property
    def has_token(self) -> bool:
        return bool(self.api_token)

    @property
    def auth_header(self) -> str:
        # header values may not end in whitespace, so an unset token sends a bare "Bearer"
        return f"Bearer {self.api_token}".rstrip()

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> "Settings":
        if env is None:
            if dotenv:
                # never overrides variables that are already exported
                load_dotenv(override=False)
            env = os.environ

        return cls(
            api_token=normalize_token(env.get("FULCRUM_API_TOKEN")),
            base_url=(env.get("FULCRUM_API_URL") or DEFAULT_BASE_URL).strip().rstrip("/"),
            timeout=_float_env(env, "FULCRUM_TIMEOUT", DEFAULT_TIMEOUT),
            log_level=(env.get("LOG_LEVEL") or "INFO").strip().upper(),
            http_host=(env.get("HOST") or "0.0.0.0").strip(),
            http_port=_int_env(env, "PORT", 3000),
        )


def init_runtime(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Entrypoint setup: read settings, configure logging, then report a missing token."""
    settings = Settings.from_env(env)
    configure_logging(settings.log_level)
    if not settings.has_token:
        logger.warning("FULCRUM_API_TOKEN not set - every Fulcrum call will fail authentication.")
    return settings


def configure_logging(level: str = "INFO") -> None:
    """basicConfig on stderr (stdout carries the MCP stdio stream). No-op if already configured."""
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stderr,
        format=LOG_FORMAT,
    )
