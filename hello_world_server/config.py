"""
Application configuration module.

Centralizes all configuration values and constants.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load environment variables from .env file
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Server identity (what clients see in the initialize handshake)
SERVER_NAME = "hello-world-server"
SERVER_VERSION = "1.0.0"

# Model configuration
DEFAULT_MODEL = "claude-haiku-4-5-20251001"
POLYGLOT_MODEL = os.environ.get("POLYGLOT_MODEL", DEFAULT_MODEL)

# Structured variant returns detected language + family as JSON instead of one word
POLYGLOT_STRUCTURED_OUTPUT = _env_flag("POLYGLOT_STRUCTURED_OUTPUT")


def get_api_key() -> str | None:
    """Read the Anthropic key at call time so a late-provisioned env var is picked up."""
    return os.environ.get("ANTHROPIC_API_KEY") or None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_max_tokens() -> int:
    return _env_int("POLYGLOT_MAX_TOKENS", 1024)


def get_max_retries() -> int:
    """Retries are left to the SDK client; nothing is retried locally."""
    return _env_int("LLM_MAX_RETRIES", 2)


def check_settings() -> None:
    """Parse every numeric setting once so a bad value fails at startup, not mid-call."""
    get_max_tokens()
    get_max_retries()
