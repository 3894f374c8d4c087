from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import (
    ENCRYPTION_KEY_BYTES,
    ENCRYPTION_KEY_ENV,
    LOGGER,
    SIGNATURE_KEY_ENV,
    TOKEN_LOGGER,
)


def is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_csv_env(key: str) -> set[str]:
    raw = os.getenv(key, "")
    if not raw.strip():
        return set()
    return {item.strip() for item in raw.split(",") if item.strip()}


def get_env_int(key: str, default: int) -> int:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{key} must be an integer value.")


def load_env() -> None:
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if not env_path.exists():
        return
    load_dotenv(env_path, override=True)


def validate_env() -> None:
    required = (SIGNATURE_KEY_ENV, ENCRYPTION_KEY_ENV)
    missing = [key for key in required if not os.getenv(key, "")]
    if missing:
        raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")

    encryption_key = os.getenv(ENCRYPTION_KEY_ENV, "").encode("utf-8")
    if len(encryption_key) != ENCRYPTION_KEY_BYTES:
        raise RuntimeError(
            f"{ENCRYPTION_KEY_ENV} must be exactly {ENCRYPTION_KEY_BYTES} bytes "
            f"(got {len(encryption_key)})."
        )

    get_env_int("EVENTAPI_PORT", 8000)


def load_secret_keys() -> tuple[str, str]:
    validate_env()
    return os.environ[SIGNATURE_KEY_ENV], os.environ[ENCRYPTION_KEY_ENV]


def setup_logging() -> bool:
    debug_enabled = is_truthy(os.getenv("EVENTAPI_DEBUG", "1"))
    if debug_enabled:
        logging.basicConfig(level=logging.INFO)
        LOGGER.setLevel(logging.INFO)
        TOKEN_LOGGER.setLevel(logging.INFO)
    return debug_enabled
