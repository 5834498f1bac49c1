"""Application configuration read from the environment and an optional .env file."""
import logging
import os
from threading import Lock
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:3000"
DEFAULT_LOG_LEVEL = "INFO"

_ENV_LOADED = False
_ENV_LOCK = Lock()


def _load_env() -> None:
    """Load variables from .env once; existing environment values win."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return
        load_dotenv(override=False)
        _ENV_LOADED = True


def get_api_base_url() -> str:
    """Return the events API base URL without a trailing slash."""
    _load_env()
    return os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")


def get_event_site_url() -> str:
    """Return the base URL used for "Return to Event" links."""
    _load_env()
    site_url = os.getenv("EVENT_SITE_URL")
    if not site_url:
        return get_api_base_url()
    return site_url.rstrip("/")


def get_request_timeout() -> Optional[float]:
    """
    Return the HTTP timeout in seconds.

    Returns:
        Positive float from REQUEST_TIMEOUT, or None (no timeout) when the
        variable is unset, empty, or not a positive number
    """
    _load_env()
    raw = os.getenv("REQUEST_TIMEOUT", "").strip()
    if not raw:
        return None

    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid REQUEST_TIMEOUT value: %r", raw)
        return None

    if timeout <= 0:
        logger.warning("Ignoring non-positive REQUEST_TIMEOUT value: %r", raw)
        return None

    return timeout


def get_log_level() -> str:
    """Return the configured log level name (upper case)."""
    _load_env()
    level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def configure_logging() -> None:
    """Configure root logging for the Streamlit process."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
