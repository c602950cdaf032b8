"""
Centralized logging configuration for applications using objtools.

The library itself only emits DEBUG records through module loggers. This
module provides a single setup_logging function that configures the root
logger consistently:
- Console output to stdout
- Level from the argument, OBJTOOLS_LOG_LEVEL, or INFO
- User-friendly (message-only) mode via OBJTOOLS_LOG_USER_FRIENDLY

Only the handler installed here is ever replaced; handlers added by the host
application or test harness are left alone.
"""

import logging
import sys
import threading
from typing import Optional, Union

from objtools.config import ConfigurationError, env_bool, env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_installed_handler: Optional[logging.Handler] = None

LOG_LEVEL_ENV = "OBJTOOLS_LOG_LEVEL"
USER_FRIENDLY_ENV = "OBJTOOLS_LOG_USER_FRIENDLY"

_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_TECHNICAL_DATEFMT = "%Y-%m-%d %H:%M:%S"
_USER_FRIENDLY_FORMAT = "%(message)s"


def _resolve_level(level: Union[int, str, None]) -> int:
    """Resolve a level from the argument or environment, defaulting to INFO."""
    if level is None:
        level = env_str(LOG_LEVEL_ENV)
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level

    candidate = level.strip()
    if candidate.isdigit():
        return int(candidate)
    resolved = logging.getLevelName(candidate.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, level, "Expected a logging level name or number")
    return resolved


def _remove_installed_handler(root_logger: logging.Logger) -> None:
    """Detach and close the handler from a previous setup_logging call."""
    global _installed_handler

    if _installed_handler is None:
        return
    root_logger.removeHandler(_installed_handler)
    try:
        _installed_handler.close()
    except OSError as exc:  # Best-effort cleanup operation
        _MODULE_LOGGER.debug("Handler close failed for root logger: %s", exc)
    _installed_handler = None


def _build_console_handler(level: int, user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter(_USER_FRIENDLY_FORMAT)
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _TECHNICAL_DATEFMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    return console_handler


def installed_handler() -> Optional[logging.Handler]:
    """Return the console handler installed by setup_logging, if any."""
    return _installed_handler


def setup_logging(level: Union[int, str, None] = None, user_friendly: Optional[bool] = None, *, force: bool = False) -> None:
    """Configure the root logger with a single stdout console handler."""
    global _installed_handler

    with _config_lock:
        root_logger = logging.getLogger()
        if _installed_handler in root_logger.handlers and not force:
            return

        resolved_level = _resolve_level(level)
        if user_friendly is None:
            user_friendly = bool(env_bool(USER_FRIENDLY_ENV, or_value=False))

        _remove_installed_handler(root_logger)
        _installed_handler = _build_console_handler(resolved_level, user_friendly)
        root_logger.addHandler(_installed_handler)
        root_logger.setLevel(resolved_level)


__all__ = ["LOG_LEVEL_ENV", "USER_FRIENDLY_ENV", "installed_handler", "setup_logging"]
