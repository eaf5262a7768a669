"""Loguru-backed logger with a stable .info/.error/.warning/.debug/.exception API."""

import sys
from typing import Any, Optional

from loguru import logger as _loguru_logger

from credential_sdk.constants import LOG_FORMAT, LOG_LEVEL

_loggers: dict = {}
_sink_configured = False


def _configure_sink() -> None:
    global _sink_configured
    if _sink_configured:
        return
    _loguru_logger.remove()
    _loguru_logger.configure(extra={"logger_name": "credential_sdk"})
    # stdout carries shell exports, so logs go to stderr
    _loguru_logger.add(sys.stderr, level=LOG_LEVEL, format=LOG_FORMAT)
    _sink_configured = True


class CredentialLogger:
    """Minimal logger that forwards to loguru, bound to a logger name."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._log = _loguru_logger.bind(logger_name=name)

    @property
    def name(self) -> str:
        return self._name

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.info(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.error(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.warning(msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.debug(msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.exception(msg, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> CredentialLogger:
    """
    Get a cached logger for the given name.

    Args:
        name (Optional[str]): Logger name, usually ``__name__``.

    Returns:
        CredentialLogger: The logger bound to ``name``.

    Usage:
        >>> logger = get_logger(__name__)
        >>> logger.info("Trying {}", "environment variables")
    """
    _configure_sink()
    if name is None:
        name = "credential_sdk"
    if name not in _loggers:
        _loggers[name] = CredentialLogger(name)
    return _loggers[name]
