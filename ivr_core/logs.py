"""
Logging Setup

Process-wide logging configuration, plus a helper that mutes console output
while leaving log records flowing to other handlers (e.g. pytest's caplog).
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from ivr_core.config import RuntimeConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(raw: Optional[str]) -> int:
    """Map a level name to a logging level, defaulting to INFO."""
    return getattr(logging, (raw or "INFO").upper(), logging.INFO)


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging to stderr and optionally a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=resolve_log_level(level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )


def configure_logging(
    config: Optional["RuntimeConfig"] = None,
    log_file: str | None = None,
) -> None:
    """Configure logging at the level named by the runtime config (IVR_LOG_LEVEL)."""
    if config is None:
        from ivr_core.config import get_default_config
        config = get_default_config()
    setup_logging(config.log_level, log_file)


def _is_console_handler(handler: logging.Handler) -> bool:
    if not isinstance(handler, logging.StreamHandler):
        return False
    if isinstance(handler, logging.FileHandler):
        return False
    stream = getattr(handler, "stream", None)
    return stream in (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__)


@contextmanager
def quiet_console(logger: Optional[logging.Logger] = None) -> Iterator[None]:
    """
    Silence INFO, WARNING and ERROR console output inside the block.

    Console stream handlers are detached from ``logger`` (root by default)
    and the last-resort handler is muted. Records still reach every other
    handler.
    """
    target = logger or logging.getLogger()
    detached = [h for h in target.handlers if _is_console_handler(h)]
    for handler in detached:
        target.removeHandler(handler)
    last_resort = logging.lastResort
    logging.lastResort = logging.NullHandler()
    try:
        yield
    finally:
        logging.lastResort = last_resort
        for handler in detached:
            target.addHandler(handler)
