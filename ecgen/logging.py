"""Package-wide logging for ecgen.

Every module obtains its logger through :func:`get_logger`, so all records
flow through the single ``ecgen`` logger configured here. Engines announce
each new enumeration session at DEBUG level with :func:`log_session`.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "ecgen"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _root() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``ecgen`` logger.

    Only the first call configures anything; call ``reset_logging`` to
    configure again.

    Args:
        level: Level for the ``ecgen`` logger.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination, a stdout stream handler when omitted.
    """
    global _configured
    if _configured:
        return

    root = _root()
    root.setLevel(level)
    root.handlers.clear()

    target = handler if handler is not None else logging.StreamHandler(sys.stdout)
    target.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(target)
    # pytest's caplog listens on the interpreter root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, which defers its level to ``ecgen``."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the ``ecgen`` logger and each of its handlers."""
    setup_root_logger()
    root = _root()
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show per-session DEBUG records from the engines."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO, hiding per-session records."""
    set_global_log_level(logging.INFO)


def log_session(logger: logging.Logger, engine: str, **sizes: object) -> None:
    """Record the start of an enumeration session at DEBUG level.

    Example:
        ``log_session(logger, "EMK", n=5, k=3)`` logs
        ``"EMK session: n=5, k=3"``.

    Args:
        logger: Logger of the engine module.
        engine: Display name of the engine.
        **sizes: Session sizes, logged in the order given.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    detail = ", ".join(f"{key}={value}" for key, value in sizes.items())
    logger.debug(f"{engine} session: {detail}")


def reset_logging() -> None:
    """Drop handlers and level from ``ecgen`` so the next call reconfigures it."""
    global _configured
    _configured = False
    root = _root()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
