import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _ensure_root_handler(level: int) -> None:
    """Give the root logger one stdout handler unless one is configured already."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.NOTSET)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)


def setup_logger(level_name: str = "INFO", name: str = "cashdesk_payments") -> logging.Logger:
    """Return the package logger, writing through the root handler.

    Idempotent: repeated calls only adjust the level. Unknown level names
    fall back to INFO.
    """
    level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    _ensure_root_handler(level)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = True
    logger.disabled = False
    return logger
