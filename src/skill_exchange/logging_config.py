"""Logging setup."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Repeated calls (tests, reloads) leave existing handlers alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
