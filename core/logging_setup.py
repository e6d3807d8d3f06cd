from __future__ import annotations
import logging
from typing import Iterable

NOISY_LOGGERS = ("uvicorn.access",)


def setup_console_logging(
    level: int = logging.DEBUG,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Call once at process start. Quiz transitions log at DEBUG/INFO,
    per-request access lines are held back to WARNING.
    """
    for name in quiet:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    root = logging.getLogger()
    if root.handlers:
        # already configured (avoid duplicates)
        root.setLevel(level)
        return

    root.setLevel(level)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(handler)
