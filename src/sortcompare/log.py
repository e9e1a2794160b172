"""Logging setup shared by the API server and the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging"]

_NOISY = ("uvicorn.access", "httpx")


def configure_logging(level: str = "INFO") -> None:
    """Route all loggers through a single RichHandler at `level`."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
    for noisy in _NOISY:
        logging.getLogger(noisy).setLevel(logging.WARNING)
    logging.getLogger(__name__).debug("Logging configured with level: %s", level)
