"""Logging configuration for entry points embedding the solver."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Configure the root logger once; `verbose` forces DEBUG."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
