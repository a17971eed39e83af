"""Simple logging utilities for tagcloud."""

import logging
import sys


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)

    return logger


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between WARNING and DEBUG."""
    logger = get_logger("tagcloud")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
