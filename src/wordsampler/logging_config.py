"""Logging configuration for wordsampler."""

from __future__ import annotations

import logging


_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: str | None = None,
) -> logging.Logger:
    """Configure and return the wordsampler logger.

    verbose: DEBUG level (per-source load counts)
    quiet: WARNING level (missing or unreadable sources only)
    log_file: also write log entries to this path
    """
    logger = logging.getLogger("wordsampler")

    # Repeated calls (one per CLI invocation in tests) must not stack handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    else:
        # The console already reports source diagnostics on stderr
        logger.addHandler(logging.NullHandler())

    return logger
