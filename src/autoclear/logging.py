from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send the package's diagnostics to stderr.

    Safe to call more than once; the handler is replaced, not stacked.
    """
    global _handler
    package_logger = logging.getLogger("autoclear")
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return package_logger
