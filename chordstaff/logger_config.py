from __future__ import annotations

import logging
import sys

LOGGER_NAME = "chordstaff"

logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between WARNING and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
