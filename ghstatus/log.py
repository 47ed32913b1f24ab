"""Stderr logging for the CLI.

Every line is written as ``[LEVEL] message`` so CI logs can be grepped for
``[ERROR]``. DEBUG=1 turns on diagnostics, including PyGithub's own request
logging.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "[%(levelname)s] %(message)s"

_HANDLER_NAME = "ghstatus-stderr"


def setup_logging(debug: bool = False) -> None:
    """Install the stderr handler, replacing one from a previous call."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    loggers = [logging.getLogger("ghstatus")]
    if debug:
        loggers.append(logging.getLogger("github"))

    for logger in loggers:
        for existing in list(logger.handlers):
            if existing.get_name() == _HANDLER_NAME:
                logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if debug else logging.INFO)
