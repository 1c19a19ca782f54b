"""Logger naming and command-line log setup for analiser.

Every module logs under the ``analiser`` namespace, so one level setting
covers the scanner, the trivia skipper and the driver:

    >>> from analiser.utils.logger import get_logger
    >>> get_logger("lexer.core").name
    'analiser.lexer.core'

The library never installs handlers. Only the command-line driver does,
through configure_cli_logging().
"""

from __future__ import annotations

import logging
from typing import TextIO

NAMESPACE = "analiser"

CLI_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name inside the analiser namespace.

    Names already in the namespace (``analiser`` itself or ``analiser.*``)
    are used as given; anything else is nested under it.
    """
    if name != NAMESPACE and not name.startswith(NAMESPACE + "."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)


def configure_cli_logging(*, verbose: bool, stream: TextIO) -> None:
    """Send log records to stream: DEBUG with verbose (skipped trivia,
    unrecognized characters), WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=CLI_LOG_FORMAT,
        stream=stream,
    )
