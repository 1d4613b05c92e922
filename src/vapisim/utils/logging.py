"""Logger setup for the simulator process.

Attaches handlers to the ``vapisim`` logger so decode failures and
startup messages reach stderr (and optionally a file) without touching
the handlers uvicorn installs on the root logger.
"""

from __future__ import annotations

import logging
import sys

from vapisim.config.settings import LoggingConfig


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure the ``vapisim`` logger from the ``logging`` config section.

    Handlers installed by a previous call are closed and replaced, so
    the CLI and tests can call this more than once.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    pkg_logger = logging.getLogger("vapisim")
    pkg_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    for handler in handlers:
        handler.setFormatter(formatter)
        pkg_logger.addHandler(handler)

    pkg_logger.debug("Logging to %d handler(s) at %s", len(handlers), config.level.upper())
