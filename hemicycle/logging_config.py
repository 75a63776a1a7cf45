from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from hemicycle.config.constants import LOG_DATEFMT, LOG_FORMAT

PACKAGE_LOGGER = "hemicycle"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    fmt: str = LOG_FORMAT,
) -> logging.Logger:
    """
    Attach handlers to the 'hemicycle' logger for scripts.

    Output goes to stdout next to the script's printed tables; `log_file`
    additionally keeps a copy (parent directories are created). Calling it
    again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger
