"""
Logging helpers.

The library only emits DEBUG records through module loggers under the
"checkseq" namespace. Call setup_logger() from an application or example
script to actually see them.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER = "checkseq"

_FMT = "[%(asctime)s.%(msecs)03d] %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def setup_logger(
    name: str = ROOT_LOGGER,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console_output: bool = True,
) -> logging.Logger:
    """
    Attach console and/or file handlers to `name` and set its level.
    Existing handlers are replaced so repeated calls do not duplicate output.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(_FMT, datefmt=_DATEFMT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.propagate = False
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Module logger. Names outside the package namespace are nested under it,
    so setup_logger() on the root configures every module at once.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
