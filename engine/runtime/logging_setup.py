"""Console logging for scripts and the local API.

Library code only ever calls ``logging.getLogger(__name__)``; handlers are
attached here, once, by whoever owns the process.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional

DEFAULT_LOGGERS = ("engine", "backend")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    *,
    names: Iterable[str] = DEFAULT_LOGGERS,
    log_file: Optional[str] = None,
) -> None:
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    for name in names:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate handlers on reload
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level)
        console.setFormatter(formatter)
        logger.addHandler(console)

        if log_file:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
