"""
Logging setup for the ``shared_diff`` package logger.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from .config import Config

_LOGGER_NAME = "shared_diff"
_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(cfg: Config | None = None) -> logging.Logger:
    """Attach handlers to the package logger according to *cfg*.

    Always adds a stream handler; adds a file handler too when
    ``cfg.LOG_DIR`` is set. Calling it again replaces the handlers
    installed by the previous call instead of stacking them.
    """
    cfg = cfg or Config()
    logger = logging.getLogger(_LOGGER_NAME)
    level = logging.getLevelName(cfg.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.WARNING
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_shared_diff", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")

    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    sh._shared_diff = True
    logger.addHandler(sh)

    if cfg.LOG_DIR:
        os.makedirs(cfg.LOG_DIR, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(cfg.LOG_DIR, f"shared_diff_{timestamp}.log")
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(formatter)
        fh._shared_diff = True
        logger.addHandler(fh)

    return logger
