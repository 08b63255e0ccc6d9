"""
src/utils/logger.py
Module loggers under one "lottostats" parent that owns the handlers:
Rich on the console, one rotating file (lottostats.log) under LOG_DIR.
"""
import logging
import os
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

ROOT_NAME = "lottostats"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if root.handlers:
        return root

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.propagate = False

    root.addHandler(RichHandler(rich_tracebacks=True, show_path=False))

    log_dir = os.getenv("LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, f"{ROOT_NAME}.log"),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )
    root.addHandler(file_handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """`get_logger("stats.gaps")` → the "lottostats.stats.gaps" logger."""
    _configure_root()
    return logging.getLogger(f"{ROOT_NAME}.{name}")
