"""
Logging setup for the web app.
"""
import logging
import sys
from typing import Optional

from .config import settings


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the root logger with a plain text handler on stdout."""
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # uvicorn's access log is noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger
