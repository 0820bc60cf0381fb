"""
app/core/logger.py

Logging setup for the upload service.

Level comes from LOG_LEVEL when set, otherwise DEBUG/INFO from the DEBUG
flag. Chatty client libraries (httpx for the conversion service, boto
for S3) are held at WARNING so one upload logs a handful of lines.

Modules get their logger with:

    from app.core.logger import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys
from typing import Optional, TextIO

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = (
    "uvicorn.access",
    "httpx",
    "httpcore",
    "botocore",
    "boto3",
    "s3transfer",
    "urllib3",
    "multipart",
    "python_multipart",
)


def resolve_level(level_name: Optional[str] = None, debug: bool = False) -> int:
    """
    Turn a level name such as ``"warning"`` into a logging constant.

    Without a name the DEBUG flag decides between DEBUG and INFO.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if not level_name:
        return logging.DEBUG if debug else logging.INFO

    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{level_name}'.")
    return level


def configure_logging(
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
    root: Optional[logging.Logger] = None,
) -> logging.Logger:
    """
    Attach a single stream handler to the root logger and quiet client libraries.

    A root logger that already has handlers (uvicorn --log-config, pytest)
    keeps them; only its level and the quiet list are applied. ``root``
    defaults to the real root logger.
    """
    if level is None:
        level = resolve_level(settings.log_level, settings.debug)

    root = root or logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return root


configure_logging()


def get_logger(name: str) -> logging.Logger:
    """Named logger under the configured root, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
