"""
Logging Configuration

Structured logging for the bignum package.

Format: [TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE | key=value | ...

Importing the library never installs handlers; applications (and the
bignum-calc entry point) call setup_logging() once.

Usage:
    from bignum.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("pow_mod", extra={"modulus_digits": 10})
"""

import logging
import sys
from pathlib import Path
from typing import Any, MutableMapping, Optional, Tuple, Union


# ============================================================================
# Constants
# ============================================================================

ROOT_LOGGER_NAME = "bignum"
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ============================================================================
# Formatter / Adapter
# ============================================================================

class BigNumLogFormatter(logging.Formatter):
    """Formatter that appends structured extra information to each line."""

    def __init__(self, include_extra: bool = True) -> None:
        self.include_extra = include_extra
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        log_message = super().format(record)

        extra_info = getattr(record, "extra_info", None)
        if self.include_extra and extra_info:
            extra_str = " | ".join(f"{k}={v}" for k, v in extra_info.items())
            log_message += f" | {extra_str}"

        return log_message


class StructuredLogger(logging.LoggerAdapter):
    """LoggerAdapter that stores the 'extra' dict as record.extra_info."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> Tuple[str, MutableMapping[str, Any]]:
        extra = kwargs.get("extra")
        if extra:
            kwargs["extra"] = {"extra_info": dict(extra)}
        return msg, kwargs


# ============================================================================
# Setup
# ============================================================================

def setup_logging(
    level: Union[int, str] = DEFAULT_LOG_LEVEL,
    log_file: Optional[Path] = None,
    stream=None,
) -> logging.Logger:
    """
    Configure the 'bignum' logger.

    Args:
        level: Log level (int or name such as "DEBUG")
        log_file: Optional file to write the log to in addition to the console
        stream: Console stream (default: sys.stderr)

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Re-running setup replaces previously installed handlers
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(BigNumLogFormatter())
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(Path(log_file), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(BigNumLogFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> StructuredLogger:
    """
    Create a structured logger for a component.

    Args:
        name: Component name (usually __name__)
    """
    return StructuredLogger(logging.getLogger(name), {})


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
