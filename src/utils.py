"""
Utility functions for the SQS Terraform Importer.
"""

import functools
import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar, cast

from botocore.exceptions import BotoCoreError, ClientError


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Sets up logging configuration for the importer.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("sqs_importer")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Prevent duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


F = TypeVar("F", bound=Callable[..., dict])


def fetcher_error_handler(func: F) -> F:
    """
    Decorator for consistent error handling and logging in SQS fetchers.
    Catches AWS ClientError, BotoCoreError and generic Exception, logs
    appropriately, and returns an empty dict so callers fall back to defaults.
    """

    @functools.wraps(func)
    def wrapper(*args: object, **kwargs: object) -> dict:
        logger = logging.getLogger("sqs_importer")
        try:
            return func(*args, **kwargs)
        except ClientError as e:
            error = e.response.get("Error", {})
            code = error.get("Code", "")
            if code in ("AWS.SimpleQueueService.NonExistentQueue", "QueueDoesNotExist"):
                logger.warning(f"Queue disappeared during {func.__name__}; using defaults.")
                return {}
            logger.error(f"AWS ClientError in {func.__name__}: {e}")
            return {}
        except BotoCoreError as e:
            logger.error(f"AWS client error in {func.__name__}: {e}")
            return {}
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}")
            return {}

    return cast(F, wrapper)


def read_text_file(path: Path, logger: Optional[logging.Logger] = None) -> str:
    """
    Reads a Terraform file, returning an empty string if it does not exist.

    Args:
        path: File to read
        logger: Logger instance for debug logging

    Returns:
        File content as string

    Raises:
        OSError: If the file cannot be read or is not valid UTF-8
    """
    if logger is None:
        logger = logging.getLogger("sqs_importer")

    if not path.exists():
        logger.debug(f"{path} does not exist yet; starting from an empty file")
        return ""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Failed to read {path}: not valid UTF-8 ({e})")
        raise OSError(f"{path} is not valid UTF-8: {e}") from e


def write_text_file(
    path: Path, content: str, logger: Optional[logging.Logger] = None
) -> None:
    """
    Writes content to a Terraform file, creating parent directories as needed.

    Args:
        path: File to write
        content: Full file content
        logger: Logger instance for error logging

    Raises:
        OSError: If the file cannot be written
    """
    if logger is None:
        logger = logging.getLogger("sqs_importer")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {len(content)} bytes to {path}")
    except OSError as e:
        logger.error(f"Failed to write {path}: {str(e)}")
        raise
