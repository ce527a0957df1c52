"""
Logging configuration for svg-less.

Uses loguru for structured logging with optional file rotation and retention.
"""

import sys
import time

from loguru import logger

import svg_less.config.settings as config_settings


def setup_logging() -> None:
    """Configure logging based on settings.

    Sets up:
    - Console output on stderr with color and formatting
    - Optional file output with rotation and retention

    Should be called once by the host before a run. Library code only logs.
    """
    settings = config_settings.settings

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        colorize=True,
    )

    if settings.log_to_file:
        log_dir = settings.logs_dir
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "svg-less_{time:YYYY-MM-DD}.log",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="gz",
        )

    logger.debug("Logging initialized (level={})", settings.log_level)


def get_logger(name: str):
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        >>> from svg_less.core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Collected mixin: {}", name)
    """
    return logger.bind(module=name)


class log_operation:
    """Context manager for logging an operation with timing.

    Example:
        >>> with log_operation("Collecting mixins", file_name="icons"):
        ...     collector.finish()
        # Logs: "Collecting mixins [file_name=icons] completed in 0.01s"
    """

    def __init__(self, operation: str, **context):
        self.operation = operation
        self.context = context
        self.start_time = None

    def _context_str(self) -> str:
        return " ".join(f"{k}={v}" for k, v in self.context.items())

    def __enter__(self):
        self.start_time = time.time()
        logger.debug("{} [{}] starting...", self.operation, self._context_str())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time

        if exc_type is None:
            logger.info(
                "{} [{}] completed in {:.2f}s",
                self.operation,
                self._context_str(),
                duration,
            )
        else:
            logger.error(
                "{} [{}] failed after {:.2f}s: {}",
                self.operation,
                self._context_str(),
                duration,
                exc_val,
            )

        return False  # Don't suppress exceptions
