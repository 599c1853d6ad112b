"""Centralized logging configuration."""
import logging
import sys
from typing import Optional, TextIO


_logging_configured = False

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: int | str = logging.INFO,
    stream: Optional[TextIO] = None,
    format_string: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for mockhash.
    
    Library use logs to stdout. The CLI passes stderr so that stdout only
    carries command results.
    
    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        stream: Stream for log records. If None, uses sys.stdout.
        format_string: Custom format string. If None, uses default.
        datefmt: Date format string. If None, uses default.
        force: If True, reconfigure even if already configured.
    """
    global _logging_configured
    
    if _logging_configured and not force:
        return
    
    logging.basicConfig(
        level=_resolve_level(level),
        format=format_string or DEFAULT_FORMAT,
        datefmt=datefmt or DEFAULT_DATEFMT,
        stream=stream if stream is not None else sys.stdout,
        force=force,
    )
    
    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance, configuring defaults on first use."""
    if not _logging_configured:
        setup_logging()
    
    return logging.getLogger(name)
