"""
Logging Configuration

Structured console/file logging for the submission portal:
- One logger per module via setup_logger(__name__)
- Log lines tagged with the taxpayer reference of the logged-in user
- configure_logging() applies the level and log file from PortalSettings
  to every portal logger, including those created at import time
- log_duration() warns when a submission round-trip is slow
"""

import logging
import sys
import time
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

# Applied to loggers created after configure_logging() as well
_level = logging.INFO
_log_file: Optional[str] = None

_portal_loggers: Dict[str, logging.Logger] = {}


class StructuredFormatter(logging.Formatter):
    """
    Format: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE {utr=...}
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"

        line = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        utr = getattr(record, 'utr', None)
        if utr:
            line += f" {{utr={utr}}}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line


def taxpayer_context(utr: Optional[str]) -> Dict[str, Optional[str]]:
    """
    Build the `extra` mapping that tags a log line with a taxpayer reference.

    Usage:
        logger.info("Submission stored", extra=taxpayer_context(user.utr))
    """
    return {'utr': utr or None}


@contextmanager
def log_duration(logger: logging.Logger, operation: str, threshold_ms: float, utr: Optional[str] = None):
    """Log how long the block took; above threshold_ms as a warning."""
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        if elapsed_ms > threshold_ms:
            logger.warning(f"SLOW: {operation} took {elapsed_ms:.1f}ms", extra=taxpayer_context(utr))
        else:
            logger.debug(f"{operation} took {elapsed_ms:.1f}ms", extra=taxpayer_context(utr))


def _attach_handlers(logger: logging.Logger, level: int, log_file: Optional[str]):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a portal logger with structured formatting.

    Args:
        name: Logger name (usually __name__)
        level: Log level for this logger only. Defaults to the level set by
            configure_logging (INFO until then)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers on Streamlit reruns
    if name in _portal_loggers:
        return logger

    _attach_handlers(logger, _resolve_level(level) if level else _level, _log_file)
    logger.propagate = False
    _portal_loggers[name] = logger

    return logger


def configure_logging(level: str = 'INFO', log_file: Optional[str] = None):
    """
    Apply a level and an optional log file to all portal loggers.

    Called once per Streamlit run with the values from PortalSettings.
    Reapplying unchanged values leaves the handlers alone.
    """
    global _level, _log_file

    resolved = _resolve_level(level)
    if resolved == _level and log_file == _log_file:
        return

    _level = resolved
    _log_file = log_file
    for logger in _portal_loggers.values():
        _attach_handlers(logger, _level, _log_file)


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: '{level}'")
    return resolved
