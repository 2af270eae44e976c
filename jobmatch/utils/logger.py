"""
Logging infrastructure for jobmatch.

Uses Loguru for console and rotating file output, plus a separate audit
sink recording every ranking and scoring decision.
"""

import sys
from typing import Any

from loguru import logger

from jobmatch.utils.config import get_settings


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
AUDIT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[audit_type]} | {message}"


def _is_audit_record(record: dict) -> bool:
    return "audit_type" in record["extra"]


def setup_logging() -> list[int]:
    """
    Configure application-wide logging from ``LoggingSettings``.

    Replaces any existing handlers with a console sink, a rotating
    application log and, beside it, an audit log holding only entries
    written through ``audit_log``. Audit entries stay out of the
    application log.

    Returns:
        Loguru handler ids of the sinks that were added
    """
    settings = get_settings()
    log_settings = settings.logging
    handler_ids: list[int] = []

    logger.remove()

    # Locals in tracebacks only while developing
    diagnose = settings.debug and settings.environment == "development"

    if log_settings.console_output:
        handler_ids.append(logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            backtrace=True,
            diagnose=diagnose,
        ))

    if log_settings.file_output:
        log_settings.file_path.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(logger.add(
            log_settings.file_path,
            format=log_settings.format,
            level=log_settings.level,
            filter=lambda record: not _is_audit_record(record),
            rotation=log_settings.rotation,
            retention=log_settings.retention,
            compression="zip",
            backtrace=True,
            diagnose=diagnose,
            enqueue=True,
        ))

        if log_settings.audit_output:
            handler_ids.append(logger.add(
                log_settings.file_path.parent / log_settings.audit_file_name,
                format=AUDIT_FORMAT,
                level="INFO",
                filter=_is_audit_record,
                rotation=log_settings.audit_rotation,
                retention=log_settings.audit_retention,
                compression="zip",
                enqueue=True,
            ))

    logger.info(f"Logging initialized - Level: {log_settings.level}")
    return handler_ids


def get_logger(name: str) -> Any:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name for the logger (typically __name__)

    Returns:
        A configured logger instance
    """
    return logger.bind(name=name)


SENSITIVE_KEYS = {
    "password", "passwd", "pwd", "secret", "token", "api_key",
    "apikey", "auth", "credential", "private_key", "access_token",
    "refresh_token", "email", "phone", "wallet",
}


def _sanitize_for_logging(data: Any) -> Any:
    """
    Sanitize data before logging to prevent sensitive information exposure.

    Redacts passwords, tokens, contact details and other sensitive fields.
    """
    if isinstance(data, dict):
        return {
            k: "***REDACTED***"
            if any(s in str(k).lower() for s in SENSITIVE_KEYS)
            else _sanitize_for_logging(v)
            for k, v in data.items()
        }
    elif isinstance(data, list):
        return [_sanitize_for_logging(item) for item in data]
    return data


def audit_log(
    action: str,
    details: dict[str, Any],
    audit_type: str = "DECISION",
) -> None:
    """
    Log an audit entry for a matching decision.

    Args:
        action: The action being audited (e.g., "jobs_ranked")
        details: Dictionary of relevant details
        audit_type: Type of audit entry (DECISION, ACCESS)
    """
    sanitized_details = _sanitize_for_logging(details)
    logger.bind(audit_type=audit_type).info(f"{action} | {sanitized_details}")


class LoggerMixin:
    """
    Mixin class to add logging capability to any class.

    Usage:
        class MyClass(LoggerMixin):
            def my_method(self):
                self.logger.info("Doing something...")
    """

    @property
    def logger(self) -> Any:
        """Get a logger instance for this class."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger


# Module-level logger for quick access
log = logger
