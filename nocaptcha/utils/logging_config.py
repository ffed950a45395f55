"""
Centralized logging configuration for nocaptcha.

This module sets up structured logging with:
- Environment-based configuration (dev vs production)
- JSON formatting for production, pretty console for development
- IP hashing for GDPR compliance in production
- Redaction of secrets, tokens and keys

Nothing is configured on import; the host application calls setup_logging().
"""

import hashlib
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.types import EventDict, Processor

from nocaptcha.config import LoggingSettings

# Resolved on first use so importing the library never reads .env
_settings: Optional[LoggingSettings] = None

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "secret",
    "token",
    "response",
    "site_key",
    "sitekey",
    "api_key",
    "authorization",
    "cookie",
}


def get_settings() -> LoggingSettings:
    global _settings
    if _settings is None:
        _settings = LoggingSettings()
    return _settings


def is_production() -> bool:
    return get_settings().is_production


def hash_ip(ip_address: str) -> str:
    """
    Hash IP address for privacy in production.

    In production, returns SHA-256 hash (first 16 chars) for GDPR compliance.
    In development, returns the original IP for easier debugging.

    Args:
        ip_address: The IP address to hash

    Returns:
        Hashed IP (production) or original IP (development)
    """
    if is_production() and ip_address:
        return hashlib.sha256(ip_address.encode()).hexdigest()[:16]
    return ip_address


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO format timestamp to event dict."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in ["level", "event", "timestamp", "logger"]:
            continue
        if key.lower() in REDACTED_FIELDS or any(
            sensitive in key.lower() for sensitive in ["token", "secret", "key"]
        ):
            event_dict[key] = "***REDACTED***"
    return event_dict


def configure_structlog(log_format: str) -> None:
    """
    Configure structlog with appropriate processors for the environment.

    Production: JSON formatting for easy parsing
    Development: Pretty console formatting with colors
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            pad_event=15,  # Reduced from default 30
            sort_keys=False,
        )

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(log_level: str) -> None:
    """Route stdlib logging to stdout at the configured level."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    # Reduce noise from the HTTP stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Initialize logging for an application embedding nocaptcha.

    Args:
        settings: Logging settings; read from the environment when omitted.
    """
    global _settings
    if settings is not None:
        _settings = settings
    settings = get_settings()

    configure_stdlib_logging(settings.resolved_log_level)
    configure_structlog(settings.resolved_log_format)

    logger = structlog.get_logger(__name__)
    logger.info(
        "logging_initialized",
        env=settings.env,
        log_level=settings.resolved_log_level,
        log_format=settings.resolved_log_format,
    )
