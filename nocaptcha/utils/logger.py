"""
Logger factory and utility functions for nocaptcha.

Provides:
- get_logger(): Get a configured logger instance
- hash_ip(): Hash IP addresses for privacy
"""

from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from .logging_config import hash_ip as _hash_ip


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured structlog BoundLogger instance

    Example:
        >>> from nocaptcha.utils.logger import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("recaptcha_verified", hostname="example.com")
    """
    return structlog.get_logger(name)


def hash_ip(ip_address: Optional[str]) -> Optional[str]:
    """
    Hash IP address for privacy in production.

    Wrapper around logging_config.hash_ip() that handles None values.

    Example:
        >>> log.warning("recaptcha_verification_failed", ip_hash=hash_ip(client_ip))
    """
    if ip_address is None:
        return None
    return _hash_ip(ip_address)
