"""
nocaptcha — Google reCAPTCHA widget rendering and server-side verification.

Example:
    >>> from nocaptcha import NoCaptcha
    >>> captcha = NoCaptcha.from_settings()
    >>> captcha.display({"class": "g-recaptcha"})
    >>> captcha.script()
    >>> captcha.verify(form["g-recaptcha-response"], client_ip)
"""

from nocaptcha.config import LoggingSettings, RecaptchaSettings
from nocaptcha.errors import (
    ConfigurationError,
    EmptyKeyError,
    InvalidKeyTypeError,
    NetworkError,
    NoCaptchaError,
    ResponseParseError,
    VerificationError,
)
from nocaptcha.schemas.verification import VerificationResult
from nocaptcha.services.nocaptcha import NoCaptcha
from nocaptcha.utils.logging_config import setup_logging

__version__ = "1.0.0"

__all__ = [
    "NoCaptcha",
    "VerificationResult",
    "RecaptchaSettings",
    "LoggingSettings",
    "setup_logging",
    "NoCaptchaError",
    "ConfigurationError",
    "InvalidKeyTypeError",
    "EmptyKeyError",
    "VerificationError",
    "NetworkError",
    "ResponseParseError",
]
