"""
nocaptcha error hierarchy.

NoCaptchaError is the base for all typed errors. Configuration errors are
raised while constructing a NoCaptcha instance; verification errors are
raised when the siteverify call cannot produce a usable answer.

An empty user token is not an error: it verifies as False.
"""

from __future__ import annotations

from typing import Any, Optional


class NoCaptchaError(Exception):
    """Base library error. All typed errors inherit from this."""

    error_code: str = "nocaptcha_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.field is not None:
            payload["field"] = self.field
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(NoCaptchaError):
    error_code = "configuration_error"


class InvalidKeyTypeError(ConfigurationError, TypeError):
    error_code = "invalid_key_type"


class EmptyKeyError(ConfigurationError, ValueError):
    error_code = "empty_key"


class VerificationError(NoCaptchaError):
    error_code = "verification_error"


class NetworkError(VerificationError):
    """The siteverify endpoint could not be reached or answered non-2xx."""

    error_code = "network_error"


class ResponseParseError(VerificationError):
    """The siteverify endpoint answered with a body we cannot read."""

    error_code = "response_parse_error"
