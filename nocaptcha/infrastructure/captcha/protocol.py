"""Transport and verifier protocols — the facade depends on these, not the implementations."""

from typing import Any, Optional, Protocol

import httpx

from nocaptcha.schemas.verification import VerificationResult


class HttpTransport(Protocol):
    def post(self, url: str, **kwargs: Any) -> httpx.Response: ...


class CaptchaVerifier(Protocol):
    def verify(
        self, token: str, remote_ip: Optional[str] = None
    ) -> VerificationResult: ...
