"""reCAPTCHA implementation of CaptchaVerifier.

- secret key injected, never read from the environment here
- timeout is enforced by the injected transport (HttpClient default 5s)
- transport and parse failures raise instead of verifying as False
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from nocaptcha.errors import NetworkError, ResponseParseError
from nocaptcha.infrastructure.captcha.protocol import HttpTransport
from nocaptcha.schemas.verification import VerificationResult
from nocaptcha.utils.logger import get_logger, hash_ip

log = get_logger(__name__)

VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"


class RecaptchaVerifier:
    def __init__(self, secret: str, http_client: HttpTransport) -> None:
        self._secret = secret
        self._http = http_client

    def verify(
        self, token: str, remote_ip: Optional[str] = None
    ) -> VerificationResult:
        if not token:
            return VerificationResult(
                success=False, error_codes=["missing-input-response"]
            )

        form = {"secret": self._secret, "response": token, "remoteip": remote_ip}
        form = {name: value for name, value in form.items() if value}

        try:
            response = self._http.post(VERIFY_URL, data=form)
        except httpx.HTTPError as e:
            log.error(
                "recaptcha_request_failed",
                error=str(e),
                error_type=type(e).__name__,
                ip_hash=hash_ip(remote_ip),
            )
            raise NetworkError(
                f"Could not reach the reCAPTCHA verify endpoint: {e}"
            ) from e

        if not 200 <= response.status_code < 300:
            log.error(
                "recaptcha_api_error",
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            raise NetworkError(
                "reCAPTCHA verify endpoint answered with an error status",
                details={"status_code": response.status_code},
            )

        try:
            data = response.json()
        except ValueError as e:
            log.error("recaptcha_response_not_json", response_text=response.text[:200])
            raise ResponseParseError(
                "reCAPTCHA verify endpoint returned a non-JSON body"
            ) from e

        if not isinstance(data, dict):
            log.error("recaptcha_response_not_object", body_type=type(data).__name__)
            raise ResponseParseError(
                "reCAPTCHA verify endpoint returned a non-object body"
            )

        try:
            result = VerificationResult.model_validate(data)
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            log.error("recaptcha_response_invalid", errors=errors)
            raise ResponseParseError(
                "reCAPTCHA verify endpoint returned an unexpected body",
                details=errors,
            ) from e

        if not result.success:
            log.warning(
                "recaptcha_verification_failed",
                error_codes=result.error_codes,
                ip_hash=hash_ip(remote_ip),
            )
        return result
