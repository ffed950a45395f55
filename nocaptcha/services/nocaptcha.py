"""
NoCaptcha facade — widget markup, client script tag and token verification.

Instantiate one NoCaptcha per page render: the script tag is emitted at most
once per instance.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from nocaptcha.builders.attributes import AttributeBuilder
from nocaptcha.builders.script import ScriptUrlBuilder
from nocaptcha.config import RecaptchaSettings
from nocaptcha.infrastructure.captcha.protocol import CaptchaVerifier, HttpTransport
from nocaptcha.infrastructure.captcha.recaptcha import RecaptchaVerifier
from nocaptcha.infrastructure.http_client import HttpClient
from nocaptcha.schemas.verification import VerificationResult
from nocaptcha.shared.validators import check_key

DEFAULT_CALLBACK_NAME = "captchaRenderCallback"


class NoCaptcha:
    def __init__(
        self,
        secret: str,
        site_key: str,
        lang: Optional[str] = None,
        *,
        http_client: Optional[HttpTransport] = None,
        attributes: Optional[AttributeBuilder] = None,
        timeout: float = 5.0,
    ) -> None:
        self._secret = check_key("secret key", secret)
        self._site_key = check_key("site key", site_key)
        self._lang = lang or None
        self._script_loaded = False

        self._timeout = timeout

        # Built on first verification when no transport is injected
        self._own_client: Optional[HttpClient] = None
        self._verifier: Optional[CaptchaVerifier] = None
        if http_client is not None:
            self._verifier = RecaptchaVerifier(self._secret, http_client)
        self._attributes = attributes or AttributeBuilder()
        self._script_url = ScriptUrlBuilder(self._lang)

    @classmethod
    def from_settings(
        cls, settings: Optional[RecaptchaSettings] = None, **kwargs: Any
    ) -> "NoCaptcha":
        """Build an instance from RECAPTCHA_* environment settings."""
        settings = settings or RecaptchaSettings()
        kwargs.setdefault("timeout", settings.recaptcha_timeout)
        return cls(
            settings.recaptcha_secret,
            settings.recaptcha_sitekey,
            settings.recaptcha_lang,
            **kwargs,
        )

    @property
    def site_key(self) -> str:
        return self._site_key

    @property
    def lang(self) -> Optional[str]:
        return self._lang

    def set_request_client(self, http_client: HttpTransport) -> "NoCaptcha":
        self.close()
        self._verifier = RecaptchaVerifier(self._secret, http_client)
        return self

    def set_attributes(self, attributes: AttributeBuilder) -> "NoCaptcha":
        self._attributes = attributes
        return self

    # ── Rendering ────────────────────────────────────────────────────────────

    def display(self, attributes: Optional[Mapping[str, Any]] = None) -> str:
        output = self._attributes.build(self._site_key, attributes)
        return f"<div {output}></div>"

    def image(self, attributes: Optional[Mapping[str, Any]] = None) -> str:
        return self.display({**(attributes or {}), **self._attributes.image_preset()})

    def audio(self, attributes: Optional[Mapping[str, Any]] = None) -> str:
        return self.display({**(attributes or {}), **self._attributes.audio_preset()})

    def script(self, callback_name: Optional[str] = None) -> str:
        """Return the client script tag, or ``""`` once it has been emitted."""
        if self._script_loaded:
            return ""
        self._script_loaded = True
        src = self._script_url.build(callback_name)
        return f'<script src="{src}" async defer></script>'

    def script_with_callback(
        self,
        captchas: Sequence[str],
        callback_name: str = DEFAULT_CALLBACK_NAME,
    ) -> str:
        """Return the script tag plus an onload callback rendering each widget id.

        Falls back to plain ``script(callback_name)`` output when no ids are
        given, and to ``""`` when the script was already emitted.
        """
        script = self.script(callback_name)
        if not script or not captchas:
            return script

        renders = "\n".join(
            f"grecaptcha.render('{captcha}', {{'sitekey' : '{self._site_key}'}});"
            for captcha in captchas
        )
        inline = "\n".join(
            [
                "<script>",
                f"var {callback_name} = function() {{",
                renders,
                "};",
                "</script>",
            ]
        )
        return f"{script}\n{inline}"

    # ── Verification ─────────────────────────────────────────────────────────

    def verify(self, token: Optional[str], client_ip: Optional[str] = None) -> bool:
        """Return True when Google confirms *token*.

        An empty token is False without a network call. Transport and parse
        failures raise NetworkError / ResponseParseError.
        """
        if not token:
            return False
        return self.verify_response(token, client_ip).success

    def verify_response(
        self, token: Optional[str], client_ip: Optional[str] = None
    ) -> VerificationResult:
        return self._get_verifier().verify(token or "", client_ip)

    def _get_verifier(self) -> CaptchaVerifier:
        if self._verifier is None:
            self._own_client = HttpClient(timeout=self._timeout)
            self._verifier = RecaptchaVerifier(self._secret, self._own_client)
        return self._verifier

    # ── Lifecycle ────────────────────────────────────────────────────────────

    def close(self) -> None:
        if self._own_client is not None:
            self._own_client.close()
            self._own_client = None
            self._verifier = None

    def __enter__(self) -> "NoCaptcha":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
