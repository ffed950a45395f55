from html import escape
from typing import Any, Mapping, Optional


class AttributeBuilder:
    """Builds the ``data-*`` attribute string of the reCAPTCHA widget div."""

    ATTR_SITEKEY = "data-sitekey"
    ATTR_TYPE = "data-type"
    ATTR_THEME = "data-theme"
    ATTR_SIZE = "data-size"
    ATTR_TABINDEX = "data-tabindex"
    ATTR_CALLBACK = "data-callback"
    ATTR_EXPIRED_CALLBACK = "data-expired-callback"

    def build(
        self, site_key: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> str:
        merged: dict[str, Any] = {self.ATTR_SITEKEY: site_key}
        for name, value in (attributes or {}).items():
            if name == self.ATTR_SITEKEY:
                continue
            merged[name] = value
        return " ".join(
            f'{name}="{self._render_value(value)}"'
            for name, value in merged.items()
            if value is not None
        )

    def image_preset(self) -> dict[str, str]:
        return {self.ATTR_TYPE: "image"}

    def audio_preset(self) -> dict[str, str]:
        return {self.ATTR_TYPE: "audio"}

    @staticmethod
    def _render_value(value: Any) -> str:
        if isinstance(value, bool):
            value = "true" if value else "false"
        return escape(str(value), quote=True)
