from typing import Optional
from urllib.parse import urlencode

CLIENT_URL = "https://www.google.com/recaptcha/api.js"


class ScriptUrlBuilder:
    """Composes the reCAPTCHA client script URL.

    ``hl`` forces the widget language; ``onload`` plus ``render=explicit``
    switch the widget to explicit rendering through a named JS callback.
    """

    def __init__(self, lang: Optional[str] = None) -> None:
        self.lang = lang

    def build(self, callback_name: Optional[str] = None) -> str:
        queries: dict[str, str] = {}
        if self.lang:
            queries["hl"] = self.lang
        if callback_name:
            queries["onload"] = callback_name
            queries["render"] = "explicit"
        if not queries:
            return CLIENT_URL
        return f"{CLIENT_URL}?{urlencode(queries)}"
