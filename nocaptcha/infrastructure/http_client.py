"""Shared HTTP client with configurable timeout."""

from typing import Any

import httpx


class HttpClient:
    """Thin wrapper around httpx.Client with a configurable timeout.

    The siteverify call blocks until the response arrives or the timeout
    expires; the timeout is the only knob.
    """

    def __init__(self, timeout: float = 5.0) -> None:
        self._client = httpx.Client(timeout=timeout)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return self._client.post(url, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
