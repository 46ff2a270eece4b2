from __future__ import annotations

from typing import Optional, Protocol

import httpx
import requests

from messaging.errors import TransportError
from messaging.models import TransportMethod


class Transport(Protocol):
    def fetch(self, url: str) -> bytes: ...

    def close(self) -> None: ...


class HttpxTransport:
    def __init__(self, timeout_s: float = 30.0, client: Optional[httpx.Client] = None):
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout_s, follow_redirects=True)
        self.timeout_s = timeout_s

    def fetch(self, url: str) -> bytes:
        try:
            r = self.client.get(url, timeout=self.timeout_s)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(f"HTTP error: {e.response.status_code}", e.response.status_code) from e
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP request failed: {type(e).__name__}: {e}") from e
        if not r.content:
            raise TransportError("Empty response from gateway", r.status_code)
        return r.content

    def close(self) -> None:
        if self._owns_client:
            self.client.close()


class RequestsTransport:
    def __init__(self, timeout_s: float = 30.0, session: Optional[requests.Session] = None):
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout_s = timeout_s

    def fetch(self, url: str) -> bytes:
        try:
            r = self.session.get(url, timeout=self.timeout_s, allow_redirects=True)
            r.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(f"HTTP error: {status}", status) from e
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {type(e).__name__}: {e}") from e
        if not r.content:
            raise TransportError("Empty response from gateway", r.status_code)
        return r.content

    def close(self) -> None:
        if self._owns_session:
            self.session.close()


def transport_for(method: TransportMethod, timeout_s: float) -> Transport:
    # Both methods are a plain HTTP GET; the choice only picks the client library.
    if method == TransportMethod.CURL:
        return HttpxTransport(timeout_s=timeout_s)
    return RequestsTransport(timeout_s=timeout_s)
