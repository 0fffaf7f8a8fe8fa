"""HTTP transport used by the workers services."""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any, Optional, Protocol

from cfworkers.core.config import Settings
from cfworkers.modules.common.exceptions import APIRequestError, TransportError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Abstract request interface the services call through."""

    def make_request(self, method: str, path: str, payload: Any = None) -> bytes:
        ...

    def make_request_with_headers(
        self,
        method: str,
        path: str,
        body: Optional[bytes],
        headers: dict[str, str],
    ) -> bytes:
        ...


class HTTPTransport:
    """urllib based transport that handles base URL, auth and error envelopes."""

    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        email: Optional[str] = None,
        key: Optional[str] = None,
        timeout: int = 30,
        user_agent: str = "cfworkers",
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._email = email
        self._key = key
        self._timeout = timeout
        self._user_agent = user_agent

    @classmethod
    def from_settings(cls, settings: Settings) -> "HTTPTransport":
        api = settings.api
        return cls(
            settings.base_url,
            token=api.token,
            email=api.email,
            key=api.key,
            timeout=settings.timeout,
            user_agent=api.user_agent,
        )

    def auth_headers(self) -> dict[str, str]:
        if self._token:
            return {"Authorization": f"Bearer {self._token}"}
        if self._email and self._key:
            return {"X-Auth-Email": self._email, "X-Auth-Key": self._key}
        return {}

    def make_request(self, method: str, path: str, payload: Any = None) -> bytes:
        body = None
        headers = {"Content-Type": "application/json"}
        if payload is not None:
            body = json.dumps(payload).encode("utf-8")
        return self.make_request_with_headers(method, path, body, headers)

    def make_request_with_headers(
        self,
        method: str,
        path: str,
        body: Optional[bytes],
        headers: dict[str, str],
    ) -> bytes:
        url = self._base_url + path
        req_headers = {"User-Agent": self._user_agent}
        req_headers.update(self.auth_headers())
        req_headers.update(headers)

        logger.debug("%s %s (%d bytes)", method, url, len(body or b""))
        req = urllib.request.Request(url, data=body, headers=req_headers, method=method)
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:
                return resp.read()
        except urllib.error.HTTPError as exc:
            raw = exc.read()
            errors = _parse_errors(raw)
            logger.warning("%s %s answered %s: %s", method, url, exc.code, errors)
            raise APIRequestError(exc.code, errors, raw) from exc
        except urllib.error.URLError as exc:
            raise TransportError(f"{method} {url}: {exc.reason}") from exc
        except (http.client.HTTPException, OSError) as exc:
            raise TransportError(f"{method} {url}: {exc!r}") from exc


def _parse_errors(raw: bytes) -> list[dict[str, Any]]:
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return []
    if not isinstance(data, dict):
        return []
    errors = data.get("errors") or []
    return [item for item in errors if isinstance(item, dict)]


__all__ = ["HTTPTransport", "Transport"]
