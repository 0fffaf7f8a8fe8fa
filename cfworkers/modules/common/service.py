"""Base service exposing the transport and account configuration."""

from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from cfworkers.core.transport import Transport

from .exceptions import RequestFailedError, TransportError, UnmarshalFailedError

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


class WorkersService:
    """Holds the transport and account ID shared by the workers services."""

    def __init__(self, transport: Transport, account_id: str = "") -> None:
        self._transport = transport
        self._account_id = account_id or ""

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def account_id(self) -> str:
        return self._account_id

    def _request(self, method: str, path: str, payload: Any = None) -> bytes:
        try:
            return self._transport.make_request(method, path, payload)
        except TransportError as exc:
            raise RequestFailedError(f"request failed: {exc}") from exc

    def _request_with_headers(
        self,
        method: str,
        path: str,
        body: bytes,
        headers: dict[str, str],
    ) -> bytes:
        try:
            return self._transport.make_request_with_headers(method, path, body, headers)
        except TransportError as exc:
            raise RequestFailedError(f"request failed: {exc}") from exc

    @staticmethod
    def _decode(envelope: Type[EnvelopeT], raw: bytes) -> EnvelopeT:
        try:
            return envelope.model_validate_json(raw)
        except ValidationError as exc:
            raise UnmarshalFailedError(f"unmarshal failed: {exc}") from exc
