"""Shared envelope, errors and endpoint selection."""

from .exceptions import (
    AccountIdRequiredError,
    APIRequestError,
    BindingSerializationError,
    RequestFailedError,
    TransportError,
    UnmarshalFailedError,
    WorkersError,
)
from .models import APIResponse, ResponseInfo
from .routing import WorkerMode

__all__ = [
    "APIRequestError",
    "APIResponse",
    "AccountIdRequiredError",
    "BindingSerializationError",
    "RequestFailedError",
    "ResponseInfo",
    "TransportError",
    "UnmarshalFailedError",
    "WorkerMode",
    "WorkersError",
]
