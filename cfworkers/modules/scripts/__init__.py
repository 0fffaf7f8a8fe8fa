"""Exports for worker script domain"""

from .models import (
    WorkerListResponse,
    WorkerMetaData,
    WorkerRequestParams,
    WorkerScript,
    WorkerScriptParams,
    WorkerScriptResponse,
)
from .service import WorkerScriptService

__all__ = [
    "WorkerListResponse",
    "WorkerMetaData",
    "WorkerRequestParams",
    "WorkerScript",
    "WorkerScriptParams",
    "WorkerScriptResponse",
    "WorkerScriptService",
]
