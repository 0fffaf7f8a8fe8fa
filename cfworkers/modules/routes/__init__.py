"""Exports for worker route domain"""

from .models import WorkerRoute, WorkerRouteResponse, WorkerRoutesResponse
from .service import WorkerRouteService, normalize_routes

__all__ = [
    "WorkerRoute",
    "WorkerRouteResponse",
    "WorkerRouteService",
    "WorkerRoutesResponse",
    "normalize_routes",
]
