"""Worker route CRUD across the filters and routes endpoint families."""

from __future__ import annotations

import logging
from typing import Iterable

from cfworkers.modules.common.routing import (
    WorkerMode,
    resolve_list_mode,
    resolve_route_mode,
    route_collection_path,
)
from cfworkers.modules.common.service import WorkersService

from .models import WorkerRoute, WorkerRouteResponse, WorkerRoutesResponse

logger = logging.getLogger(__name__)


def normalize_routes(routes: Iterable[WorkerRoute], mode: WorkerMode) -> list[WorkerRoute]:
    """Backfill ``enabled`` for multi-script listings, which never report it."""
    routes = list(routes)
    if mode is not WorkerMode.MULTI_SCRIPT:
        return routes
    for route in routes:
        if route.script:
            route.enabled = True
    return routes


class WorkerRouteService(WorkersService):

    def create_worker_route(self, zone_id: str, route: WorkerRoute) -> WorkerRouteResponse:
        mode = resolve_route_mode(route, self.account_id)
        path = route_collection_path(mode, zone_id)
        logger.info("Creating worker route %s on %s", route.pattern, path)
        res = self._request("POST", path, route.to_payload())
        return self._decode(WorkerRouteResponse, res)

    def update_worker_route(
        self,
        zone_id: str,
        route_id: str,
        route: WorkerRoute,
    ) -> WorkerRouteResponse:
        mode = resolve_route_mode(route, self.account_id)
        path = f"{route_collection_path(mode, zone_id)}/{route_id}"
        res = self._request("PUT", path, route.to_payload())
        return self._decode(WorkerRouteResponse, res)

    def delete_worker_route(self, zone_id: str, route_id: str) -> WorkerRouteResponse:
        # both families accept deletion through the filters endpoint
        path = f"{route_collection_path(WorkerMode.SINGLE_SCRIPT, zone_id)}/{route_id}"
        logger.info("Deleting worker route %s", path)
        res = self._request("DELETE", path)
        return self._decode(WorkerRouteResponse, res)

    def list_worker_routes(self, zone_id: str) -> WorkerRoutesResponse:
        mode = resolve_list_mode(self.account_id)
        res = self._request("GET", route_collection_path(mode, zone_id))
        response = self._decode(WorkerRoutesResponse, res)
        response.result = normalize_routes(response.result, mode)
        return response
