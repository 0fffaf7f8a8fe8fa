"""Endpoint family selection for workers requests.

Workers are reachable through two endpoint families. The legacy one binds a
single script to a zone and is addressed by zone ID alone. The multi-script
family lets an account own several named scripts; it is addressed by account
ID plus script name and routes reference scripts by name.

Every request decides its family once with one of the ``resolve_*`` helpers
below and then builds its path from that decision.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from .exceptions import AccountIdRequiredError

if TYPE_CHECKING:
    from cfworkers.modules.routes.models import WorkerRoute


class WorkerMode(str, enum.Enum):
    SINGLE_SCRIPT = "single_script"
    MULTI_SCRIPT = "multi_script"


def resolve_script_mode(script_name: str, account_id: str) -> WorkerMode:
    """A non-empty script name selects the multi-script family.

    A zone ID passed together with a script name is ignored.
    """
    if script_name:
        if not account_id:
            raise AccountIdRequiredError()
        return WorkerMode.MULTI_SCRIPT
    return WorkerMode.SINGLE_SCRIPT


def resolve_route_mode(route: "WorkerRoute", account_id: str) -> WorkerMode:
    return resolve_script_mode(route.script or "", account_id)


def resolve_list_mode(account_id: str) -> WorkerMode:
    # a listing has no route to inspect, only the client configuration
    return WorkerMode.MULTI_SCRIPT if account_id else WorkerMode.SINGLE_SCRIPT


def script_path(
    mode: WorkerMode,
    *,
    zone_id: str = "",
    script_name: str = "",
    account_id: str = "",
) -> str:
    if mode is WorkerMode.MULTI_SCRIPT:
        return f"/accounts/{account_id}/workers/scripts/{script_name}"
    return f"/zones/{zone_id}/workers/script"


def scripts_collection_path(account_id: str) -> str:
    if not account_id:
        raise AccountIdRequiredError()
    return f"/accounts/{account_id}/workers/scripts"


def route_collection_path(mode: WorkerMode, zone_id: str) -> str:
    component = "routes" if mode is WorkerMode.MULTI_SCRIPT else "filters"
    return f"/zones/{zone_id}/workers/{component}"


__all__ = [
    "WorkerMode",
    "resolve_list_mode",
    "resolve_route_mode",
    "resolve_script_mode",
    "route_collection_path",
    "script_path",
    "scripts_collection_path",
]
