"""Simple dependency container for wiring the workers services."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from cfworkers.core.config import Settings, get_settings
from cfworkers.core.transport import HTTPTransport, Transport
from cfworkers.modules.routes.service import WorkerRouteService
from cfworkers.modules.scripts.service import WorkerScriptService


@dataclass(slots=True)
class WorkersAPI:
    """Script and route services sharing one transport and account ID."""

    transport: Transport
    account_id: str = ""
    scripts: WorkerScriptService = field(init=False)
    routes: WorkerRouteService = field(init=False)

    def __post_init__(self) -> None:
        self.scripts = WorkerScriptService(self.transport, self.account_id)
        self.routes = WorkerRouteService(self.transport, self.account_id)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WorkersAPI":
        return cls(HTTPTransport.from_settings(settings), settings.account_id)


@dataclass(slots=True)
class ClientContainer:
    settings: Settings
    workers: WorkersAPI = field(init=False)

    def __post_init__(self) -> None:
        self.workers = WorkersAPI.from_settings(self.settings)


@lru_cache()
def get_container() -> ClientContainer:
    return ClientContainer(settings=get_settings())


__all__ = ["ClientContainer", "WorkersAPI", "get_container"]
