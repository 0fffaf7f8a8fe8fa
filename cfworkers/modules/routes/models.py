"""Domain models for worker routes (filters)."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cfworkers.modules.common.models import APIResponse


class WorkerRoute(BaseModel):
    """URL pattern that decides which requests a worker handles.

    In the multi-script family a route names its script and the server does
    not report ``enabled``.
    """

    id: Optional[str] = None
    pattern: str = ""
    enabled: bool = False
    script: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"pattern": self.pattern, "enabled": self.enabled}
        if self.id:
            payload["id"] = self.id
        if self.script:
            payload["script"] = self.script
        return payload


class WorkerRouteResponse(APIResponse):
    result: WorkerRoute = Field(default_factory=WorkerRoute)

    @field_validator("result", mode="before")
    @classmethod
    def _null_result(cls, value):
        return {} if value is None else value


class WorkerRoutesResponse(APIResponse):
    result: list[WorkerRoute] = Field(default_factory=list)

    @field_validator("result", mode="before")
    @classmethod
    def _null_result(cls, value):
        return [] if value is None else value
