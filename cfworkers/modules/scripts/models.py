"""Worker script models and request parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cfworkers.modules.bindings.models import WorkerBinding
from cfworkers.modules.common.models import APIResponse


@dataclass(slots=True)
class WorkerRequestParams:
    """Addresses a script by zone (single-script) or by name (multi-script)."""

    zone_id: str = ""
    script_name: str = ""


@dataclass(slots=True)
class WorkerScriptParams:
    script: str
    bindings: dict[str, WorkerBinding] = field(default_factory=dict)


class WorkerMetaData(BaseModel):
    id: Optional[str] = None
    etag: Optional[str] = None
    size: Optional[int] = None
    created_on: Optional[datetime] = None
    modified_on: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore")


class WorkerScript(WorkerMetaData):
    script: str = ""


class WorkerScriptResponse(APIResponse):
    result: WorkerScript = Field(default_factory=WorkerScript)

    @field_validator("result", mode="before")
    @classmethod
    def _null_result(cls, value):
        return {} if value is None else value


class WorkerListResponse(APIResponse):
    result: list[WorkerMetaData] = Field(default_factory=list)

    @field_validator("result", mode="before")
    @classmethod
    def _null_result(cls, value):
        return [] if value is None else value
