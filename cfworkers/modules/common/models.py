"""Response envelope shared by every JSON returning endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class ResponseInfo(BaseModel):
    code: int = 0
    message: str = ""


class APIResponse(BaseModel):
    success: bool = False
    errors: list[ResponseInfo] = Field(default_factory=list)
    messages: list[ResponseInfo] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
