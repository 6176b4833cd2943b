"""Request/response Pydantic models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class VerifyBadgeRequest(BaseModel):
    model_config = {"populate_by_name": True}

    url: str = ""
    site_uuid: str = Field(default="", alias="siteUuid")

    @field_validator("url", "site_uuid", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> str:
        # Anything that is not a string counts as missing
        return value.strip() if isinstance(value, str) else ""


class VerifyBadgeResponse(BaseModel):
    success: bool = True
    verified: bool = True


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class ContentErrorResponse(BaseModel):
    success: bool = False
    errors: list[str]


class SubmissionStatusResponse(BaseModel):
    uuid: str
    is_verified: bool
    is_published: bool
    label: str
    color: str | None = None
