"""API models, upstream records and typed application errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationInfo, field_validator


class Contributor(BaseModel):
    login: StrictStr | None = ""
    contributions: StrictInt | None = 0

    @field_validator("login", "contributions", mode="after")
    @classmethod
    def _null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON null decodes to the field's zero value.
        if value is None:
            return "" if info.field_name == "login" else 0
        return value


class ProjectSummary(BaseModel):
    repo: str = Field(..., serialization_alias="project", examples=["github.com/nothings/stb"])
    owner: str
    committer: str = ""
    commits: int = 0
    languages: list[str] = Field(default_factory=list, serialization_alias="language")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class GitHubFetchError(Exception):
    """Base class for failures while fetching or decoding upstream JSON."""

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class InvalidPathError(GitHubFetchError):
    """URL does not point below the GitHub repos API."""


class TransportError(GitHubFetchError):
    """The upstream request failed before a body was received."""


class ParseError(GitHubFetchError):
    """The upstream body is not JSON of the expected shape."""


@dataclass
class AppError(Exception):
    code: str
    message: str
    status_code: int = 500
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def bad_request(cls, message: str, **details: Any) -> "AppError":
        return cls(code="BAD_REQUEST", message=message, status_code=400, details=details)

    @classmethod
    def internal(cls, message: str, **details: Any) -> "AppError":
        return cls(code="INTERNAL_ERROR", message=message, status_code=500, details=details)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"
