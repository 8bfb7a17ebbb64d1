"""Canonical request model shared by every parser and generator.

All parsers (curl, fetch, axios, Postman) convert their input into
RequestRecord; all generators render a RequestRecord back out.
"""

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnknownFormatError(ValueError):
    """Raised when an input or output format name is not supported."""


class BasicAuth(BaseModel):
    """A basic-auth credential pair."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user: str
    password: str = Field(default="", alias="pass")


class RequestRecord(BaseModel):
    """A single HTTP request, independent of the format it came from."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    method: str = "GET"
    url: str = ""
    headers: dict[str, str] = {}
    body: str | None = None
    content_type: str | None = Field(default=None, alias="contentType")
    auth: BasicAuth | None = None
    follow_redirects: bool = Field(default=True, alias="followRedirects")
    insecure: bool = False

    @field_validator("method")
    @classmethod
    def _normalize_method(cls, value: str) -> str:
        return value.strip().upper() or "GET"

    def has_options(self) -> bool:
        """True when a generated call needs more than the bare URL."""
        return bool(self.method != "GET" or self.headers or self.body or self.auth)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False).rstrip("\n")
