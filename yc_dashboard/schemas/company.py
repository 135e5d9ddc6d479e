"""
yc_dashboard/schemas/company.py

Wire schema for company records served by the yc-oss directory API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TEXT_FIELDS = (
    "name",
    "slug",
    "batch",
    "status",
    "all_locations",
    "industry",
    "subindustry",
    "one_liner",
    "website",
    "url",
)


class RawCompanyRecord(BaseModel):
    """
    One company as published by the directory API.

    Unknown keys are ignored. Null or missing optional fields degrade to
    empty values instead of failing validation; only structurally wrong
    payloads (e.g. an object where text is expected) are rejected.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    id: int | None = None
    name: str = ""
    slug: str = ""
    batch: str = ""
    status: str = ""
    all_locations: str = ""
    industry: str = ""
    subindustry: str = ""
    one_liner: str = ""
    website: str = ""
    url: str = ""
    is_hiring: bool = Field(default=False, alias="isHiring")
    top_company: bool = False
    team_size: int | None = None
    regions: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    industries: tuple[str, ...] = ()

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("is_hiring", "top_company", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("id", "team_size", mode="before")
    @classmethod
    def _coerce_optional_int(cls, value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @field_validator("regions", "tags", "industries", mode="before")
    @classmethod
    def _coerce_text_list(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (list, tuple)):
            return tuple(str(item) for item in value if item is not None)
        return value

    @property
    def link(self) -> str:
        """Preferred outbound link: the company website, else its directory page."""
        return self.website or self.url
