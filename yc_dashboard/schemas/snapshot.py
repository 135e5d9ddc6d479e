"""
yc_dashboard/schemas/snapshot.py

Schemas for the pre-generated static snapshot documents.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SnapshotCompany(BaseModel):
    """
    One entry of the companies snapshot document.

    ``year`` may be absent in hand-edited snapshots; the loader derives
    it from ``batch`` in that case. A year outside 1000..9999 counts as
    absent.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    batch: str = ""
    year: int | None = None
    status: str | None = None
    location: str | None = None
    country: str | None = None

    @field_validator("year")
    @classmethod
    def _drop_malformed_year(cls, value: int | None) -> int | None:
        if value is not None and not 1000 <= value <= 9999:
            return None
        return value


class SnapshotStatistics(BaseModel):
    """
    The statistics snapshot document.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    total_companies: int = Field(..., ge=0)
    by_year: dict[str, int] = Field(default_factory=dict)
    by_country: dict[str, int] = Field(default_factory=dict)
    by_status: dict[str, int] = Field(default_factory=dict)
