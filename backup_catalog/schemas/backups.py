"""Schemas for backup catalog entries."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backup_catalog.domain.enums import BackupType, Initiator

Number = Union[int, float]

DEFAULT_TTL = 31536000  # 365 days


class BackupAttributes(BaseModel):
    """Attributes the platform reports for one backup in the catalog."""

    id: str = Field(..., description="Composite id <scheduled_for>_<archive_type>_<type>")
    folder: Optional[str] = Field(None, description="Storage folder; its suffix encodes the initiator")
    filename: Optional[str] = Field(None, description="Archive file name")
    size: Optional[Number] = Field(None, description="Archive size in bytes; 0 or null until produced")
    timestamp: Optional[Number] = Field(None, description="Epoch seconds when the backup started")
    finish_time: Optional[Number] = Field(None, description="Epoch seconds when the backup completed")
    ttl: Number = Field(DEFAULT_TTL, description="Seconds the archive is retained after completion")
    archive_url: Optional[str] = Field(None, description="Signed download URL, when already known")

    # Keep any other server fields around untouched
    model_config = ConfigDict(extra="allow")

    @field_validator("ttl", mode="before")
    @classmethod
    def _default_missing_ttl(cls, value: Any) -> Any:
        return DEFAULT_TTL if value is None else value


class BackupSummary(BaseModel):
    """Display-ready view of a backup, consumed by table/JSON renderers."""

    file: Optional[str] = None
    size: str
    date: Union[Number, str]
    expiry: Optional[Number] = None
    initiator: Initiator
    url: Optional[str] = None
    type: BackupType
