"""Shared pydantic base classes"""

from datetime import datetime, timezone

from pydantic import BaseModel, field_validator


class UTCResponse(BaseModel):
    """Response base: timestamps read from the database are naive UTC, mark them as UTC"""

    class Config:
        from_attributes = True

    @field_validator("*", mode="after")
    @classmethod
    def attach_utc(cls, v):
        if isinstance(v, datetime) and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
