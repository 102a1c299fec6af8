"""
Parcel Pydantic schemas.

Defines the in-memory parcel entity handed to and returned by the store.
"""

import re
from datetime import datetime, timezone
from typing import Optional

from pydantic import AwareDatetime, BaseModel, Field, TypeAdapter, ValidationError, field_validator
from tracker.app.models.parcel_enums import ParcelStatus


RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Full date and time with seconds and an explicit offset; no date-only or naive values
RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?(Z|[+-]\d{2}:\d{2})"
)

_aware_datetime = TypeAdapter(AwareDatetime)


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment (default: now) as an RFC3339 UTC string with second precision."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(RFC3339_FORMAT)


class Parcel(BaseModel):
    """
    A tracked parcel.
    
    number is 0 until the store assigns one; the store ignores it on add.
    """
    number: int = Field(default=0, ge=0, description="Storage-assigned parcel number")
    client: int = Field(..., description="Opaque client identifier")
    status: ParcelStatus = Field(default=ParcelStatus.REGISTERED)
    address: str = Field(..., description="Free-form delivery address")
    created_at: str = Field(..., description="RFC3339 creation timestamp")
    
    class Config:
        from_attributes = True
    
    @field_validator("created_at")
    @classmethod
    def check_timestamp(cls, value: str) -> str:
        if not RFC3339_PATTERN.fullmatch(value):
            raise ValueError(f"created_at is not an RFC3339 timestamp: {value!r}")
        try:
            _aware_datetime.validate_python(value)
        except ValidationError:
            raise ValueError(f"created_at is not an RFC3339 timestamp: {value!r}")
        return value
    
    @classmethod
    def register(cls, client: int, address: str, created_at: Optional[str] = None) -> "Parcel":
        """Build a new, unassigned parcel in the registered state."""
        return cls(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=created_at or utc_timestamp(),
        )
