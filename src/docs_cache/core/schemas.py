"""
Pydantic models for the on-disk snapshot and the stats report.
Why: the snapshot is read back across builds; enforce its shape on load.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CacheEntry(BaseModel):
    """One cached payload. Times are epoch milliseconds."""

    model_config = ConfigDict(populate_by_name=True)

    data: Any = None
    created_at: int = Field(..., alias="createdAt")
    ttl: int

    @property
    def expires_at(self) -> int:
        return self.created_at + self.ttl

    def is_valid(self, now: int) -> bool:
        return now <= self.expires_at

    def to_snapshot(self) -> dict:
        return {"data": self.data, "createdAt": self.created_at, "ttl": self.ttl}


class CacheStats(BaseModel):
    total: int = 0
    valid: int = 0
    expired: int = 0
    hit_rate: float = Field(default=0.0, ge=0.0, le=1.0)
