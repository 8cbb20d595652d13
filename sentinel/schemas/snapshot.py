"""Schemas for config snapshot operations."""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from sentinel.parsers.rule_models import ConfigSnapshot, NormalizedRule
from sentinel.services.snapshot_differ import DiffEntry


class SnapshotResponse(BaseModel):
    """Metadata of a stored snapshot."""
    id: int
    hostname: str
    device_ip: Optional[str] = None
    vendor: str
    filename: Optional[str] = None
    size: int
    created_at: datetime

    @classmethod
    def from_record(cls, record) -> "SnapshotResponse":
        return cls(
            id=record.id,
            hostname=record.hostname,
            device_ip=record.device_ip,
            vendor=record.vendor.value,
            filename=record.filename,
            size=record.size,
            created_at=record.created_at,
        )


class SnapshotListResponse(BaseModel):
    """Paginated snapshot list."""
    items: List[SnapshotResponse]
    total: int
    limit: int
    offset: int


class SnapshotDetailResponse(SnapshotResponse):
    """Snapshot metadata with a preview of the raw text."""
    raw_content: str
    raw_content_truncated: bool = False


class ParsedSnapshotResponse(BaseModel):
    """Rules or structured model recomputed from stored text."""
    snapshot_id: Optional[int] = None
    vendor: str
    rules: Optional[List[NormalizedRule]] = None
    snapshot: Optional[ConfigSnapshot] = None


class ParseRequest(BaseModel):
    """Ad-hoc parse request."""
    config_text: str
    vendor: Optional[str] = None


class SnapshotDiffResponse(BaseModel):
    """Policy comparison between two stored snapshots."""
    previous_id: int
    current_id: int
    summary: Dict[str, int]
    entries: List[DiffEntry]
