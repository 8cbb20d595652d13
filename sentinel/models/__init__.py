"""Database models."""
from sentinel.models.config_snapshot import ConfigSnapshotRecord
from sentinel.parsers.vendors import VendorType

__all__ = [
    "ConfigSnapshotRecord",
    "VendorType",
]
