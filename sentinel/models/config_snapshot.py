"""Config snapshot database model."""
from sqlalchemy import Column, Integer, String, DateTime, Text, Enum
from sqlalchemy.sql import func

from sentinel.core.database import Base
from sentinel.parsers.vendors import VendorType


class ConfigSnapshotRecord(Base):
    """
    Raw configuration text saved for later parsing and comparison.

    Only the raw text is stored; parsed views are recomputed on demand.
    """
    __tablename__ = "config_snapshots"

    id = Column(Integer, primary_key=True, index=True)
    hostname = Column(String(255), nullable=False, index=True)
    device_ip = Column(String(255), nullable=True)
    vendor = Column(Enum(VendorType), nullable=False, index=True)
    filename = Column(String(255), nullable=True)
    size = Column(Integer, nullable=False)
    raw_config = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
