"""
Service for storing configuration snapshots and deriving parsed views from them.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from sentinel.models.config_snapshot import ConfigSnapshotRecord
from sentinel.parsers.palo_alto_xml_parser import build_snapshot
from sentinel.parsers.rule_models import ConfigSnapshot
from sentinel.parsers.vendors import resolve_vendor
from sentinel.services.snapshot_differ import DiffEntry, diff_snapshots
from sentinel.utils.parser_factory import ParseResult, UnsupportedVendorError, create_parser, run_parser
from sentinel.utils.vendor_detector import detect_vendor

logger = logging.getLogger(__name__)


class SnapshotNotFoundError(ValueError):
    """Raised when a snapshot id does not exist."""

    def __init__(self, snapshot_id: int):
        self.snapshot_id = snapshot_id
        super().__init__(f"Config snapshot not found: {snapshot_id}")


class SnapshotService:
    """Repository for raw configuration snapshots."""

    def __init__(self, db: Session):
        """
        Args:
            db: Database session
        """
        self.db = db

    def save_snapshot(
        self,
        raw_config: str,
        hostname: Optional[str] = None,
        device_ip: Optional[str] = None,
        vendor=None,
        filename: Optional[str] = None,
    ) -> ConfigSnapshotRecord:
        """
        Save raw configuration text.

        Args:
            raw_config: Configuration text
            hostname: Device hostname; falls back to device_ip, then "unknown"
            device_ip: Optional device IP address
            vendor: Optional vendor identifier (detected when omitted)
            filename: Optional original filename

        Returns:
            The stored ConfigSnapshotRecord

        Raises:
            UnsupportedVendorError: If the vendor is unknown or cannot be detected
        """
        if not isinstance(raw_config, str):
            raise TypeError(f"raw_config must be a str, got {type(raw_config).__name__}")

        if vendor:
            vendor_type = resolve_vendor(vendor)
            if vendor_type is None:
                raise UnsupportedVendorError(vendor)
        else:
            vendor_type = detect_vendor(raw_config)
            if vendor_type is None:
                raise UnsupportedVendorError("undetected")

        record = ConfigSnapshotRecord(
            hostname=hostname or device_ip or "unknown",
            device_ip=device_ip,
            vendor=vendor_type,
            filename=filename,
            size=len(raw_config.encode("utf-8")),
            raw_config=raw_config,
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)

        logger.info(
            f"Saved config snapshot: id={record.id}, hostname={record.hostname}, "
            f"vendor={vendor_type.value}, size={record.size} bytes"
        )
        return record

    def list_snapshots(self, limit: int = 20, offset: int = 0) -> Tuple[List[ConfigSnapshotRecord], int]:
        """Return one page of snapshots, newest first, and the total count."""
        total = self.db.query(ConfigSnapshotRecord).count()
        records = (
            self.db.query(ConfigSnapshotRecord)
            .order_by(ConfigSnapshotRecord.created_at.desc(), ConfigSnapshotRecord.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return records, total

    def get_snapshot(self, snapshot_id: int) -> ConfigSnapshotRecord:
        record = self.db.query(ConfigSnapshotRecord).filter(ConfigSnapshotRecord.id == snapshot_id).first()
        if not record:
            raise SnapshotNotFoundError(snapshot_id)
        return record

    def delete_snapshot(self, snapshot_id: int) -> None:
        record = self.get_snapshot(snapshot_id)
        self.db.delete(record)
        self.db.commit()
        logger.info(f"Deleted config snapshot {snapshot_id}")

    def parse_snapshot(self, snapshot_id: int) -> Tuple[ConfigSnapshotRecord, ParseResult]:
        """Re-parse a stored snapshot with the parser of its vendor."""
        record = self.get_snapshot(snapshot_id)
        result = run_parser(create_parser(record.vendor, record.raw_config))
        return record, result

    def load_model(self, snapshot_id: int) -> ConfigSnapshot:
        """
        Build the structured model of a stored XML snapshot.

        Raises:
            ValueError: If the snapshot is not an XML configuration
        """
        record = self.get_snapshot(snapshot_id)
        if not record.vendor.produces_snapshot:
            raise ValueError(
                f"Config snapshot {snapshot_id} is {record.vendor.value}; "
                "only palo_alto_xml snapshots can be compared"
            )
        return build_snapshot(record.raw_config)

    def compare_snapshots(self, previous_id: int, current_id: int) -> List[DiffEntry]:
        """Diff the security policies of two stored XML snapshots."""
        previous = self.load_model(previous_id)
        current = self.load_model(current_id)
        entries = diff_snapshots(previous, current)
        logger.info(f"Compared config snapshots {previous_id} -> {current_id}: {len(entries)} policies")
        return entries
