"""
Config snapshot endpoints: upload, list, detail, parsed view, delete and diff.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Response, UploadFile, status
from sqlalchemy.orm import Session

from sentinel.core.config import settings
from sentinel.core.database import get_db
from sentinel.parsers.rule_models import ConfigSnapshot
from sentinel.schemas.snapshot import (
    ParsedSnapshotResponse,
    SnapshotDetailResponse,
    SnapshotDiffResponse,
    SnapshotListResponse,
    SnapshotResponse,
)
from sentinel.services.snapshot_differ import summarize_diff
from sentinel.services.snapshot_service import SnapshotNotFoundError, SnapshotService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=SnapshotResponse, status_code=status.HTTP_201_CREATED)
async def upload_snapshot(
    file: UploadFile = File(...),
    hostname: Optional[str] = Form(None, description="Device hostname"),
    device_ip: Optional[str] = Form(None, description="Device IP address"),
    vendor: Optional[str] = Form(None, description="Vendor dialect; detected when omitted"),
    db: Session = Depends(get_db),
):
    """
    Store a configuration export as a new snapshot.

    Supports: Cisco ASA, Palo Alto (set commands and XML), iptables
    """
    content = await file.read()

    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File size exceeds maximum allowed size of {settings.MAX_UPLOAD_SIZE} bytes"
        )

    try:
        record = SnapshotService(db).save_snapshot(
            raw_config=content.decode("utf-8", errors="replace"),
            hostname=hostname,
            device_ip=device_ip,
            vendor=vendor,
            filename=file.filename,
        )
    except ValueError as e:
        logger.error(f"Validation error during snapshot upload: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return SnapshotResponse.from_record(record)


@router.get("/", response_model=SnapshotListResponse)
def list_snapshots(
    limit: int = Query(default=20, ge=1, le=100, description="Number of items per page"),
    offset: int = Query(default=0, ge=0, description="Number of items to skip"),
    db: Session = Depends(get_db),
):
    """List stored snapshots, newest first."""
    records, total = SnapshotService(db).list_snapshots(limit=limit, offset=offset)
    logger.info(f"Listed {len(records)} snapshots (offset={offset}, limit={limit}, total={total})")
    return SnapshotListResponse(
        items=[SnapshotResponse.from_record(record) for record in records],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/diff", response_model=SnapshotDiffResponse)
def diff_snapshots(
    previous_id: int = Query(..., description="Older snapshot id"),
    current_id: int = Query(..., description="Newer snapshot id"),
    db: Session = Depends(get_db),
):
    """Compare the security policies of two stored XML snapshots."""
    try:
        entries = SnapshotService(db).compare_snapshots(previous_id, current_id)
    except SnapshotNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return SnapshotDiffResponse(
        previous_id=previous_id,
        current_id=current_id,
        summary=summarize_diff(entries),
        entries=entries,
    )


@router.get("/{snapshot_id}", response_model=SnapshotDetailResponse)
def get_snapshot(snapshot_id: int, db: Session = Depends(get_db)):
    """Snapshot metadata with the raw text, truncated to MAX_RAW_PREVIEW characters."""
    try:
        record = SnapshotService(db).get_snapshot(snapshot_id)
    except SnapshotNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    preview_length = settings.MAX_RAW_PREVIEW
    return SnapshotDetailResponse(
        **SnapshotResponse.from_record(record).model_dump(),
        raw_content=record.raw_config[:preview_length],
        raw_content_truncated=len(record.raw_config) > preview_length,
    )


@router.get("/{snapshot_id}/parsed", response_model=ParsedSnapshotResponse)
def get_parsed_snapshot(snapshot_id: int, db: Session = Depends(get_db)):
    """Re-parse a stored snapshot with its vendor parser."""
    try:
        record, result = SnapshotService(db).parse_snapshot(snapshot_id)
    except SnapshotNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    if isinstance(result, ConfigSnapshot):
        return ParsedSnapshotResponse(snapshot_id=record.id, vendor=record.vendor.value, snapshot=result)
    return ParsedSnapshotResponse(snapshot_id=record.id, vendor=record.vendor.value, rules=result)


@router.delete("/{snapshot_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_snapshot(snapshot_id: int, db: Session = Depends(get_db)):
    """Delete a stored snapshot."""
    try:
        SnapshotService(db).delete_snapshot(snapshot_id)
    except SnapshotNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
