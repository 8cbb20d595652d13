"""
Ad-hoc parse endpoint: parse configuration text without storing it.
"""
import logging

from fastapi import APIRouter, HTTPException, status

from sentinel.parsers.rule_models import ConfigSnapshot
from sentinel.parsers.vendors import resolve_vendor
from sentinel.schemas.snapshot import ParsedSnapshotResponse, ParseRequest
from sentinel.utils.parser_factory import create_parser, run_parser
from sentinel.utils.vendor_detector import detect_vendor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=ParsedSnapshotResponse)
def parse_config_text(payload: ParseRequest):
    """
    Parse configuration text with the requested (or detected) vendor parser.

    Line-oriented dialects return ``rules``; the Palo Alto XML dialect
    returns ``snapshot``.
    """
    vendor_type = resolve_vendor(payload.vendor) if payload.vendor else detect_vendor(payload.config_text)
    if vendor_type is None:
        detail = (
            f"Unsupported vendor type: {payload.vendor}" if payload.vendor
            else "Could not detect vendor type from configuration"
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

    result = run_parser(create_parser(vendor_type, payload.config_text))

    if isinstance(result, ConfigSnapshot):
        logger.info(
            f"Parsed {vendor_type.value} text: {len(result.policies)} policies, "
            f"{len(result.nat)} NAT rules, {len(result.interfaces)} interfaces"
        )
        return ParsedSnapshotResponse(vendor=vendor_type.value, snapshot=result)

    logger.info(f"Parsed {vendor_type.value} text: {len(result)} rules")
    return ParsedSnapshotResponse(vendor=vendor_type.value, rules=result)
