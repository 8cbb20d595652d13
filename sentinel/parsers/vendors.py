"""Vendor dialect enum."""
import enum
from typing import Optional


class VendorType(str, enum.Enum):
    """Supported configuration dialects."""
    CISCO_ASA = "cisco_asa"
    PALO_ALTO = "palo_alto"
    PALO_ALTO_XML = "palo_alto_xml"
    IPTABLES = "iptables"

    @property
    def produces_snapshot(self) -> bool:
        """True for dialects parsed into a ConfigSnapshot instead of a rule list."""
        return self is VendorType.PALO_ALTO_XML


# Identifiers accepted from callers, lower-cased
VENDOR_ALIASES = {
    "cisco": VendorType.CISCO_ASA,
    "cisco_asa": VendorType.CISCO_ASA,
    "cisco-asa": VendorType.CISCO_ASA,
    "asa": VendorType.CISCO_ASA,
    "paloalto": VendorType.PALO_ALTO,
    "palo_alto": VendorType.PALO_ALTO,
    "palo-alto": VendorType.PALO_ALTO,
    "panos": VendorType.PALO_ALTO,
    "paloalto_xml": VendorType.PALO_ALTO_XML,
    "palo_alto_xml": VendorType.PALO_ALTO_XML,
    "panos_xml": VendorType.PALO_ALTO_XML,
    "xml": VendorType.PALO_ALTO_XML,
    "iptables": VendorType.IPTABLES,
    "linux": VendorType.IPTABLES,
}


def resolve_vendor(vendor) -> Optional[VendorType]:
    """
    Map a vendor identifier onto VendorType.

    Returns:
        VendorType, or None for an unknown identifier
    """
    if isinstance(vendor, VendorType):
        return vendor
    if not isinstance(vendor, str):
        return None
    return VENDOR_ALIASES.get(vendor.strip().lower())
