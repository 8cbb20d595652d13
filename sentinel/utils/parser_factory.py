"""
Parser factory for selecting the parser that matches a vendor dialect.
"""
import logging
from typing import List, Union

from sentinel.parsers.vendors import VendorType, resolve_vendor
from sentinel.parsers.cisco_asa_parser import CiscoASAParser
from sentinel.parsers.extractors import require_text
from sentinel.parsers.iptables_parser import IptablesParser
from sentinel.parsers.palo_alto_parser import PaloAltoParser
from sentinel.parsers.palo_alto_xml_parser import PaloAltoXMLParser
from sentinel.parsers.rule_models import ConfigSnapshot, NormalizedRule

logger = logging.getLogger(__name__)

PARSERS = {
    VendorType.CISCO_ASA: CiscoASAParser,
    VendorType.PALO_ALTO: PaloAltoParser,
    VendorType.PALO_ALTO_XML: PaloAltoXMLParser,
    VendorType.IPTABLES: IptablesParser,
}

ParseResult = Union[List[NormalizedRule], ConfigSnapshot]


class UnsupportedVendorError(ValueError):
    """Raised when a vendor identifier does not name a supported dialect."""

    def __init__(self, vendor):
        self.vendor = vendor
        super().__init__(f"Unsupported vendor type: {vendor}")


def create_parser(vendor, config_content: str):
    """
    Create appropriate parser based on vendor type.

    Args:
        vendor: VendorType or vendor identifier string
        config_content: Configuration file content

    Returns:
        Parser instance

    Raises:
        UnsupportedVendorError: If the vendor is not supported
    """
    vendor_type = resolve_vendor(vendor)
    if vendor_type is None:
        raise UnsupportedVendorError(vendor)
    return PARSERS[vendor_type](config_content)


def run_parser(parser) -> ParseResult:
    """Run a parser created by create_parser."""
    if isinstance(parser, PaloAltoXMLParser):
        return parser.parse_all()
    return parser.parse_rules()


def parse_config(vendor, config_text: str) -> ParseResult:
    """
    Parse configuration text with the dialect named by ``vendor``.

    Line-oriented dialects return a list of NormalizedRule; the Palo Alto XML
    dialect returns a ConfigSnapshot. An unknown vendor yields an empty list.

    Raises:
        TypeError: If config_text is not a string
    """
    require_text(config_text)
    try:
        parser = create_parser(vendor, config_text)
    except UnsupportedVendorError:
        logger.warning(f"No parser for vendor {vendor!r}, returning no rules")
        return []
    return run_parser(parser)