"""
Vendor detection utility.
"""
import logging
import re
from typing import Optional

from sentinel.parsers.vendors import VendorType

logger = logging.getLogger(__name__)

_IPTABLES_RULE = re.compile(r'^\s*(?:iptables\s+)?-A\s+\S+', re.MULTILINE)


def detect_vendor(config_content: str) -> Optional[VendorType]:
    """
    Detect the configuration dialect from its content.

    Args:
        config_content: The configuration file content

    Returns:
        VendorType if detected, None otherwise
    """
    config_lower = config_content.lower()

    # XML exports first: they may embed text that looks like other dialects
    xml_indicators = [
        "<config ",
        "<config>",
        "<rulebase>",
        "<entry name=",
    ]
    if any(indicator in config_lower for indicator in xml_indicators):
        return VendorType.PALO_ALTO_XML

    palo_alto_indicators = [
        "set rulebase security rules",
        "set deviceconfig",
        "set network interface",
    ]
    if any(indicator in config_lower for indicator in palo_alto_indicators):
        return VendorType.PALO_ALTO

    asa_indicators = [
        "asa version",
        "cisco adaptive security appliance",
        "same-security-traffic",
    ]
    if any(indicator in config_lower for indicator in asa_indicators):
        return VendorType.CISCO_ASA
    if "access-list" in config_lower and " extended " in config_lower:
        return VendorType.CISCO_ASA

    iptables_indicators = [
        "*filter",
        "iptables-save",
        ":input ",
        ":forward ",
    ]
    if any(indicator in config_lower for indicator in iptables_indicators):
        return VendorType.IPTABLES
    if _IPTABLES_RULE.search(config_content):
        return VendorType.IPTABLES

    logger.warning("Could not detect vendor type from config content")
    return None
