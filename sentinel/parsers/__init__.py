"""Vendor configuration parsers."""
from sentinel.parsers.cisco_asa_parser import CiscoASAParser, parse_cisco_asa
from sentinel.parsers.iptables_parser import IptablesParser, parse_iptables
from sentinel.parsers.palo_alto_parser import PaloAltoParser, parse_palo_alto_set
from sentinel.parsers.palo_alto_xml_parser import PaloAltoXMLParser, build_snapshot
from sentinel.parsers.rule_models import (
    ConfigSnapshot,
    InterfaceBinding,
    NatRule,
    NormalizedRule,
    RuleAction,
    SecurityPolicy,
)
from sentinel.parsers.vendors import VendorType, resolve_vendor

__all__ = [
    "CiscoASAParser",
    "IptablesParser",
    "PaloAltoParser",
    "PaloAltoXMLParser",
    "parse_cisco_asa",
    "parse_iptables",
    "parse_palo_alto_set",
    "build_snapshot",
    "ConfigSnapshot",
    "InterfaceBinding",
    "NatRule",
    "NormalizedRule",
    "RuleAction",
    "SecurityPolicy",
    "VendorType",
    "resolve_vendor",
]
