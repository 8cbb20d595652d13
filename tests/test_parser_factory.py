"""
Tests for vendor dispatch and vendor detection.
"""
import pytest

from sentinel.parsers import (
    CiscoASAParser,
    ConfigSnapshot,
    IptablesParser,
    PaloAltoParser,
    PaloAltoXMLParser,
    VendorType,
    resolve_vendor,
)
from sentinel.utils.parser_factory import UnsupportedVendorError, create_parser, parse_config
from sentinel.utils.vendor_detector import detect_vendor


ASA_LINE = "access-list OUTSIDE extended permit tcp any host 1.1.1.1 eq 443"
PA_SET_LINE = "set rulebase security rules Web-Traffic source any destination [ 1.1.1.1 ] service HTTPS action allow"
IPTABLES_LINE = "-A INPUT -p tcp --dport 22 -j ACCEPT"


@pytest.mark.parametrize(
    "identifier,expected",
    [
        ("cisco", VendorType.CISCO_ASA),
        ("Cisco_ASA", VendorType.CISCO_ASA),
        (" paloalto ", VendorType.PALO_ALTO),
        ("panos", VendorType.PALO_ALTO),
        ("paloalto_xml", VendorType.PALO_ALTO_XML),
        ("iptables", VendorType.IPTABLES),
        (VendorType.IPTABLES, VendorType.IPTABLES),
        ("fortinet", None),
        ("", None),
        (None, None),
    ],
)
def test_resolve_vendor(identifier, expected):
    assert resolve_vendor(identifier) is expected


@pytest.mark.parametrize("vendor_type", list(VendorType))
def test_only_xml_produces_snapshot(vendor_type):
    assert vendor_type.produces_snapshot is (vendor_type is VendorType.PALO_ALTO_XML)


@pytest.mark.parametrize(
    "vendor,parser_class",
    [
        ("cisco", CiscoASAParser),
        ("paloalto", PaloAltoParser),
        ("paloalto_xml", PaloAltoXMLParser),
        ("iptables", IptablesParser),
    ],
)
def test_create_parser(vendor, parser_class):
    assert isinstance(create_parser(vendor, ""), parser_class)


def test_create_parser_unsupported_vendor():
    with pytest.raises(UnsupportedVendorError) as exc_info:
        create_parser("checkpoint", ASA_LINE)

    assert isinstance(exc_info.value, ValueError)
    assert "checkpoint" in str(exc_info.value)


def test_parse_config_dispatches_line_dialects():
    assert parse_config("cisco", ASA_LINE)[0].destination == "host 1.1.1.1"
    assert parse_config("paloalto", PA_SET_LINE)[0].port == "HTTPS"
    assert parse_config("iptables", IPTABLES_LINE)[0].port == "22"


def test_parse_config_xml_returns_snapshot(panos_config):
    result = parse_config("paloalto_xml", panos_config([{"name": "r1"}]))

    assert isinstance(result, ConfigSnapshot)
    assert result.policy_names() == ("r1",)


def test_parse_config_unknown_vendor_is_empty():
    assert parse_config("fortinet", ASA_LINE) == []


def test_parse_config_wrong_dialect_is_empty():
    assert parse_config("paloalto", ASA_LINE) == []


def test_parse_config_rejects_missing_text():
    with pytest.raises(TypeError):
        parse_config("cisco", None)
    with pytest.raises(TypeError):
        parse_config("unknown-vendor", None)


@pytest.mark.parametrize(
    "content,expected",
    [
        ("ASA Version 9.8(4)\n" + ASA_LINE, VendorType.CISCO_ASA),
        (ASA_LINE, VendorType.CISCO_ASA),
        ("set deviceconfig system hostname pa\n" + PA_SET_LINE, VendorType.PALO_ALTO),
        ('<config version="10.1.0"><devices/></config>', VendorType.PALO_ALTO_XML),
        ("*filter\n:INPUT DROP [0:0]\n" + IPTABLES_LINE + "\nCOMMIT", VendorType.IPTABLES),
        ("iptables " + IPTABLES_LINE, VendorType.IPTABLES),
        ("hostname router\n!", None),
    ],
)
def test_detect_vendor(content, expected):
    assert detect_vendor(content) is expected
