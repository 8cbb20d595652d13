"""
Cisco ASA configuration parser.
"""
import re

from sentinel.parsers.base_parser import BaseParser
from sentinel.parsers.rule_models import NormalizedRule

# An address is either a lone any/any4/any6 keyword or a two-token pair:
# "<addr> <mask>", "host <ip>", "object <name>", "object-group <name>"
_ADDRESS = r'(any[46]?(?=\s|$)|\S+\s+\S+)'

ACCESS_LIST_PATTERN = re.compile(
    r'access-list\s+(\S+)\s+extended\s+(permit|deny)\s+(object-group\s+\S+|object\s+\S+|\S+)\s+'
    + _ADDRESS + r'\s+' + _ADDRESS +
    r'(?:\s+eq\s+(\S+))?',
    re.IGNORECASE
)

_ANY_ADDRESSES = {
    "any": "0.0.0.0/0",
    "any4": "0.0.0.0/0",
    "any6": "::/0",
}


def normalize_address(value: str) -> str:
    """Collapse whitespace in an address pair and expand the any keywords."""
    tokens = value.split()
    if len(tokens) == 1 and tokens[0].lower() in _ANY_ADDRESSES:
        return _ANY_ADDRESSES[tokens[0].lower()]
    return " ".join(tokens)


class CiscoASAParser(BaseParser):
    """
    Parser for Cisco ASA extended access lists.

    Format: access-list <name> extended permit|deny <protocol> <src> <dst> [eq <port>]

    The protocol may be a service reference ("object-group <name>" or
    "object <name>"), kept as the two-token pair.
    """

    vendor_label = "cisco_asa"
    pattern = ACCESS_LIST_PATTERN

    def build_rule(self, rule_id: int, match: re.Match) -> NormalizedRule:
        return NormalizedRule(
            id=rule_id,
            name=match.group(1),
            action=self.normalize_action(match.group(2)),
            protocol=match.group(3),
            source=normalize_address(match.group(4)),
            destination=normalize_address(match.group(5)),
            port=match.group(6) or "any",
            raw_text=match.group(0),
        )


def parse_cisco_asa(config_text: str):
    """Parse Cisco ASA access-list lines into NormalizedRule records."""
    return CiscoASAParser(config_text).parse_rules()
