"""
iptables configuration parser.

Reads ``iptables-save`` output (or shell-style ``iptables -A ...`` commands)
and normalizes every appended rule.
"""
import re
import shlex
import logging
from typing import Dict, List

from sentinel.parsers.base_parser import BaseParser
from sentinel.parsers.rule_models import NormalizedRule

logger = logging.getLogger(__name__)

APPEND_RULE_PATTERN = re.compile(
    r'(?:(?:sudo\s+)?iptables\s+(?:-t\s+\S+\s+)?)?-A\s+(?P<chain>\S+)(?P<options>.*)$'
)

_OPTION_FIELDS = {
    "-p": "protocol",
    "--protocol": "protocol",
    "-s": "source",
    "--source": "source",
    "--src": "source",
    "-d": "destination",
    "--destination": "destination",
    "--dst": "destination",
    "--dport": "port",
    "--dports": "port",
    "--destination-port": "port",
    "--destination-ports": "port",
    "-j": "target",
    "--jump": "target",
}


def _tokenize(options: str) -> List[str]:
    try:
        return shlex.split(options)
    except ValueError as e:
        # Unbalanced quote, usually inside a --comment
        logger.debug(f"Falling back to whitespace split for iptables options: {e}")
        return options.split()


def parse_options(options: str) -> Dict[str, str]:
    """
    Pick the match/target options relevant to the normalized model.

    A ``!`` before an option negates its value and is kept as a ``!`` prefix.
    """
    fields: Dict[str, str] = {}
    tokens = _tokenize(options)
    negate = False
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == "!":
            negate = True
            index += 1
            continue
        field = _OPTION_FIELDS.get(token)
        if field and index + 1 < len(tokens):
            value = tokens[index + 1]
            if value == "!":
                # Old-style negation: "-s ! 10.0.0.0/8"
                negate = True
                index += 1
                if index + 1 >= len(tokens):
                    break
                value = tokens[index + 1]
            fields[field] = f"!{value}" if negate else value
            index += 2
        else:
            index += 1
        negate = False
    return fields


class IptablesParser(BaseParser):
    """Parser for iptables rule listings."""

    vendor_label = "iptables"
    pattern = APPEND_RULE_PATTERN

    def build_rule(self, rule_id: int, match: re.Match) -> NormalizedRule:
        fields = parse_options(match.group("options"))
        protocol = fields.get("protocol", "any")
        return NormalizedRule(
            id=rule_id,
            name=match.group("chain"),
            action=self.normalize_action(fields.get("target")),
            protocol="any" if protocol.lower() == "all" else protocol,
            source=fields.get("source", "0.0.0.0/0"),
            destination=fields.get("destination", "0.0.0.0/0"),
            port=fields.get("port", "any"),
            raw_text=match.group(0),
        )


def parse_iptables(config_text: str):
    """Parse iptables append rules into NormalizedRule records."""
    return IptablesParser(config_text).parse_rules()
