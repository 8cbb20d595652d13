"""
Palo Alto Networks "set" command configuration parser.
"""
import re

from sentinel.parsers.base_parser import BaseParser
from sentinel.parsers.rule_models import NormalizedRule


def _value(group: str) -> str:
    # Either a bracketed member list "[ a b ]" or a single bare token
    return rf'(?:\[\s*(?P<{group}_list>[^\]]*?)\s*\]|(?P<{group}>[^\s\[\]]+))'


SECURITY_RULE_PATTERN = re.compile(
    r'set\s+rulebase\s+security\s+rules\s+(?:"(?P<quoted_name>[^"]+)"|(?P<name>\S+))'
    r'\s+source\s+' + _value("source") +
    r'\s+destination\s+' + _value("destination") +
    r'\s+service\s+' + _value("service") +
    r'\s+action\s+(?P<action>\S+)',
    re.IGNORECASE
)


def _member_value(match: re.Match, group: str, default: str = "any") -> str:
    single = match.group(group)
    if single:
        return single
    members = (match.group(f"{group}_list") or "").split()
    return ", ".join(members) if members else default


class PaloAltoParser(BaseParser):
    """
    Parser for Palo Alto security rules written as one-line set commands.

    set rulebase security rules <name> source [<src>] destination [<dst>] service [<svc>] action <action>

    The service is reported as the port; the protocol is not encoded separately.
    """

    vendor_label = "palo_alto"
    pattern = SECURITY_RULE_PATTERN

    def build_rule(self, rule_id: int, match: re.Match) -> NormalizedRule:
        return NormalizedRule(
            id=rule_id,
            name=match.group("quoted_name") or match.group("name"),
            action=self.normalize_action(match.group("action")),
            protocol="any",
            source=_member_value(match, "source"),
            destination=_member_value(match, "destination"),
            port=_member_value(match, "service"),
            raw_text=match.group(0),
        )


def parse_palo_alto_set(config_text: str):
    """Parse Palo Alto set-command security rules into NormalizedRule records."""
    return PaloAltoParser(config_text).parse_rules()
