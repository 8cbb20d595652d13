"""
Palo Alto Networks XML configuration parser.

Builds a ConfigSnapshot (security policies, NAT rules, interfaces) from a
running-config XML export. Extraction is regex based and best effort: a
missing or broken section produces an empty collection.
"""
import re
import logging
from typing import List

from sentinel.parsers.extractors import (
    extract_entries,
    extract_first_member,
    extract_entry_ip,
    extract_section,
    extract_tag,
    is_disabled,
    require_text,
)
from sentinel.parsers.rule_models import (
    ConfigSnapshot,
    InterfaceBinding,
    NatRule,
    SecurityPolicy,
)

logger = logging.getLogger(__name__)

SECURITY_RULES_SECTION = re.compile(
    r'<security>.*?<rules>(.*?)</rules>.*?</security>', re.IGNORECASE | re.DOTALL
)
NAT_RULES_SECTION = re.compile(
    r'<nat>.*?<rules>(.*?)</rules>.*?</nat>', re.IGNORECASE | re.DOTALL
)
ETHERNET_SECTION = re.compile(r'<ethernet>(.*?)</ethernet>', re.IGNORECASE | re.DOTALL)

INTERFACE_STATUS = "up"


class PaloAltoXMLParser:
    """Parser for Palo Alto XML configuration exports."""

    def __init__(self, config_content: str):
        """
        Args:
            config_content: Raw XML configuration text

        Raises:
            TypeError: If config_content is not a string
        """
        self.config_content = require_text(config_content, "config_content")

    def parse_policies(self) -> List[SecurityPolicy]:
        """Parse security rulebase entries."""
        section = extract_section(self.config_content, SECURITY_RULES_SECTION)
        policies = [
            SecurityPolicy(
                name=entry.name,
                from_zone=extract_first_member(entry.content, "from"),
                to_zone=extract_first_member(entry.content, "to"),
                source=extract_first_member(entry.content, "source"),
                destination=extract_first_member(entry.content, "destination"),
                action=self._action(entry.content),
                application=extract_first_member(entry.content, "application"),
                disabled=is_disabled(entry.content),
            )
            for entry in extract_entries(section)
        ]
        return policies

    def parse_nat_rules(self) -> List[NatRule]:
        """Parse NAT rulebase entries."""
        section = extract_section(self.config_content, NAT_RULES_SECTION)
        return [
            NatRule(
                name=entry.name,
                from_zone=extract_first_member(entry.content, "from"),
                to_zone=extract_first_member(entry.content, "to"),
                source=extract_first_member(entry.content, "source"),
                destination=extract_first_member(entry.content, "destination"),
                translated_address=self._translated_address(entry.content),
            )
            for entry in extract_entries(section)
        ]

    def parse_interfaces(self) -> List[InterfaceBinding]:
        """
        Parse ethernet interfaces.

        The export does not carry link state, so every interface reports "up".
        """
        interfaces = []
        for section in ETHERNET_SECTION.finditer(self.config_content):
            for entry in extract_entries(section.group(1)):
                # Skip address entries and other non-interface names
                if "ethernet" not in entry.name.lower():
                    continue
                interfaces.append(
                    InterfaceBinding(
                        name=entry.name,
                        ip_assignment=extract_entry_ip(entry.content),
                        status=INTERFACE_STATUS,
                    )
                )
        return interfaces

    def parse_all(self) -> ConfigSnapshot:
        """
        Parse all configuration elements.

        Returns:
            Immutable ConfigSnapshot
        """
        snapshot = ConfigSnapshot(
            policies=tuple(self.parse_policies()),
            nat=tuple(self.parse_nat_rules()),
            interfaces=tuple(self.parse_interfaces()),
        )
        logger.debug(
            f"palo_alto_xml: parsed {len(snapshot.policies)} policies, "
            f"{len(snapshot.nat)} NAT rules, {len(snapshot.interfaces)} interfaces"
        )
        return snapshot

    @staticmethod
    def _action(content: str) -> str:
        action = extract_tag(content, "action", default="")
        return action.lower() if action else "N/A"

    @staticmethod
    def _translated_address(content: str) -> str:
        # Dynamic IP and port NAT wraps the address in <member>; static NAT does not
        member = extract_first_member(content, "translated-address", default="")
        return member or extract_tag(content, "translated-address", default="Masquerade")


def build_snapshot(config_text: str) -> ConfigSnapshot:
    """Build a ConfigSnapshot from Palo Alto XML configuration text."""
    return PaloAltoXMLParser(config_text).parse_all()
