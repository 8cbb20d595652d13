"""
Base parser class for line-oriented configuration dialects.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging
import re

from sentinel.parsers.extractors import require_text
from sentinel.parsers.rule_models import NormalizedRule, RuleAction

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Base class for rule parsers producing NormalizedRule sequences."""

    vendor_label = "generic"
    # Regex a single stripped configuration line must match to yield a rule
    pattern: re.Pattern

    def __init__(self, config_content: str):
        """
        Initialize parser with config content.

        Args:
            config_content: The configuration file content as string

        Raises:
            TypeError: If config_content is not a string
        """
        self.config_content = require_text(config_content, "config_content")
        self.lines = self.config_content.splitlines()

    @abstractmethod
    def build_rule(self, rule_id: int, match: re.Match) -> NormalizedRule:
        """Turn one regex match into a NormalizedRule."""

    def match_line(self, line: str) -> Optional[re.Match]:
        return self.pattern.match(line)

    def parse_rules(self) -> List[NormalizedRule]:
        """
        Parse every matching line, numbering rules 1..N in source order.

        Lines that do not match are skipped.
        """
        rules = []
        skipped = 0
        for line in self.lines:
            line = line.strip()
            if not line:
                continue
            match = self.match_line(line)
            if not match:
                skipped += 1
                continue
            rules.append(self.build_rule(len(rules) + 1, match))

        logger.debug(
            f"{self.vendor_label}: parsed {len(rules)} rules, skipped {skipped} non-matching lines"
        )
        return rules

    @staticmethod
    def normalize_action(value: Optional[str]) -> RuleAction:
        return RuleAction.normalize(value)
