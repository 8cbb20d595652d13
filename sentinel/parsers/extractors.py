"""
Tolerant extractors for XML-style firewall configuration text.

Every extractor works on raw text with regular expressions and never raises
on a missing or malformed construct: absence is signalled by an empty result
or by the caller-supplied default.
"""
import re
from typing import Iterator, List, NamedTuple, Pattern, Union

ENTRY_PATTERN = re.compile(r'<entry name="([^"]*)"[^>]*>(.*?)</entry>', re.IGNORECASE | re.DOTALL)
MEMBER_PATTERN = re.compile(r'<member>([^<]*)</member>', re.IGNORECASE)
# An interface entry may be cut short by a nested </entry>, so the container may be unterminated
IP_BLOCK_PATTERN = re.compile(r'<ip>(.*?)(?:</ip>|\Z)', re.IGNORECASE | re.DOTALL)
ENTRY_NAME_PATTERN = re.compile(r'<entry name="([^"]*)"', re.IGNORECASE)

DISABLED_MARKER = "<disabled>yes</disabled>"


class Entry(NamedTuple):
    """A named ``<entry>`` block."""
    name: str
    content: str


def require_text(value, argument: str = "config_text") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{argument} must be a str, got {type(value).__name__}")
    return value


def _tag_pattern(tag: str) -> Pattern:
    escaped = re.escape(tag)
    return re.compile(rf'<{escaped}>(.*?)</{escaped}>', re.IGNORECASE | re.DOTALL)


def extract_section(text: str, pattern: Union[str, Pattern]) -> str:
    """
    Return the text spanned by the first match of a section boundary pattern.

    Args:
        text: Configuration text to search
        pattern: Compiled or string regex spanning the whole section

    Returns:
        The matched section, or an empty string if the section is absent
    """
    require_text(text, "text")
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.IGNORECASE | re.DOTALL)
    match = pattern.search(text)
    return match.group(0) if match else ""


def iter_entries(block: str) -> Iterator[Entry]:
    """Yield every ``<entry name="...">`` block in source order."""
    require_text(block, "block")
    for match in ENTRY_PATTERN.finditer(block):
        yield Entry(name=match.group(1), content=match.group(2))


def extract_entries(block: str) -> List[Entry]:
    """
    Collect the named entries of a section.

    Nested entries sharing the ``entry`` tag are not balanced: the first
    closing tag ends the outer entry.
    """
    return list(iter_entries(block))


def extract_tag(content: str, tag: str, default: str = "N/A") -> str:
    """Return the stripped text between the first ``<tag>`` and ``</tag>``."""
    require_text(content, "content")
    match = _tag_pattern(tag).search(content)
    if not match:
        return default
    value = match.group(1).strip()
    return value or default


def extract_members(content: str, tag: str) -> List[str]:
    """Return every ``<member>`` text of the first ``<tag>`` block, in order."""
    require_text(content, "content")
    block = _tag_pattern(tag).search(content)
    if not block:
        return []
    return [member.strip() for member in MEMBER_PATTERN.findall(block.group(1))]


def extract_first_member(content: str, tag: str, default: str = "any") -> str:
    """Return the first ``<member>`` of a ``<tag>`` block, or ``default``."""
    members = extract_members(content, tag)
    if not members or not members[0]:
        return default
    return members[0]


def is_disabled(content: str) -> bool:
    """True iff the entry carries the literal ``<disabled>yes</disabled>`` flag."""
    require_text(content, "content")
    return DISABLED_MARKER in content


def extract_entry_ip(content: str, default: str = "unassigned") -> str:
    """Return the name of the first entry inside an ``<ip>`` container."""
    require_text(content, "content")
    block = IP_BLOCK_PATTERN.search(content)
    if not block:
        return default
    entry = ENTRY_NAME_PATTERN.search(block.group(1))
    if not entry or not entry.group(1):
        return default
    return entry.group(1)
