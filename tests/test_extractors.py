"""
Tests for the XML entry and field extractors.
"""
import re

import pytest

from sentinel.parsers.extractors import (
    Entry,
    extract_entries,
    extract_entry_ip,
    extract_first_member,
    extract_members,
    extract_section,
    extract_tag,
    is_disabled,
)


RULES_BLOCK = """
<security>
  <rules>
    <entry name="allow-web" uuid="1f6c">
      <source><member>10.0.0.0/8</member><member>172.16.0.0/12</member></source>
      <action>Allow</action>
    </entry>
    <entry name="deny-all">
      <action>deny</action>
      <disabled>yes</disabled>
    </entry>
  </rules>
</security>
"""


def test_extract_section_returns_first_match():
    section = extract_section(RULES_BLOCK, r"<rules>.*?</rules>")
    assert section.startswith("<rules>")
    assert section.endswith("</rules>")


def test_extract_section_accepts_compiled_pattern():
    pattern = re.compile(r"<security>.*?</security>", re.DOTALL)
    assert extract_section(RULES_BLOCK, pattern).startswith("<security>")


def test_extract_section_absent_returns_empty_string():
    assert extract_section(RULES_BLOCK, r"<nat>.*?</nat>") == ""
    assert extract_section("", r"<nat>.*?</nat>") == ""


def test_extract_entries_in_source_order():
    entries = extract_entries(RULES_BLOCK)
    assert [entry.name for entry in entries] == ["allow-web", "deny-all"]
    assert isinstance(entries[0], Entry)
    assert "<action>Allow</action>" in entries[0].content
    assert "<disabled>yes</disabled>" in entries[1].content


def test_extract_entries_no_match():
    assert extract_entries("<rules></rules>") == []
    assert extract_entries("\x00\x01 binary junk <entry name=") == []


def test_extract_tag_case_insensitive_and_stripped():
    assert extract_tag("<ACTION> allow </ACTION>", "action") == "allow"


def test_extract_tag_defaults():
    assert extract_tag("<source/>", "action") == "N/A"
    assert extract_tag("<action></action>", "action") == "N/A"
    assert extract_tag("<translated-address>", "translated-address", default="Masquerade") == "Masquerade"


def test_extract_first_member_returns_only_first():
    content = "<source><member>10.0.0.0/8</member><member>172.16.0.0/12</member></source>"
    assert extract_first_member(content, "source") == "10.0.0.0/8"
    assert extract_members(content, "source") == ["10.0.0.0/8", "172.16.0.0/12"]


def test_extract_first_member_defaults():
    assert extract_first_member("<to></to>", "to") == "any"
    assert extract_first_member("<from><member>trust</member></from>", "to") == "any"
    assert extract_first_member("", "application", default="none") == "none"
    assert extract_members("", "source") == []


def test_extract_first_member_does_not_match_longer_tag_names():
    content = "<source-user><member>alice</member></source-user>"
    assert extract_first_member(content, "source") == "any"


def test_is_disabled_requires_literal_flag():
    assert is_disabled("<action>allow</action><disabled>yes</disabled>") is True
    assert is_disabled("<disabled>no</disabled>") is False
    assert is_disabled("") is False


def test_extract_entry_ip():
    content = '<layer3><ip><entry name="192.0.2.1/24"/><entry name="192.0.2.2/24"/></ip></layer3>'
    assert extract_entry_ip(content) == "192.0.2.1/24"


def test_extract_entry_ip_unterminated_container():
    assert extract_entry_ip('<layer3><ip><entry name="198.51.100.7/32">') == "198.51.100.7/32"


def test_extract_entry_ip_defaults():
    assert extract_entry_ip("<layer3><ip></ip></layer3>") == "unassigned"
    assert extract_entry_ip("<layer3/>") == "unassigned"


@pytest.mark.parametrize(
    "call",
    [
        lambda: extract_section(None, r"<a>"),
        lambda: extract_entries(None),
        lambda: extract_tag(None, "action"),
        lambda: extract_first_member(None, "source"),
        lambda: is_disabled(None),
        lambda: extract_entry_ip(None),
    ],
)
def test_extractors_reject_non_text(call):
    with pytest.raises(TypeError):
        call()
