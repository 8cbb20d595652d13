"""
Pydantic models for the normalized rule and configuration snapshot representation.

Attributes are snake_case; JSON output uses the camelCase aliases
(``rawText``, ``fromZone``, ``translatedAddress``...) expected by the dashboard.
"""
import enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RuleAction(str, enum.Enum):
    """Normalized rule actions across vendors."""
    PERMIT = "permit"
    DENY = "deny"
    ALLOW = "allow"
    ACCEPT = "accept"
    DROP = "drop"
    REJECT = "reject"
    UNKNOWN = "unknown"

    @classmethod
    def normalize(cls, value: Optional[str]) -> "RuleAction":
        """Map a vendor action verb onto the enum, ``unknown`` when unrecognized."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class NormalizedRule(_FrozenModel):
    """One rule produced by a line-oriented vendor parser."""
    id: int
    name: Optional[str] = None
    action: RuleAction
    protocol: str
    source: str
    destination: str
    port: str
    raw_text: str


class SecurityPolicy(_FrozenModel):
    """Security policy entry of an XML configuration. ``name`` is the diff key."""
    name: str
    from_zone: str
    to_zone: str
    source: str
    destination: str
    action: str
    application: str
    disabled: bool = False


class NatRule(_FrozenModel):
    """NAT rule entry of an XML configuration."""
    name: str
    from_zone: str
    to_zone: str
    source: str
    destination: str
    translated_address: str = "Masquerade"


class InterfaceBinding(_FrozenModel):
    """Physical or sub-interface with its assigned address."""
    name: str
    ip_assignment: str = "unassigned"
    status: str


class ConfigSnapshot(_FrozenModel):
    """Structured projection of one XML configuration."""
    policies: Tuple[SecurityPolicy, ...] = ()
    nat: Tuple[NatRule, ...] = ()
    interfaces: Tuple[InterfaceBinding, ...] = ()

    def policy_names(self) -> Tuple[str, ...]:
        return tuple(policy.name for policy in self.policies)
