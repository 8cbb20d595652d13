"""
Security policy comparison between two configuration snapshots.

Policies are matched by name. The output holds one entry per distinct policy
name, ordered by first occurrence across the previous snapshot and then the
current one, so comparing the same pair twice gives identical results.
"""
import enum
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sentinel.parsers.rule_models import ConfigSnapshot, SecurityPolicy

logger = logging.getLogger(__name__)


class DiffClassification(str, enum.Enum):
    """How a policy changed between two snapshots."""
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"


class ChangedField(str, enum.Enum):
    """Field groups compared between two versions of a policy."""
    ACTION = "action"
    ZONES = "zones"
    ADDRESSES = "addresses"
    APPLICATION = "application"
    STATUS = "status"


class DiffEntry(BaseModel):
    """
    Comparison result for one policy name.

    For a removed policy ``current`` holds its last known state and
    ``previous`` is empty.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str
    classification: DiffClassification
    current: SecurityPolicy
    previous: Optional[SecurityPolicy] = None
    changed_fields: Tuple[ChangedField, ...] = ()


def changed_fields(previous: SecurityPolicy, current: SecurityPolicy) -> Tuple[ChangedField, ...]:
    """Return the differing field groups in canonical order."""
    changes = []
    if previous.action != current.action:
        changes.append(ChangedField.ACTION)
    if previous.from_zone != current.from_zone or previous.to_zone != current.to_zone:
        changes.append(ChangedField.ZONES)
    if previous.source != current.source or previous.destination != current.destination:
        changes.append(ChangedField.ADDRESSES)
    if previous.application != current.application:
        changes.append(ChangedField.APPLICATION)
    if previous.disabled != current.disabled:
        changes.append(ChangedField.STATUS)
    return tuple(changes)


def _index_by_name(policies: Iterable[SecurityPolicy]) -> Dict[str, SecurityPolicy]:
    # A repeated name keeps its first definition
    index: Dict[str, SecurityPolicy] = {}
    for policy in policies:
        index.setdefault(policy.name, policy)
    return index


def diff_snapshots(previous: ConfigSnapshot, current: ConfigSnapshot) -> List[DiffEntry]:
    """
    Compare the security policies of two snapshots.

    Args:
        previous: Older snapshot
        current: Newer snapshot

    Returns:
        One DiffEntry per distinct policy name

    Raises:
        TypeError: If either argument is not a ConfigSnapshot
    """
    for argument, value in (("previous", previous), ("current", current)):
        if not isinstance(value, ConfigSnapshot):
            raise TypeError(f"{argument} must be a ConfigSnapshot, got {type(value).__name__}")

    previous_by_name = _index_by_name(previous.policies)
    current_by_name = _index_by_name(current.policies)

    # dict preserves first-occurrence order and drops duplicates
    names = dict.fromkeys(list(previous_by_name) + list(current_by_name))

    entries = []
    for name in names:
        old = previous_by_name.get(name)
        new = current_by_name.get(name)
        if old is None:
            entries.append(DiffEntry(name=name, classification=DiffClassification.ADDED, current=new))
        elif new is None:
            entries.append(DiffEntry(name=name, classification=DiffClassification.REMOVED, current=old))
        else:
            changes = changed_fields(old, new)
            entries.append(
                DiffEntry(
                    name=name,
                    classification=DiffClassification.MODIFIED if changes else DiffClassification.UNCHANGED,
                    current=new,
                    previous=old,
                    changed_fields=changes,
                )
            )

    logger.debug(f"Compared {len(previous_by_name)} -> {len(current_by_name)} policies: {summarize_diff(entries)}")
    return entries


def summarize_diff(entries: Iterable[DiffEntry]) -> Dict[str, int]:
    """Count diff entries per classification."""
    summary = {classification.value: 0 for classification in DiffClassification}
    for entry in entries:
        summary[entry.classification.value] += 1
    return summary
