"""
Duplicate Finder.

Groups card descriptors that share a fingerprint.

This module REPORTS collisions only. Whether colliding descriptors are
merged, rejected, or flagged is decided by the storage layer that owns
the records.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from cardprint.models.descriptor import CardDescriptor
from cardprint.models.fingerprint import FingerprintKind
from cardprint.services.fingerprint import build_fingerprint, detect_kind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DuplicateGroup:
    """Two or more descriptors that produced the same fingerprint."""

    fingerprint: str
    kind: FingerprintKind
    descriptors: tuple[CardDescriptor, ...]

    @property
    def count(self) -> int:
        return len(self.descriptors)


def group_by_fingerprint(
    descriptors: Iterable[CardDescriptor],
) -> dict[str, list[CardDescriptor]]:
    """
    Group descriptors by fingerprint.

    Groups and the descriptors within them keep input order.
    """
    groups: dict[str, list[CardDescriptor]] = {}
    for descriptor in descriptors:
        groups.setdefault(build_fingerprint(descriptor), []).append(descriptor)
    return groups


def find_duplicates(descriptors: Iterable[CardDescriptor]) -> list[DuplicateGroup]:
    """
    Find fingerprints shared by more than one descriptor.

    Args:
        descriptors: Descriptors from one or more ingestion sources

    Returns:
        DuplicateGroup per colliding fingerprint, in first-seen order
    """
    groups = group_by_fingerprint(descriptors)

    duplicates = [
        DuplicateGroup(
            fingerprint=fingerprint,
            kind=detect_kind(fingerprint),
            descriptors=tuple(members),
        )
        for fingerprint, members in groups.items()
        if len(members) > 1
    ]

    logger.info(
        "Fingerprinted %d descriptors: %d unique, %d shared by multiple descriptors",
        sum(len(members) for members in groups.values()),
        len(groups),
        len(duplicates),
    )
    return duplicates
