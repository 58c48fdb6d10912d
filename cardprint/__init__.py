"""
cardprint: card identity fingerprinting.

Recognizes when two descriptions of a sports card refer to the same
physical item, regardless of spelling, name order, punctuation, or
accents.
"""

from cardprint.models import CardDescriptor, FingerprintKind, ParsedFingerprint
from cardprint.services import (
    build_fingerprint,
    classify_descriptor,
    detect_kind,
    find_duplicates,
    normalize_field,
    normalize_player_name,
    parse_fingerprint,
)

__all__ = [
    "CardDescriptor",
    "FingerprintKind",
    "ParsedFingerprint",
    "build_fingerprint",
    "classify_descriptor",
    "detect_kind",
    "find_duplicates",
    "normalize_field",
    "normalize_player_name",
    "parse_fingerprint",
]
