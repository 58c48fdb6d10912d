"""
cardprint services.

Normalization, fingerprint building and parsing, and duplicate reporting.
"""

from cardprint.services.duplicate_finder import (
    DuplicateGroup,
    find_duplicates,
    group_by_fingerprint,
)
from cardprint.services.fingerprint import (
    build_fingerprint,
    classify_descriptor,
    composite_fields,
    detect_kind,
    parse_fingerprint,
)
from cardprint.services.normalizer import (
    FIELD_PIPELINE,
    PLAYER_NAME_PIPELINE,
    apply_pipeline,
    normalize_field,
    normalize_player_name,
)

__all__ = [
    # Normalizer
    "FIELD_PIPELINE",
    "PLAYER_NAME_PIPELINE",
    "apply_pipeline",
    "normalize_field",
    "normalize_player_name",
    # Fingerprint builder / parser
    "build_fingerprint",
    "classify_descriptor",
    "composite_fields",
    "detect_kind",
    "parse_fingerprint",
    # Duplicate reporting
    "DuplicateGroup",
    "find_duplicates",
    "group_by_fingerprint",
]
