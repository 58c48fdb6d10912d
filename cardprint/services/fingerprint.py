"""
Card Fingerprint Builder and Parser.

Generates the identifier used to recognize the same physical card across
manual entry, scanned certificates, and marketplace listings.

Format:
    CERTIFIED   "82104556"                          (cert number, verbatim)
    COMPOSITE   "player|set|year|number|variant|grade|grader"

INVARIANTS:
1. A non-empty certification number always wins over every other field
2. Certification numbers are never normalized (they must round-trip to the
   issuing authority exactly)
3. Composite fingerprints always have seven positions; an absent field is
   an empty position, never a shifted one
4. Every function here is total and pure

parse_fingerprint() is a DEBUGGING AID. It recovers canonical values, not
what the user typed.
"""

import logging
import re

from cardprint.config import (
    CERT_NUMBER_MAX_DIGITS,
    CERT_NUMBER_MIN_DIGITS,
    FINGERPRINT_FIELD_COUNT,
)
from cardprint.models.descriptor import CardDescriptor
from cardprint.models.fingerprint import (
    FINGERPRINT_DELIMITER,
    FINGERPRINT_FIELDS,
    FingerprintKind,
    ParsedFingerprint,
)
from cardprint.services.normalizer import normalize_field, normalize_player_name

logger = logging.getLogger(__name__)

# ASCII digits only; str.isdigit() would also accept superscripts and other scripts
CERT_NUMBER_PATTERN = re.compile(
    rf"[0-9]{{{CERT_NUMBER_MIN_DIGITS},{CERT_NUMBER_MAX_DIGITS}}}"
)


# =============================================================================
# BUILD
# =============================================================================


def classify_descriptor(descriptor: CardDescriptor) -> FingerprintKind:
    """Return CERTIFIED if the descriptor carries a non-empty cert number."""
    if descriptor.has_certification:
        return FingerprintKind.CERTIFIED
    return FingerprintKind.COMPOSITE


def composite_fields(descriptor: CardDescriptor) -> tuple[str, ...]:
    """
    Normalize the seven composite fields of a descriptor, in fingerprint order.

    The player name goes through player-name normalization; every other
    field through generic normalization.
    """
    return (
        normalize_player_name(descriptor.player_name),
        normalize_field(descriptor.set_name),
        normalize_field(descriptor.year),
        normalize_field(descriptor.card_number),
        normalize_field(descriptor.variant),
        normalize_field(descriptor.grade),
        normalize_field(descriptor.grading_authority),
    )


def build_fingerprint(descriptor: CardDescriptor) -> str:
    """
    Build the fingerprint for a card descriptor.

    Args:
        descriptor: Card description from any ingestion source

    Returns:
        The certification number verbatim if present, otherwise the seven
        normalized fields joined by "|". A descriptor with no fields at all
        yields "||||||".
    """
    cert_number = descriptor.certification_number
    if cert_number:
        # Already unique and immutable; normalizing could corrupt lookups
        if not CERT_NUMBER_PATTERN.fullmatch(cert_number):
            logger.warning(
                "Cert number %r is not %d-%d digits; detect_kind() will report it as composite",
                cert_number,
                CERT_NUMBER_MIN_DIGITS,
                CERT_NUMBER_MAX_DIGITS,
            )
        return cert_number

    fingerprint = FINGERPRINT_DELIMITER.join(composite_fields(descriptor))
    logger.debug("Built composite fingerprint: %s", fingerprint)
    return fingerprint


# =============================================================================
# DETECT / PARSE
# =============================================================================


def detect_kind(fingerprint: str) -> FingerprintKind:
    """
    Classify a fingerprint string by its shape.

    A run of 8 or 9 decimal digits and nothing else is CERTIFIED; anything
    else is COMPOSITE. This re-derives the kind from the string alone, so a
    cert number of any other length is reported as COMPOSITE.
    """
    if CERT_NUMBER_PATTERN.fullmatch(fingerprint):
        return FingerprintKind.CERTIFIED
    return FingerprintKind.COMPOSITE


def parse_fingerprint(fingerprint: str) -> ParsedFingerprint:
    """
    Recover structured fields from a fingerprint, for diagnostics.

    Composite fingerprints are split on "|" into at most seven parts.
    Fewer parts are tolerated (missing trailing fields are empty); any
    extra delimiters stay inside the last field.

    Args:
        fingerprint: A fingerprint produced by build_fingerprint()

    Returns:
        ParsedFingerprint with either the cert number or the composite
        fields. Empty positions are None.
    """
    if detect_kind(fingerprint) is FingerprintKind.CERTIFIED:
        return ParsedFingerprint(
            kind=FingerprintKind.CERTIFIED,
            certification_number=fingerprint,
        )

    parts = fingerprint.split(FINGERPRINT_DELIMITER, FINGERPRINT_FIELD_COUNT - 1)
    if len(parts) < FINGERPRINT_FIELD_COUNT:
        logger.debug(
            "Fingerprint has %d of %d fields, padding: %r",
            len(parts),
            FINGERPRINT_FIELD_COUNT,
            fingerprint,
        )
        parts.extend([""] * (FINGERPRINT_FIELD_COUNT - len(parts)))

    values = {name: part or None for name, part in zip(FINGERPRINT_FIELDS, parts, strict=True)}
    return ParsedFingerprint(kind=FingerprintKind.COMPOSITE, **values)
