"""
Fingerprint Models.

A fingerprint is either a verbatim certification number (CERTIFIED) or
seven normalized fields joined by FINGERPRINT_DELIMITER (COMPOSITE).
ParsedFingerprint is the diagnostic view recovered from a fingerprint
string; it holds canonical forms, never the original user input.
"""

from dataclasses import dataclass
from enum import Enum

# Normalization never produces this character, so it can't occur inside a field
FINGERPRINT_DELIMITER = "|"

# Fixed positional order of composite fingerprint fields
FINGERPRINT_FIELDS: tuple[str, ...] = (
    "player_name",
    "set_name",
    "year",
    "card_number",
    "variant",
    "grade",
    "grading_authority",
)


class FingerprintKind(str, Enum):
    """Which branch produced a fingerprint."""

    CERTIFIED = "certified"
    COMPOSITE = "composite"


@dataclass(frozen=True, slots=True)
class ParsedFingerprint:
    """
    Structured view of a fingerprint, for debugging only.

    Composite fields are None where the position was empty or missing.
    Values are normalized: casing, accents, name order, and suffixes of the
    original input are not recoverable.
    """

    kind: FingerprintKind
    certification_number: str | None = None
    player_name: str | None = None
    set_name: str | None = None
    year: str | None = None
    card_number: str | None = None
    variant: str | None = None
    grade: str | None = None
    grading_authority: str | None = None

    @property
    def is_certified(self) -> bool:
        return self.kind is FingerprintKind.CERTIFIED

    def fields(self) -> dict[str, str]:
        """Composite fields in fingerprint order, "" for empty positions."""
        return {name: getattr(self, name) or "" for name in FINGERPRINT_FIELDS}

    def to_dict(self) -> dict[str, str | None]:
        """JSON-friendly form, omitting empty values."""
        data: dict[str, str | None] = {"kind": self.kind.value}
        if self.is_certified:
            data["certification_number"] = self.certification_number
            return data
        for name in FINGERPRINT_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data
