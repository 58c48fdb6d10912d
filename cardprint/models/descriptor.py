"""
Card Descriptor Model.

A card descriptor is the loosely structured description of one physical
card as captured by manual entry, a scanned certificate, or a marketplace
listing. It is the input to fingerprinting.

INVARIANTS:
- Every field is optional; None (absent) is distinct from "" (empty)
- The field set is fixed; there is no bag of extra keys
- Descriptors are frozen and never mutated by fingerprinting
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CardDescriptor:
    """
    Raw description of a physical card.

    This is UNTRUSTED caller data. Nothing here is normalized yet.

    Attributes:
        certification_number: Grading authority cert number (e.g., "82104556")
        player_name: Player(s) on the card, possibly several ("Messi / Curry")
        set_name: Set or brand name (e.g., "Topps Chrome")
        year: Year as printed (e.g., "2023")
        card_number: Number within the set (e.g., "280", "RC-12")
        variant: Parallel or variety (e.g., "Silver Prizm")
        grade: Grade description (e.g., "GEM MT 10")
        grading_authority: Grading company (e.g., "PSA", "BGS")
    """

    certification_number: str | None = None
    player_name: str | None = None
    set_name: str | None = None
    year: str | None = None
    card_number: str | None = None
    variant: str | None = None
    grade: str | None = None
    grading_authority: str | None = None

    @property
    def has_certification(self) -> bool:
        """True if a non-empty certification number is present."""
        return bool(self.certification_number)
