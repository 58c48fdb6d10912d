"""
Field Normalization for Card Fingerprints.

Turns free-text card fields into canonical comparable strings.

Two entry points:

    normalize_field(value)        generic text field (set, year, grade, ...)
    normalize_player_name(value)  field listing one or more co-equal players

Player names run through an ordered pipeline of small steps:

    lowercase -> strip_accents -> replace_separators -> remove_connectives
        -> strip_suffixes -> collapse_whitespace -> sort_tokens

Sorting tokens makes the result independent of the order in which the
names were entered:

    "Lionel Messi / Steph Curry"   -> "curry lionel messi steph"
    "Messi/Curry"                  -> "curry messi"
    "Curry and Messi"              -> "curry messi"

INVARIANTS:
- Total: None, "", and any text yield a string, never an exception
- Idempotent: normalizing a normalized value returns it unchanged
- Output never contains the fingerprint delimiter "|" unless the input did
"""

import re
import unicodedata
from collections.abc import Callable, Iterable

# Combining Diacritical Marks block, left behind by NFD decomposition
_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")

# Runs of separators between co-equal names
_SEPARATORS = re.compile(r"[/&,]+")

# Connective word between names, whole word only ("Andrew" is untouched)
_CONNECTIVES = re.compile(r"\band\b", re.IGNORECASE)

# Generational suffixes as standalone tokens with optional trailing period.
# Hyphens and apostrophes do not split a token, so "Smith-Jr" is kept whole.
_NAME_SUFFIXES = re.compile(r"(?<!\S)(?:jr|sr|iii|ii|iv|v)\.?(?!\S)", re.IGNORECASE)

NormalizationStep = Callable[[str], str]


# =============================================================================
# PIPELINE STEPS
# =============================================================================


def lowercase(text: str) -> str:
    return text.lower()


def strip_accents(text: str) -> str:
    """Decompose to NFD and drop combining marks: "José" -> "Jose"."""
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def replace_separators(text: str) -> str:
    """Replace each run of "/", "&", "," with a single space."""
    return _SEPARATORS.sub(" ", text)


def remove_connectives(text: str) -> str:
    return _CONNECTIVES.sub(" ", text)


def strip_suffixes(text: str) -> str:
    """Remove Jr/Sr/II/III/IV/V tokens, with or without a trailing period."""
    return _NAME_SUFFIXES.sub(" ", text)


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim."""
    return " ".join(text.split())


def sort_tokens(text: str) -> str:
    """Split on whitespace, drop empty tokens, sort, rejoin."""
    return " ".join(sorted(token for token in text.split() if token))


FIELD_PIPELINE: tuple[NormalizationStep, ...] = (
    lowercase,
    strip_accents,
    collapse_whitespace,
)

PLAYER_NAME_PIPELINE: tuple[NormalizationStep, ...] = (
    lowercase,
    strip_accents,
    replace_separators,
    remove_connectives,
    strip_suffixes,
    collapse_whitespace,
    sort_tokens,
)


def apply_pipeline(value: str | None, steps: Iterable[NormalizationStep]) -> str:
    """
    Run a value through normalization steps in order.

    Args:
        value: Raw text, or None for an absent field
        steps: Ordered normalization steps

    Returns:
        Normalized text; "" for None or empty input
    """
    if not value:
        return ""

    text = value
    for step in steps:
        text = step(text)
    return text


# =============================================================================
# PUBLIC API
# =============================================================================


def normalize_field(value: str | None) -> str:
    """
    Normalize a generic text field.

    Lowercases, strips accents, collapses whitespace, and trims.

    Args:
        value: Raw field text, or None

    Returns:
        Normalized field, "" for absent or empty input
    """
    return apply_pipeline(value, FIELD_PIPELINE)


def normalize_player_name(value: str | None) -> str:
    """
    Normalize a player name field that may list several players.

    Separators ("/", "&", ","), the word "and", and generational suffixes
    are removed, then the remaining tokens are sorted so entry order does
    not matter. Hyphens and apostrophes are kept.

    Args:
        value: Raw player name text, or None

    Returns:
        Space-joined sorted name tokens, "" if nothing remains
    """
    return apply_pipeline(value, PLAYER_NAME_PIPELINE)
