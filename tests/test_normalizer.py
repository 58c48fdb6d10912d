"""Tests for card field normalization."""

import pytest

from cardprint.services.normalizer import (
    FIELD_PIPELINE,
    PLAYER_NAME_PIPELINE,
    apply_pipeline,
    collapse_whitespace,
    lowercase,
    normalize_field,
    normalize_player_name,
    remove_connectives,
    replace_separators,
    sort_tokens,
    strip_accents,
    strip_suffixes,
)

SAMPLE_TEXT = [
    "",
    "   ",
    "Topps Chrome",
    "  PANINI   Prizm  ",
    "José Ramírez",
    "Ñandú\tÇelik\n",
    "GEM MT 10",
    "RC-12",
    "Silver / Gold & Red, Blue",
    "Ken Griffey Jr.",
    "O'Neal and Bryant",
    "ß ẞ ǅ",
]


# =============================================================================
# PIPELINE STEPS
# =============================================================================


class TestPipelineSteps:
    """Each pipeline step is testable on its own."""

    def test_lowercase(self) -> None:
        assert lowercase("LeBron JAMES") == "lebron james"

    def test_strip_accents(self) -> None:
        assert strip_accents("josé ramírez") == "jose ramirez"
        assert strip_accents("ñandú") == "nandu"

    def test_strip_accents_keeps_plain_text(self) -> None:
        assert strip_accents("mike trout") == "mike trout"

    def test_replace_separators(self) -> None:
        assert replace_separators("messi/curry") == "messi curry"
        assert replace_separators("messi & curry") == "messi   curry"
        assert replace_separators("a,,//&&b") == "a b"

    def test_remove_connectives(self) -> None:
        assert remove_connectives("messi and curry").split() == ["messi", "curry"]

    def test_remove_connectives_whole_word_only(self) -> None:
        """Names containing "and" are untouched."""
        assert remove_connectives("andrew anderson brandon") == "andrew anderson brandon"

    def test_strip_suffixes(self) -> None:
        assert strip_suffixes("griffey jr.").split() == ["griffey"]
        assert strip_suffixes("ripken sr").split() == ["ripken"]
        assert strip_suffixes("smith iii").split() == ["smith"]

    def test_strip_suffixes_whole_word_only(self) -> None:
        """Tokens that merely contain suffix letters survive."""
        assert strip_suffixes("junior victor ivan").split() == ["junior", "victor", "ivan"]

    def test_strip_suffixes_keeps_hyphenated_tokens(self) -> None:
        """A suffix joined by a hyphen or apostrophe is part of the name."""
        assert strip_suffixes("smith-jr") == "smith-jr"
        assert strip_suffixes("jean-v smith") == "jean-v smith"
        assert strip_suffixes("o'v") == "o'v"

    def test_collapse_whitespace(self) -> None:
        assert collapse_whitespace("  a \t b\n\nc  ") == "a b c"

    def test_sort_tokens(self) -> None:
        assert sort_tokens("messi curry  ") == "curry messi"

    def test_pipeline_order(self) -> None:
        """Player-name pipeline runs its steps in the documented order."""
        assert PLAYER_NAME_PIPELINE == (
            lowercase,
            strip_accents,
            replace_separators,
            remove_connectives,
            strip_suffixes,
            collapse_whitespace,
            sort_tokens,
        )
        assert FIELD_PIPELINE == (lowercase, strip_accents, collapse_whitespace)

    def test_apply_pipeline_absent_value(self) -> None:
        assert apply_pipeline(None, PLAYER_NAME_PIPELINE) == ""
        assert apply_pipeline("", FIELD_PIPELINE) == ""


# =============================================================================
# GENERIC FIELDS
# =============================================================================


class TestNormalizeField:
    """Tests for normalize_field()."""

    def test_lowercases_and_trims(self) -> None:
        assert normalize_field("  Topps Chrome ") == "topps chrome"

    def test_collapses_whitespace(self) -> None:
        assert normalize_field("Panini \t  Prizm\n") == "panini prizm"

    def test_absent_and_empty(self) -> None:
        """Absence and emptiness are values, not errors."""
        assert normalize_field(None) == ""
        assert normalize_field("") == ""
        assert normalize_field("   ") == ""

    def test_accent_invariance(self) -> None:
        assert normalize_field("José") == normalize_field("Jose")
        assert normalize_field("José") == "jose"

    def test_precomposed_and_decomposed_match(self) -> None:
        """Precomposed é and e + combining acute normalize the same."""
        assert normalize_field("Jos\u00e9") == normalize_field("Jose\u0301")

    def test_keeps_separators(self) -> None:
        """Only player names treat separators specially."""
        assert normalize_field("Silver / Gold") == "silver / gold"

    def test_keeps_suffix_words(self) -> None:
        assert normalize_field("Series II") == "series ii"

    @pytest.mark.parametrize("text", SAMPLE_TEXT)
    def test_idempotent(self, text: str) -> None:
        once = normalize_field(text)
        assert normalize_field(once) == once


# =============================================================================
# PLAYER NAMES
# =============================================================================


class TestNormalizePlayerName:
    """Tests for normalize_player_name()."""

    def test_single_player(self) -> None:
        assert normalize_player_name("Mike Trout") == "mike trout"

    def test_sorts_tokens(self) -> None:
        assert normalize_player_name("Messi/Curry") == "curry messi"

    def test_multi_player_full_names(self) -> None:
        assert normalize_player_name("Lionel Messi / Steph Curry") == "curry lionel messi steph"

    def test_order_invariance(self) -> None:
        """Co-equal names compare equal regardless of entry order."""
        a = normalize_player_name("A and B")
        assert a == normalize_player_name("B / A")
        assert a == normalize_player_name("A, B")
        assert a == normalize_player_name("B & A")
        assert a == "a b"

    def test_connective_case_insensitive(self) -> None:
        assert normalize_player_name("Messi AND Curry") == "curry messi"
        assert normalize_player_name("Messi And Curry") == "curry messi"

    def test_suffix_stripping(self) -> None:
        assert normalize_player_name("LeBron James Jr.") == normalize_player_name("LeBron James")

    def test_suffix_punctuation_and_case_variants(self) -> None:
        expected = normalize_player_name("Ken Griffey")
        for name in ("Ken Griffey Jr.", "Ken Griffey jr", "Ken Griffey JR", "Ken Griffey Jr"):
            assert normalize_player_name(name) == expected

    def test_roman_numeral_suffixes(self) -> None:
        for suffix in ("II", "III", "IV", "V", "Sr."):
            assert normalize_player_name(f"Cal Ripken {suffix}") == "cal ripken"

    def test_accent_invariance(self) -> None:
        assert normalize_player_name("José Ramírez") == normalize_player_name("Jose Ramirez")

    def test_keeps_hyphens_and_apostrophes(self) -> None:
        assert normalize_player_name("Shaquille O'Neal") == "o'neal shaquille"
        assert normalize_player_name("Smith-Njigba") == "smith-njigba"

    def test_hyphenated_suffix_leaves_no_dangling_hyphen(self) -> None:
        assert normalize_player_name("Jean-V Smith") == "jean-v smith"
        assert normalize_player_name("Smith-Jr") == "smith-jr"

    def test_repeated_separators_leave_no_empty_tokens(self) -> None:
        assert normalize_player_name("Messi ///  &&, Curry") == "curry messi"

    def test_only_separators_and_suffixes(self) -> None:
        """Input that normalizes away yields "" rather than an error."""
        assert normalize_player_name("/ & ,") == ""
        assert normalize_player_name("Jr. and Sr.") == ""
        assert normalize_player_name("and") == ""

    def test_absent_and_empty(self) -> None:
        assert normalize_player_name(None) == ""
        assert normalize_player_name("") == ""
        assert normalize_player_name("   ") == ""

    def test_does_not_strip_name_containing_and(self) -> None:
        assert normalize_player_name("Andrew Benintendi") == "andrew benintendi"

    @pytest.mark.parametrize("text", SAMPLE_TEXT)
    def test_idempotent(self, text: str) -> None:
        once = normalize_player_name(text)
        assert normalize_player_name(once) == once
