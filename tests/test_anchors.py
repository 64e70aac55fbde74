"""Tests for sectext.extractor.anchors module."""
import pytest

from sectext.extractor.anchors import (
    is_boundary_candidate,
    is_later_boundary,
    is_start_anchor,
    section_key,
    start_anchor_pattern,
)


class TestIsStartAnchor:
    def test_plain_number(self) -> None:
        assert is_start_anchor("10. Incomes not included in total income", "10")

    def test_alphanumeric_code(self) -> None:
        assert is_start_anchor("115BAC. Tax on income of individuals", "115BAC")

    def test_case_insensitive(self) -> None:
        assert is_start_anchor("115bac. Tax on income", "115BAC")

    def test_leading_whitespace(self) -> None:
        assert is_start_anchor("   9. Levy and Collection", "9")

    def test_requires_period_and_whitespace(self) -> None:
        assert not is_start_anchor("10 Incomes", "10")
        assert not is_start_anchor("10.Incomes", "10")
        assert not is_start_anchor("10.", "10")

    def test_cross_reference_mid_sentence(self) -> None:
        assert not is_start_anchor("as provided in section 10. The", "10")

    def test_longer_number_is_not_a_match(self) -> None:
        assert not is_start_anchor("100. Something else", "10")
        assert not is_start_anchor("10A. Special provision", "10")

    def test_identifier_is_escaped(self) -> None:
        assert is_start_anchor("10(13A). House rent allowance", "10(13A)")
        assert not is_start_anchor("1X3. Other", "1.3")
        assert is_start_anchor("1.3. Sub heading", "1.3")

    def test_pattern_is_cached(self) -> None:
        assert start_anchor_pattern("80C") is start_anchor_pattern("80C")


class TestIsBoundaryCandidate:
    @pytest.mark.parametrize("fragment", [
        "10. Next section text.",
        "115BAC. Tax on income",
        "  11. Indented",
    ])
    def test_section_like(self, fragment: str) -> None:
        assert is_boundary_candidate(fragment)

    @pytest.mark.parametrize("fragment", [
        "(1) In computing the total income",
        "Tax shall be levied...",
        "10 without a period",
        "10a. lowercase suffix",
        "1.2 clause number",
    ])
    def test_not_section_like(self, fragment: str) -> None:
        assert not is_boundary_candidate(fragment)


class TestSectionKey:
    def test_numeric(self) -> None:
        assert section_key("10") == (10, "")

    def test_with_suffix(self) -> None:
        assert section_key("115bac") == (115, "BAC")

    def test_not_numeric(self) -> None:
        assert section_key("10(13A)") is None


class TestIsLaterBoundary:
    def test_next_number(self) -> None:
        assert is_later_boundary("11. Next", "10")

    def test_suffix_after_plain_number(self) -> None:
        assert is_later_boundary("10A. Special provision", "10")

    def test_earlier_number_rejected(self) -> None:
        assert not is_later_boundary("2. Definitions", "10")
        assert not is_later_boundary("10. Same section", "10")

    def test_not_a_candidate(self) -> None:
        assert not is_later_boundary("(2) Sub-section", "10")

    def test_unkeyed_identifier_falls_back(self) -> None:
        assert is_later_boundary("2. Anything", "10(13A)")
