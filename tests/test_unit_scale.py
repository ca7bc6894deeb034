"""Tests for units-declaration detection."""

from balance_sheet_pro.models.document import UnitScale
from balance_sheet_pro.services.unit_scale import detect_unit_scale


class TestUnitScaleDetection:

    def test_parenthesized_rupee_crores(self):
        assert detect_unit_scale("Balance Sheet as at 31 March 2023 (Rs. in Crores)") == UnitScale.CRORES

    def test_rupee_glyph_lakhs(self):
        assert detect_unit_scale("Schedule 9 - Advances (₹ in lakhs)") == UnitScale.LAKHS

    def test_lacs_spelling(self):
        assert detect_unit_scale("All figures Rs in Lacs") == UnitScale.LAKHS

    def test_backtick_rupee_glyph(self):
        assert detect_unit_scale("(` in Lakhs)") == UnitScale.LAKHS

    def test_symbol_after_in(self):
        assert detect_unit_scale("Amount in ₹ crore") == UnitScale.CRORES

    def test_bare_symbol_in_parentheses(self):
        assert detect_unit_scale("Particulars (₹ crore) As at 31.03.2023") == UnitScale.CRORES

    def test_thousands(self):
        assert detect_unit_scale("(Amounts in thousands)") == UnitScale.THOUSANDS

    def test_thousands_apostrophe_form(self):
        assert detect_unit_scale("Particulars (₹ '000)") == UnitScale.THOUSANDS

    def test_crores_win_over_lakhs_regardless_of_position(self):
        text = "Notes (Rs. in Lakhs)\nStandalone Balance Sheet (Rs. in Crores)"
        assert detect_unit_scale(text) == UnitScale.CRORES

    def test_lakhs_win_over_thousands(self):
        text = "(Rs. in thousands) ... (Rs. in lakhs)"
        assert detect_unit_scale(text) == UnitScale.LAKHS

    def test_defaults_to_absolute(self):
        assert detect_unit_scale("Bank Charges: 5,000") == UnitScale.ABSOLUTE

    def test_empty_text(self):
        assert detect_unit_scale("") == UnitScale.ABSOLUTE

    def test_declaration_past_prefix_is_ignored(self):
        text = "x" * 12_000 + " (Rs. in Crores)"
        assert detect_unit_scale(text, prefix_chars=10_000) == UnitScale.ABSOLUTE
        assert detect_unit_scale(text, prefix_chars=20_000) == UnitScale.CRORES

    def test_word_ending_in_in_does_not_count(self):
        assert detect_unit_scale("a margin crores wide") == UnitScale.ABSOLUTE
