"""Unit tests for formula arithmetic and the nucleotide table."""

import pytest

from nuxladducts.formula import (
    WATER,
    add_formulas,
    formula_to_string,
    monoisotopic_mass,
    neutralize,
    parse_formula,
    subtract_formulas,
    sum_formulas,
)
from nuxladducts.nucleotides import (
    Nucleotide,
    parse_mappings,
    parse_target_nucleotides,
    source_nucleotides,
)


class TestFormulaToString:
    """Test canonical formula strings."""

    def test_hill_order_with_carbon(self):
        """Carbon and hydrogen first, then alphabetical."""
        assert formula_to_string(parse_formula("PC9N2O9H13")) == "C9H13N2O9P"

    def test_alphabetical_without_carbon(self):
        """Without carbon all elements are alphabetical."""
        assert formula_to_string(parse_formula("NH3")) == "H3N"
        assert formula_to_string(parse_formula("HPO3")) == "HO3P"

    def test_count_of_one_omitted(self):
        """Counts of one are not written."""
        assert formula_to_string(parse_formula("H2O")) == "H2O"

    def test_repeated_elements_summed(self):
        """Repeated element symbols are merged."""
        assert formula_to_string(parse_formula("HOH")) == "H2O"

    def test_zero_counts_dropped(self):
        """Compositions cancelling out give an empty string."""
        assert formula_to_string(subtract_formulas(WATER, WATER)) == ""

    def test_equal_compositions_equal_strings(self):
        """Addition order does not change the string."""
        first = add_formulas(parse_formula("C10H14N5O7P"), parse_formula("C9H13N2O9P"))
        second = add_formulas(parse_formula("C9H13N2O9P"), parse_formula("C10H14N5O7P"))
        assert formula_to_string(first) == formula_to_string(second)


class TestFormulaArithmetic:
    """Test addition, subtraction and masses."""

    def test_condensation(self, known_formulas):
        """A + U - H2O gives the dinucleotide formula."""
        amp = parse_formula(known_formulas["A"])
        ump = parse_formula(known_formulas["U"])
        dinucleotide = subtract_formulas(add_formulas(amp, ump), WATER)
        assert formula_to_string(dinucleotide) == known_formulas["AU"]

    def test_sum_formulas(self):
        """Test summing a list of formulas."""
        total = sum_formulas([WATER, WATER, parse_formula("CO2")])
        assert formula_to_string(total) == "CH4O4"

    def test_water_mass(self, known_masses):
        """Test monoisotopic mass of water."""
        assert abs(monoisotopic_mass(WATER) - known_masses["H2O"]) < 1e-5

    def test_nucleotide_mass(self, known_masses, known_formulas):
        """Test monoisotopic mass of UMP."""
        mass = monoisotopic_mass(parse_formula(known_formulas["U"]))
        assert abs(mass - known_masses["U"]) < 1e-5

    def test_mass_is_additive(self, known_formulas):
        """Mass of a condensation product equals the mass arithmetic."""
        amp = parse_formula(known_formulas["A"])
        ump = parse_formula(known_formulas["U"])
        combined = subtract_formulas(add_formulas(amp, ump), WATER)
        expected = monoisotopic_mass(amp) + monoisotopic_mass(ump) - monoisotopic_mass(WATER)
        assert abs(monoisotopic_mass(combined) - expected) < 1e-6

    def test_neutralize_keeps_elements(self):
        """Neutral compositions pass unchanged."""
        neutral = neutralize(parse_formula("C2H6O"))
        assert formula_to_string(neutral) == "C2H6O"


class TestNucleotideTable:
    """Test parsing of nucleotide formulas."""

    def test_parse_sorted_by_code(self):
        """Table is ordered by nucleotide letter."""
        table = parse_target_nucleotides(["U=C9H13N2O9P", "A=C10H14N5O7P"])
        assert list(table) == ["A", "U"]

    def test_nucleotide_fields(self, known_masses):
        """Test formula and mass of a parsed nucleotide."""
        table = parse_target_nucleotides(["U=C9H13N2O9P"])
        nucleotide = table["U"]
        assert isinstance(nucleotide, Nucleotide)
        assert nucleotide.code == "U"
        assert nucleotide.formula == "C9H13N2O9P"
        assert abs(nucleotide.mono_mass - known_masses["U"]) < 1e-5

    def test_lowercase_code_kept(self):
        """Lowercase letters are distinct nucleotides (e.g. sugars)."""
        table = parse_target_nucleotides(["d=C5H9O7P", "D=C5H9O7P"])
        assert set(table) == {"d", "D"}

    def test_missing_separator(self):
        """Assignment without '=' is rejected."""
        with pytest.raises(ValueError, match="<letter>=<formula>"):
            parse_target_nucleotides(["UC9H13N2O9P"])

    def test_empty_code(self):
        """Assignment without letter is rejected."""
        with pytest.raises(ValueError):
            parse_target_nucleotides(["=C9H13N2O9P"])


class TestMappings:
    """Test parsing of source->target mappings."""

    def test_one_to_many(self):
        """A source letter may have several targets."""
        mappings = parse_mappings(["A->A", "A->G", "U->U"])
        assert mappings == {"A": ["A", "G"], "U": ["U"]}

    def test_repeated_pair_ignored(self):
        """Test that a repeated pair is stored once."""
        assert parse_mappings(["A->G", "A->G"]) == {"A": ["G"]}

    def test_first_character_used(self):
        """Only the first character of each side counts."""
        assert parse_mappings(["Ax->Gy"]) == {"A": ["G"]}

    def test_invalid_mapping(self):
        """Pairs without '->' or target are rejected."""
        with pytest.raises(ValueError, match="<source>-><target>"):
            parse_mappings(["A=G"])
        with pytest.raises(ValueError):
            parse_mappings(["A->"])

    def test_source_nucleotides_distinct(self):
        """Sources are distinct, in input order."""
        assert source_nucleotides(["U->U", "A->A", "A->G"]) == ["U", "A"]

    def test_source_nucleotides_empty(self):
        """Test no mappings gives no sources."""
        assert source_nucleotides([]) == []
