"""Unit tests for the package interface."""

import nuxladducts
from nuxladducts import constants


class TestPublicInterface:
    """Test the names exported by the package."""

    def test_exports_resolve(self):
        """Every exported name is defined."""
        for name in nuxladducts.__all__:
            assert hasattr(nuxladducts, name), name

    def test_exports(self):
        """Only the generation pipeline and its report are exported."""
        assert set(nuxladducts.__all__) == {
            "AdductResult",
            "PrecursorAdduct",
            "build_adducts",
            "AdductGenerationParams",
            "NucleotidePreset",
            "RestrictionViolation",
            "filter_adducts",
            "generate_modification_masses",
            "format_precursor_adducts",
            "log_precursor_adducts",
        }

    def test_constants_are_formulas(self):
        """Masses come from compositions, not from stored mass constants."""
        assert constants.WATER_FORMULA == "H2O"
        assert not hasattr(constants, "H2O_MASS")
        assert not hasattr(constants, "PROTON_MASS")
