"""Pytest configuration for NuXLAdducts tests.

This module provides common fixtures and configuration for all tests.
NuXLAdducts is pure computation without I/O dependencies.
"""

import pytest


@pytest.fixture
def au_nucleotides():
    """AMP and UMP monophosphate formulas."""
    return ["A=C10H14N5O7P", "U=C9H13N2O9P"]


@pytest.fixture
def au_mappings():
    """Identity mappings for A and U."""
    return ["A->A", "U->U"]


@pytest.fixture
def nucleotide_table(au_nucleotides):
    """Parsed base formula table for A and U."""
    from nuxladducts.nucleotides import parse_target_nucleotides
    return parse_target_nucleotides(au_nucleotides)


@pytest.fixture
def known_formulas():
    """Canonical formulas of small A/U adducts.

    Chains lose one H2O per phosphodiester bond.
    """
    return {
        "A": "C10H14N5O7P",
        "U": "C9H13N2O9P",
        "U-H2O": "C9H11N2O8P",
        "AA": "C20H26N10O13P2",
        "AU": "C19H25N7O15P2",
        "UU": "C18H24N4O17P2",
        "AU-H2O": "C19H23N7O14P2",
        "UU-H2O": "C18H22N4O16P2",
    }


@pytest.fixture
def known_masses():
    """Monoisotopic masses (Da) of the nucleotide monophosphates."""
    return {
        "A": 347.063084,
        "U": 324.035867,
        "H2O": 18.010565,
    }


@pytest.fixture
def au_params(au_nucleotides, au_mappings):
    """Parameters: A and U both cross-linkable, one nucleotide group."""
    from nuxladducts.config import AdductGenerationParams
    return AdductGenerationParams(
        target_nucleotides=au_nucleotides,
        nt_groups=["AU"],
        can_cross_link={"A", "U"},
        mappings=au_mappings,
        modifications=[],
        sequence_restriction="",
        cysteine_adduct=False,
        max_length=1,
    )
