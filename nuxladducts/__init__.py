"""NuXLAdducts - Precursor adducts for nucleic acid-protein cross-linking MS.

Enumerates the oligonucleotide adducts (1..N nucleotides, at most one
modified nucleotide) a cross-linked peptide can carry, with their exact
elemental formula, monoisotopic mass and all nucleotide labels explaining
that formula. Adducts are filtered against the cross-linkable nucleotides
and the sequence of the nucleic acid used in the experiment.
"""

__version__ = "0.1.0"

from nuxladducts.adducts import AdductResult, PrecursorAdduct, build_adducts
from nuxladducts.config import AdductGenerationParams, NucleotidePreset
from nuxladducts.filtering import RestrictionViolation, filter_adducts
from nuxladducts.generator import generate_modification_masses
from nuxladducts.report import format_precursor_adducts, log_precursor_adducts

__all__ = [
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
]
