"""Chemical constants and nucleotide tables for precursor adduct generation.

This module provides the elemental formulas, default nucleotide tables and
cross-linking presets used throughout NuXLAdducts. Formulas are given as
plain strings and converted to compositions by ``nuxladducts.formula``.

Key Features
------------
- Water formula for condensation (chain growth)
- DTT/cysteine reagent adduct (C4H8S2O2, 152 Da)
- Monophosphate formulas of the RNA and DNA nucleotides
- Default modification lists for UV cross-linking experiments

Sources
-------
- Nucleotide monophosphate formulas: https://pubchem.ncbi.nlm.nih.gov
"""

# =============================================================================
# Formulas
# =============================================================================

# Lost once per phosphodiester bond formed during chain growth
WATER_FORMULA = "H2O"

# DTT (cysteine) reagent adduct, unrelated to nucleotide chemistry
# Inserted after filtering when enabled
CYSTEINE_ADDUCT_FORMULA = "C4H8S2O2"
CYSTEINE_ADDUCT_LABEL = "C4H8S2O2"

# Separators of the configuration strings
NUCLEOTIDE_FORMULA_SEPARATOR = "="
MAPPING_SEPARATOR = "->"
MODIFICATION_SEPARATOR = ":"

# Signs opening an additive / subtractive modification token
MODIFICATION_SIGNS = "+-"

# Target sequences longer than this are truncated in log output
MAX_LOGGED_SEQUENCE_LENGTH = 60

# =============================================================================
# Nucleotide Monophosphates
# =============================================================================

# Ribonucleotide monophosphates (AMP, CMP, GMP, UMP)
RNA_NUCLEOTIDES = [
    "A=C10H14N5O7P",
    "C=C9H14N3O8P",
    "G=C10H14N5O8P",
    "U=C9H13N2O9P",
]

# Deoxyribonucleotide monophosphates (dAMP, dCMP, dGMP, dTMP)
DNA_NUCLEOTIDES = [
    "A=C10H14N5O6P",
    "C=C9H14N3O7P",
    "G=C10H14N5O7P",
    "T=C10H15N2O8P",
]

# Identity mappings: restriction sequence letters are the target letters
RNA_MAPPINGS = ["A->A", "C->C", "G->G", "U->U"]
DNA_MAPPINGS = ["A->A", "C->C", "G->G", "T->T"]

# =============================================================================
# Precursor Modifications
# =============================================================================

# Losses observed for UV cross-linked uracil
RNA_UV_MODIFICATIONS = [
    "U:",
    "U:-H2O",
    "U:-H2O-HPO3",
    "U:-HPO3",
]

# Losses observed for UV cross-linked thymine
DNA_UV_MODIFICATIONS = [
    "T:",
    "T:-H2O",
    "T:-H2O-HPO3",
    "T:-HPO3",
]

# Default maximum number of nucleotides in a precursor adduct
DEFAULT_MAX_LENGTH = 2
