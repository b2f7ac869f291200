"""Handle precursor modifications of single nucleotides.

This module parses nucleotide modification strings from the configuration
and applies them to nucleotide formulas. A modification is an ordered run
of additive / subtractive formulas (e.g. loss of water and metaphosphate)
carried by exactly one nucleotide of a precursor adduct.

Key Features
------------
- Parse modification strings ("U:-H2O-HPO3", "C:+NH3-H2O")
- Multiple alternative modifications per nucleotide
- Apply a modification to a formula and build its label suffix

Examples
--------
>>> # Parse modifications
>>> mods = parse_nucleotide_modifications(["U:", "U:-H2O", "U:-H2O-HPO3"])
>>> len(mods["U"])
3

>>> # Apply a modification
>>> ump = parse_formula("C9H13N2O9P")
>>> composition, suffix = apply_modification(ump, mods["U"][1])
>>> suffix
'-H2O'
"""

from typing import Dict, List, Tuple

from pyteomics import mass

from .constants import MODIFICATION_SEPARATOR, MODIFICATION_SIGNS
from .formula import formula_to_string, parse_formula

# (formula, is_subtractive), e.g. (H2O, True) for "-H2O"
SubFormula = Tuple[mass.Composition, bool]

# Ordered sub formulas applied together to one nucleotide
NucleotideModification = List[SubFormula]


# =============================================================================
# Modification Parsing
# =============================================================================

def split_signed_formulas(formula_run: str) -> List[str]:
    """Split a signed formula run into signed tokens.

    Parameters
    ----------
    formula_run : str
        Concatenated formulas, e.g. "-H2O+HPO3"

    Returns
    -------
    List[str]
        Tokens keeping their leading sign

    Examples
    --------
    >>> split_signed_formulas("-H2O+HPO3")
    ['-H2O', '+HPO3']
    >>> split_signed_formulas("H2O-NH3")
    ['H2O', '-NH3']
    >>> split_signed_formulas("")
    []
    """
    tokens = []
    current = ""
    for c in formula_run:
        if c in MODIFICATION_SIGNS:
            if current:
                tokens.append(current)
            current = c
        else:
            current += c
    if current:
        tokens.append(current)

    # A lone sign carries no formula
    return [t for t in tokens if t not in MODIFICATION_SIGNS]


def parse_modification(modification: str) -> Tuple[str, NucleotideModification]:
    """Parse a single "<letter>:<signed-formula-run>" string.

    Parameters
    ----------
    modification : str
        Modification, e.g. "U:-H2O-HPO3". "U:" denotes the unmodified
        nucleotide.

    Returns
    -------
    nucleotide : str
        Modified nucleotide letter
    nucleotide_modification : NucleotideModification
        Ordered (formula, is_subtractive) pairs

    Raises
    ------
    ValueError
        If the letter is not directly followed by ":"

    Examples
    --------
    >>> nucleotide, sub_formulas = parse_modification("U:-H2O+NH3")
    >>> nucleotide, [(formula_to_string(f), s) for f, s in sub_formulas]
    ('U', [('H2O', True), ('H3N', False)])
    """
    modification = modification.strip()
    if len(modification) < 2 or modification[1] != MODIFICATION_SEPARATOR:
        raise ValueError(
            f"Invalid modification '{modification}'. Modifications must specify "
            f"nucleotide and formulas in format 'U:+H2O-H2O'"
        )

    nucleotide = modification[0]

    sub_formulas = []
    for token in split_signed_formulas(modification[2:]):
        is_subtractive = token[0] == "-"
        formula = token[1:] if token[0] in MODIFICATION_SIGNS else token
        sub_formulas.append((parse_formula(formula), is_subtractive))

    return nucleotide, sub_formulas


def parse_nucleotide_modifications(
    modifications: List[str],
) -> Dict[str, List[NucleotideModification]]:
    """Parse all modification strings, grouped by nucleotide.

    Modifications for the same nucleotide accumulate as alternatives
    (each applied on its own, never combined).

    Parameters
    ----------
    modifications : List[str]
        Modifications, e.g. ["U:", "U:-H2O", "G:-NH3"]

    Returns
    -------
    Dict[str, List[NucleotideModification]]
        Nucleotide -> alternative modifications in input order

    Raises
    ------
    ValueError
        On the first malformed modification (no partial result)
    """
    nucleotide_modifications: Dict[str, List[NucleotideModification]] = {}
    for modification in modifications:
        nucleotide, sub_formulas = parse_modification(modification)
        nucleotide_modifications.setdefault(nucleotide, []).append(sub_formulas)

    return nucleotide_modifications


# =============================================================================
# Applying Modifications
# =============================================================================

def modification_suffix(nucleotide_modification: NucleotideModification) -> str:
    """Label suffix of a modification, e.g. "-H2O-HO3P" for "U:-H2O-HPO3" ("" if unmodified)."""
    return "".join(
        ("-" if is_subtractive else "+") + formula_to_string(formula)
        for formula, is_subtractive in nucleotide_modification
    )


def apply_modification(
    composition: mass.Composition,
    nucleotide_modification: NucleotideModification,
) -> Tuple[mass.Composition, str]:
    """Apply a modification to a nucleotide composition.

    Sub formulas are added or subtracted in order.

    Parameters
    ----------
    composition : mass.Composition
        Unmodified nucleotide composition
    nucleotide_modification : NucleotideModification
        Ordered (formula, is_subtractive) pairs

    Returns
    -------
    modified : mass.Composition
        Composition after applying all sub formulas
    suffix : str
        Label suffix, e.g. "-H2O"

    Examples
    --------
    >>> ump = parse_formula("C9H13N2O9P")
    >>> _, sub_formulas = parse_modification("U:-H2O")
    >>> modified, suffix = apply_modification(ump, sub_formulas)
    >>> formula_to_string(modified), suffix
    ('C9H11N2O8P', '-H2O')
    """
    modified = composition
    for formula, is_subtractive in nucleotide_modification:
        if is_subtractive:
            modified = modified - formula
        else:
            modified = modified + formula

    return modified, modification_suffix(nucleotide_modification)
