"""Nucleotide building blocks and source-to-target mappings.

Parses the tokenized configuration lists into the base formula table and
the substitution mapping used by the sequence expander.

Nucleotide letters are case sensitive: lowercase letters mark residues
(e.g. a sugar) that must be the cross-link site.

Examples
--------
>>> table = parse_target_nucleotides(["U=C9H13N2O9P", "A=C10H14N5O7P"])
>>> list(table)
['A', 'U']
>>> parse_mappings(["A->A", "A->G", "U->U"])
{'A': ['A', 'G'], 'U': ['U']}
"""

from dataclasses import dataclass
from typing import Dict, List

from pyteomics import mass

from .constants import MAPPING_SEPARATOR, NUCLEOTIDE_FORMULA_SEPARATOR
from .formula import formula_to_string, monoisotopic_mass, parse_formula


@dataclass(frozen=True)
class Nucleotide:
    """An unmodified nucleotide monophosphate."""

    code: str
    formula: str
    composition: mass.Composition
    mono_mass: float

    @classmethod
    def from_formula(cls, code: str, formula: str) -> 'Nucleotide':
        composition = parse_formula(formula)
        return cls(
            code=code,
            formula=formula_to_string(composition),
            composition=composition,
            mono_mass=monoisotopic_mass(composition),
        )


def parse_target_nucleotides(target_nucleotides: List[str]) -> Dict[str, Nucleotide]:
    """Parse "<letter>=<formula>" assignments into the base formula table.

    Parameters
    ----------
    target_nucleotides : List[str]
        Assignments such as "U=C9H13N2O9P"

    Returns
    -------
    Dict[str, Nucleotide]
        Letter -> nucleotide, ordered by letter

    Raises
    ------
    ValueError
        If an assignment has no "=" or an empty letter
    """
    table = {}
    for entry in target_nucleotides:
        code, sep, formula = entry.partition(NUCLEOTIDE_FORMULA_SEPARATOR)
        code = code.strip()
        if not sep or not code:
            raise ValueError(
                f"Invalid nucleotide formula '{entry}'. "
                f"Expected format '<letter>=<formula>', e.g. 'U=C9H13N2O9P'"
            )
        table[code] = Nucleotide.from_formula(code, formula)

    return {code: table[code] for code in sorted(table)}


def parse_mappings(mappings: List[str]) -> Dict[str, List[str]]:
    """Parse "<source>-><target>" pairs into a one-to-many mapping.

    Only the first character of each side is used. Targets keep their
    input order; repeated pairs are ignored.

    Raises
    ------
    ValueError
        If a pair has no "->" or an empty side
    """
    source_to_targets: Dict[str, List[str]] = {}
    for entry in mappings:
        source, sep, target = entry.partition(MAPPING_SEPARATOR)
        source, target = source.strip(), target.strip()
        if not sep or not source or not target:
            raise ValueError(
                f"Invalid nucleotide mapping '{entry}'. "
                f"Expected format '<source>-><target>', e.g. 'U->U'"
            )
        targets = source_to_targets.setdefault(source[0], [])
        if target[0] not in targets:
            targets.append(target[0])

    return source_to_targets


def source_nucleotides(mappings: List[str]) -> List[str]:
    """Distinct source letters of the mapping pairs, in input order."""
    sources = []
    for entry in mappings:
        source = entry.strip()[:1]
        if source and source not in sources:
            sources.append(source)
    return sources
