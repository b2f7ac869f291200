"""Precursor adduct generation by nucleotide chain growth.

Enumerates all oligonucleotide adducts of 1..max_length nucleotides. At
most one nucleotide per chain carries a modification: modifications are
applied only to the single-nucleotide seeds, and chains grow by prepending
unmodified nucleotides (condensation: base + chain - H2O).

Each distinct elemental formula is one PrecursorAdduct holding its
monoisotopic mass and its ambiguity class (all nucleotide labels with this
exact formula, e.g. {"AU-H2O", "UA-H2O"}).

Design principles:
1. One entity per formula (mass and labels can never diverge)
2. Each growth step builds a new snapshot from the previous one
3. Mass computed once per distinct formula

Examples
--------
>>> nucleotides = parse_target_nucleotides(["A=C10H14N5O7P", "U=C9H13N2O9P"])
>>> modifications = parse_nucleotide_modifications(["U:-H2O"])
>>> result = build_adducts(nucleotides, modifications, max_length=2)
>>> sorted(result.mod_combinations["C9H11N2O8P"])
['U-H2O']
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List, NamedTuple, Set

from pyteomics import mass

from .formula import WATER, formula_to_string, monoisotopic_mass
from .modifications import NucleotideModification, apply_modification
from .nucleotides import Nucleotide

logger = logging.getLogger(__name__)


# =============================================================================
# Result Container
# =============================================================================

@dataclass
class PrecursorAdduct:
    """All nucleotide labels sharing one elemental formula."""

    formula: str
    composition: mass.Composition
    mass: float
    labels: Set[str] = field(default_factory=set)


class AdductResult:
    """Precursor adducts indexed by canonical formula string.

    Exposes the two classic views, ``formula2mass`` and
    ``mod_combinations``. Both are derived from the same entries, so their
    key sets are always identical and no label set is ever empty: removing
    the last label of a formula removes the formula.

    Examples
    --------
    >>> result = AdductResult()
    >>> _ = result.add_label(parse_formula("C9H13N2O9P"), "U")
    >>> result.formula2mass
    {'C9H13N2O9P': 324.035...}
    >>> result.discard_label("C9H13N2O9P", "U")
    >>> len(result)
    0
    """

    def __init__(self):
        self._adducts: Dict[str, PrecursorAdduct] = {}

    def add_label(self, composition: mass.Composition, label: str) -> PrecursorAdduct:
        """Add a label to the adduct of ``composition`` (created if new)."""
        formula = formula_to_string(composition)
        adduct = self._adducts.get(formula)
        if adduct is None:
            adduct = PrecursorAdduct(
                formula=formula,
                composition=composition,
                mass=monoisotopic_mass(composition),
            )
            self._adducts[formula] = adduct
        adduct.labels.add(label)
        return adduct

    def discard_label(self, formula: str, label: str) -> None:
        """Remove a label; drop the formula once it has no labels left."""
        adduct = self._adducts.get(formula)
        if adduct is None:
            return
        adduct.labels.discard(label)
        if not adduct.labels:
            del self._adducts[formula]

    @property
    def formula2mass(self) -> Dict[str, float]:
        """Canonical formula -> monoisotopic mass, in formula order."""
        return {adduct.formula: adduct.mass for adduct in self}

    @property
    def mod_combinations(self) -> Dict[str, Set[str]]:
        """Canonical formula -> ambiguity labels, in formula order."""
        return {adduct.formula: set(adduct.labels) for adduct in self}

    def __iter__(self) -> Iterator[PrecursorAdduct]:
        for formula in sorted(self._adducts):
            yield self._adducts[formula]

    def __getitem__(self, formula: str) -> PrecursorAdduct:
        return self._adducts[formula]

    def __contains__(self, formula: str) -> bool:
        return formula in self._adducts

    def __len__(self) -> int:
        return len(self._adducts)

    def __repr__(self) -> str:
        return f"AdductResult(n_formulas={len(self)})"


# =============================================================================
# Chain Growth
# =============================================================================

class Chain(NamedTuple):
    """Composition and labels of all chains with one formula in a growth step."""

    composition: mass.Composition
    labels: FrozenSet[str]


# Formula -> chains generated in one growth step
ChainSnapshot = Dict[str, Chain]


def build_single_nucleotide_variants(
    nucleotides: Dict[str, Nucleotide],
    nucleotide_modifications: Dict[str, List[NucleotideModification]],
) -> ChainSnapshot:
    """Generate the unmodified and modified single-nucleotide adducts.

    Each nucleotide contributes its unmodified formula (label "U") and one
    variant per registered modification (label "U-H2O"). A modification
    producing the formula of an earlier modification of the same nucleotide
    is skipped; one reproducing the unmodified formula (e.g. "U:+H2O-H2O")
    joins its ambiguity class. An explicit "U:" adds nothing.

    Parameters
    ----------
    nucleotides : Dict[str, Nucleotide]
        Base formula table
    nucleotide_modifications : Dict[str, List[NucleotideModification]]
        Alternative modifications per nucleotide

    Returns
    -------
    ChainSnapshot
        Formula -> chain of length 1
    """
    for code in nucleotide_modifications:
        if code not in nucleotides:
            logger.warning(
                f"WARNING: Modification specified for unknown nucleotide '{code}'. "
                f"Will skip it."
            )

    chains: Dict[str, Set[str]] = {}
    compositions: Dict[str, mass.Composition] = {}

    for code, nucleotide in nucleotides.items():
        logger.info(f"nucleotide: {code}")

        compositions.setdefault(nucleotide.formula, nucleotide.composition)
        chains.setdefault(nucleotide.formula, set()).add(code)

        modified_formulas = set()
        for nucleotide_modification in nucleotide_modifications.get(code, []):
            composition, suffix = apply_modification(nucleotide.composition, nucleotide_modification)
            formula = formula_to_string(composition)
            label = code + suffix

            if not suffix:
                logger.debug(f"Unmodified nucleotide {code} specified explicitly")
                continue

            if formula in modified_formulas:
                logger.warning(
                    f"WARNING:\tNucleotide + formula combination: {label}\t\t{formula} "
                    f"occurred several times. Did you specify it multiple times? "
                    f"Will skip this entry."
                )
                continue

            modified_formulas.add(formula)
            compositions.setdefault(formula, composition)
            chains.setdefault(formula, set()).add(label)
            logger.info(f"\tmodifications: {label}\t\t{formula}")

    return {
        formula: Chain(compositions[formula], frozenset(labels))
        for formula, labels in chains.items()
    }


def grow_chains(
    nucleotides: Dict[str, Nucleotide],
    previous: ChainSnapshot,
) -> ChainSnapshot:
    """Prepend every unmodified nucleotide to every chain of the previous step.

    The new label set is the cartesian product of the prepended letter and
    the labels of the seed formula.

    Parameters
    ----------
    nucleotides : Dict[str, Nucleotide]
        Base formula table
    previous : ChainSnapshot
        Chains of length n

    Returns
    -------
    ChainSnapshot
        Chains of length n + 1 (previous snapshot is left untouched)
    """
    chains: Dict[str, Set[str]] = {}
    compositions: Dict[str, mass.Composition] = {}

    for code, nucleotide in nucleotides.items():
        for seed in previous.values():
            # -H2O because of condensation reaction
            composition = nucleotide.composition + seed.composition - WATER
            formula = formula_to_string(composition)

            compositions.setdefault(formula, composition)
            chains.setdefault(formula, set()).update(code + label for label in seed.labels)

    return {
        formula: Chain(compositions[formula], frozenset(labels))
        for formula, labels in chains.items()
    }


def enumerate_chains(
    nucleotides: Dict[str, Nucleotide],
    nucleotide_modifications: Dict[str, List[NucleotideModification]],
    max_length: int,
) -> List[ChainSnapshot]:
    """Snapshots of all chain lengths 1..max_length (index 0 = length 1)."""
    snapshots = [build_single_nucleotide_variants(nucleotides, nucleotide_modifications)]
    for _ in range(max_length - 1):
        snapshots.append(grow_chains(nucleotides, snapshots[-1]))
    return snapshots


def build_adducts(
    nucleotides: Dict[str, Nucleotide],
    nucleotide_modifications: Dict[str, List[NucleotideModification]],
    max_length: int,
) -> AdductResult:
    """Build all precursor adducts of 1..max_length nucleotides.

    Parameters
    ----------
    nucleotides : Dict[str, Nucleotide]
        Base formula table
    nucleotide_modifications : Dict[str, List[NucleotideModification]]
        Alternative modifications per nucleotide
    max_length : int
        Maximum number of nucleotides per adduct (<= 1: single nucleotides)

    Returns
    -------
    AdductResult
        Formula -> mass and ambiguity labels, unfiltered
    """
    result = AdductResult()
    for snapshot in enumerate_chains(nucleotides, nucleotide_modifications, max_length):
        for chain in snapshot.values():
            for label in sorted(chain.labels):
                result.add_label(chain.composition, label)

    logger.info(f"✓ Generated {len(result):,} distinct precursor adduct formulas")

    return result
