"""Restriction filters for precursor adducts.

Removes nucleotide labels that cannot represent a cross-linked adduct of
the experiment. Rules are applied in order, the first violated rule
rejects the label:

1. more than one lowercase (mandatory cross-link) nucleotide
2. no cross-linkable nucleotide
3. more nucleotides than max_length
4. nucleotides from more than one nucleotide group (e.g. RNA and DNA)
5. composition not found in any target sequence
6. same sorted composition and mass already accepted

Labels are compared by their sorted nucleotide composition with the
modification suffix removed, so "AU-H2O" and "UA-H2O" are the same
composition ("AU").
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .adducts import AdductResult
from .constants import MODIFICATION_SIGNS
from .sequences import composition_in_sequences, encode_sequence_to_ord

logger = logging.getLogger(__name__)


class RestrictionViolation(Enum):
    """Filter rule that rejected a nucleotide label."""
    MULTIPLE_LOWERCASE = "multiple_lowercase"
    NO_CROSS_LINKABLE = "no_cross_linkable"
    TOO_LONG = "too_long"
    MIXED_GROUPS = "mixed_groups"
    NOT_IN_TARGET_SEQUENCES = "not_in_target_sequences"
    DUPLICATE_COMPOSITION = "duplicate_composition"


# =============================================================================
# Label Handling
# =============================================================================

def strip_modification(label: str) -> str:
    """Remove the modification suffix from a nucleotide label.

    The suffix starts at the first "+" or "-" after the first character.

    Examples
    --------
    >>> strip_modification("UA-H2O-HO3P")
    'UA'
    >>> strip_modification("AU")
    'AU'
    """
    positions = [p for p in (label.find(sign, 1) for sign in MODIFICATION_SIGNS) if p != -1]
    if not positions:
        return label
    return label[:min(positions)]


def sorted_composition(label: str) -> str:
    """Sorted nucleotide composition of a label, e.g. "UA-H2O" -> "AU"."""
    return "".join(sorted(strip_modification(label)))


# =============================================================================
# Restriction Checks
# =============================================================================

def check_restrictions(
    composition: str,
    encoded_sequences: List[np.ndarray],
    can_cross_link: Set[str],
    nt_groups: Iterable[str],
    max_length: int,
) -> Optional[RestrictionViolation]:
    """Check a sorted nucleotide composition against all restrictions.

    Parameters
    ----------
    composition : str
        Sorted nucleotide composition (sorted_composition())
    encoded_sequences : List[np.ndarray]
        Target sequences as ord() arrays
    can_cross_link : Set[str]
        Cross-linkable nucleotides
    nt_groups : Iterable[str]
        Nucleotide groups; a composition may use letters of only one group
    max_length : int
        Maximum number of nucleotides

    Returns
    -------
    Optional[RestrictionViolation]
        First violated rule, None if the composition is valid
    """
    # lowercase letters MUST be cross-linked, only one can be
    if sum(1 for c in composition if c.islower()) >= 2:
        return RestrictionViolation.MULTIPLE_LOWERCASE

    if not any(c in can_cross_link for c in composition):
        return RestrictionViolation.NO_CROSS_LINKABLE

    if len(composition) > max_length:
        return RestrictionViolation.TOO_LONG

    found_in_n_groups = sum(
        1 for group in nt_groups if any(c in group for c in composition)
    )
    if found_in_n_groups > 1:
        return RestrictionViolation.MIXED_GROUPS

    if not composition_in_sequences(composition, encoded_sequences):
        return RestrictionViolation.NOT_IN_TARGET_SEQUENCES

    return None


def filter_adducts(
    result: AdductResult,
    target_sequences: List[str],
    can_cross_link: Set[str],
    nt_groups: Iterable[str],
    max_length: int,
) -> List[Tuple[str, str, RestrictionViolation]]:
    """Remove all labels violating the restrictions from ``result``.

    Formulas are visited in canonical formula order and labels in
    lexicographic order, so the first accepted label of a duplicated
    (composition, mass) pair is always the same. Formulas left without
    labels are removed.

    Parameters
    ----------
    result : AdductResult
        Unfiltered precursor adducts (modified in place)
    target_sequences : List[str]
        Expanded target sequences
    can_cross_link : Set[str]
        Cross-linkable nucleotides
    nt_groups : Iterable[str]
        Nucleotide groups
    max_length : int
        Maximum number of nucleotides

    Returns
    -------
    violations : List[Tuple[str, str, RestrictionViolation]]
        Removed (formula, label, rule) triples
    """
    logger.info("Filtering on restrictions...")

    encoded_sequences = [encode_sequence_to_ord(s) for s in target_sequences]
    nt_groups = list(nt_groups)

    accepted = set()  # (sorted composition, mass)
    violations = []

    for adduct in result:
        for label in sorted(adduct.labels):
            composition = sorted_composition(label)

            violation = check_restrictions(
                composition, encoded_sequences, can_cross_link, nt_groups, max_length
            )
            if violation is None and (composition, adduct.mass) in accepted:
                violation = RestrictionViolation.DUPLICATE_COMPOSITION

            if violation is None:
                accepted.add((composition, adduct.mass))
            else:
                violations.append((adduct.formula, label, violation))

    for formula, label, violation in violations:
        result.discard_label(formula, label)
        logger.debug(f"filtered sequence: {formula}\t{label}\t({violation.value})")

    logger.info(
        f"✓ Filtering complete: {len(violations):,} labels removed, "
        f"{len(result):,} precursor adducts remain"
    )

    return violations
