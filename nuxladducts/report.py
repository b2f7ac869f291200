"""Human-readable listing of precursor adducts.

Labels differing only in nucleotide order (e.g. "AU-H2O" and "UA-H2O")
are shown once.
"""

import logging
from typing import Iterable, List

from .adducts import AdductResult
from .constants import CYSTEINE_ADDUCT_FORMULA, CYSTEINE_ADDUCT_LABEL
from .filtering import strip_modification
from .formula import formula_to_string, parse_formula

logger = logging.getLogger(__name__)


def display_labels(labels: Iterable[str]) -> List[str]:
    """Sort nucleotides up to the modification suffix and de-duplicate.

    Examples
    --------
    >>> display_labels(["UA-H2O", "AU-H2O", "U"])
    ['AU-H2O', 'U']
    """
    printed = []
    for label in sorted(labels):
        if label == CYSTEINE_ADDUCT_LABEL:
            display = label
        else:
            nucleotides = strip_modification(label)
            display = "".join(sorted(nucleotides)) + label[len(nucleotides):]
        if display in printed:
            logger.debug(
                f"Same nucleotide composition generated for: {display} "
                f"will only consider it once to prevent duplicate precursor adducts."
            )
            continue
        printed.append(display)
    return printed


def format_precursor_adducts(result: AdductResult, cysteine_adduct: bool = False) -> List[str]:
    """One line per precursor adduct: index, formula, mass and labels.

    Parameters
    ----------
    result : AdductResult
        Generated precursor adducts
    cysteine_adduct : bool
        Annotate the DTT reagent adduct instead of listing its label

    Returns
    -------
    List[str]
        e.g. "Precursor adduct 5\t:\tC19H23N7O14P2 635.0778 ( AU-H2O )"
    """
    cysteine_formula = formula_to_string(parse_formula(CYSTEINE_ADDUCT_FORMULA))

    lines = []
    for index, adduct in enumerate(result, start=1):
        prefix = f"Precursor adduct {index}\t:\t{adduct.formula} {adduct.mass:.4f}"
        if cysteine_adduct and adduct.formula == cysteine_formula:
            lines.append(f"{prefix} ( cysteine adduct )")
        else:
            lines.append(f"{prefix} ( {' '.join(display_labels(adduct.labels))} )")
    return lines


def log_precursor_adducts(result: AdductResult, cysteine_adduct: bool = False) -> None:
    for line in format_precursor_adducts(result, cysteine_adduct=cysteine_adduct):
        logger.info(line)
