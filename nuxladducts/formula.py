"""Elemental formula arithmetic backed by pyteomics compositions.

Formulas are handled as ``pyteomics.mass.Composition`` objects (element ->
count mappings supporting ``+`` and ``-``). This module adds the canonical
string form used as the key of every adduct map and the monoisotopic mass.

Examples
--------
>>> ump = parse_formula("C9H13N2O9P")
>>> formula_to_string(subtract_formulas(ump, WATER))
'C9H11N2O8P'
>>> round(monoisotopic_mass(WATER), 6)
18.010565
"""

from typing import Iterable

from pyteomics import mass

from .constants import WATER_FORMULA


def parse_formula(text: str) -> mass.Composition:
    """Parse an elemental formula string into a neutral composition.

    Parameters
    ----------
    text : str
        Formula such as "C10H14N5O7P" or "H2O"

    Returns
    -------
    mass.Composition
        Element counts, charge removed

    Raises
    ------
    pyteomics.auxiliary.PyteomicsError
        If the formula cannot be parsed
    """
    return neutralize(mass.Composition(formula=text.strip()))


def neutralize(composition: mass.Composition) -> mass.Composition:
    """Return a copy of ``composition`` with all charge carriers removed."""
    return mass.Composition({
        element: count
        for element, count in composition.items()
        if not element.endswith(("+", "-"))
    })


def add_formulas(first: mass.Composition, second: mass.Composition) -> mass.Composition:
    return first + second


def subtract_formulas(first: mass.Composition, second: mass.Composition) -> mass.Composition:
    return first - second


def sum_formulas(compositions: Iterable[mass.Composition]) -> mass.Composition:
    total = mass.Composition()
    for composition in compositions:
        total = total + composition
    return total


def _hill_order(elements: Iterable[str]) -> list:
    # Isotope labels ("C[13]") sort with their element
    def symbol(element: str) -> str:
        return element.split("[")[0]

    elements = sorted(elements, key=lambda e: (symbol(e), e))
    if not any(symbol(e) == "C" for e in elements):
        return elements

    carbon = [e for e in elements if symbol(e) == "C"]
    hydrogen = [e for e in elements if symbol(e) == "H"]
    rest = [e for e in elements if symbol(e) not in ("C", "H")]
    return carbon + hydrogen + rest


def formula_to_string(composition: mass.Composition) -> str:
    """Canonical Hill-order string of a composition.

    Carbon and hydrogen come first when carbon is present, all other
    elements follow alphabetically. Counts of 1 are omitted and elements
    with a count of 0 are dropped, so compositions with identical element
    counts always map to the same string.

    Examples
    --------
    >>> formula_to_string(parse_formula("OH2"))
    'H2O'
    >>> formula_to_string(parse_formula("PC9N2O9H13"))
    'C9H13N2O9P'
    """
    parts = []
    for element in _hill_order(e for e, n in composition.items() if n != 0):
        count = composition[element]
        parts.append(element if count == 1 else f"{element}{count}")
    return "".join(parts)


def monoisotopic_mass(composition: mass.Composition) -> float:
    """Monoisotopic mass (Da) of a neutral composition."""
    return float(mass.calculate_mass(composition=composition))


# Condensation partner for every phosphodiester bond
WATER = parse_formula(WATER_FORMULA)
