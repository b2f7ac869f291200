"""Generate the precursor adducts of a nucleotide cross-linking experiment.

Pipeline (executed once per call, no shared state):

1. Parse nucleotide formulas and source->target mappings
2. Prepare the restriction sequence (synthesized if empty, renames applied)
3. Expand target sequences
4. Parse nucleotide modifications
5. Build adducts of 1..max_length nucleotides
6. Filter on restrictions
7. Optionally add the DTT/cysteine reagent adduct

Examples
--------
>>> params = AdductGenerationParams.for_preset(NucleotidePreset.RNA_UV)
>>> result = generate_modification_masses(params)
>>> for adduct in result:
...     print(adduct.formula, adduct.mass, sorted(adduct.labels))
"""

import logging

from .adducts import AdductResult, build_adducts
from .config import AdductGenerationParams
from .constants import (
    CYSTEINE_ADDUCT_FORMULA,
    CYSTEINE_ADDUCT_LABEL,
    MAX_LOGGED_SEQUENCE_LENGTH,
)
from .filtering import filter_adducts
from .formula import parse_formula
from .modifications import parse_nucleotide_modifications
from .nucleotides import parse_mappings, parse_target_nucleotides, source_nucleotides
from .sequences import generate_target_sequences, simplify_mappings, synthesize_restriction

logger = logging.getLogger(__name__)


def add_cysteine_adduct(result: AdductResult) -> None:
    """Add the DTT reagent adduct, bypassing all restrictions."""
    result.add_label(parse_formula(CYSTEINE_ADDUCT_FORMULA), CYSTEINE_ADDUCT_LABEL)


def _log_target_sequences(target_sequences):
    logger.info(f"sequence(s): {len(target_sequences)}")
    for sequence in target_sequences:
        if len(sequence) < MAX_LOGGED_SEQUENCE_LENGTH:
            logger.info(sequence)
        else:
            logger.info(sequence[:MAX_LOGGED_SEQUENCE_LENGTH] + "...")


def generate_modification_masses(params: AdductGenerationParams) -> AdductResult:
    """Generate all valid precursor adducts for the given configuration.

    Parameters
    ----------
    params : AdductGenerationParams
        Nucleotides, mappings, modifications and restrictions

    Returns
    -------
    AdductResult
        Formula -> monoisotopic mass and ambiguity labels

    Raises
    ------
    ValueError
        If a nucleotide formula, mapping or modification is malformed.
        Nothing is generated in that case.
    """
    nucleotides = parse_target_nucleotides(params.target_nucleotides)
    source_to_targets = parse_mappings(params.mappings)

    restriction = params.sequence_restriction
    if not restriction:
        restriction = synthesize_restriction(
            source_nucleotides(params.mappings), params.max_length
        )

    source_to_targets, restriction = simplify_mappings(source_to_targets, restriction)

    if source_to_targets and not params.sequence_restriction:
        logger.warning(
            "WARNING: no restriction on sequence but multiple target nucleotides specified. "
            "May generate huge amount of sequences considered as adduct."
        )

    # Parse before expanding so malformed modifications fail fast
    nucleotide_modifications = parse_nucleotide_modifications(params.modifications)

    target_sequences = generate_target_sequences(restriction, source_to_targets)
    if params.sequence_restriction:
        _log_target_sequences(target_sequences)
    else:
        logger.info(f"sequence(s): {len(target_sequences)}")

    result = build_adducts(nucleotides, nucleotide_modifications, params.max_length)

    filter_adducts(
        result,
        target_sequences,
        can_cross_link=params.can_cross_link,
        nt_groups=params.nt_groups,
        max_length=params.max_length,
    )

    if params.cysteine_adduct:
        add_cysteine_adduct(result)

    logger.info(f"✓ Finished generation of modification masses: {len(result):,} precursor adducts")

    return result
