#!/usr/bin/env python
"""Generate the precursor adducts of a nucleotide cross-linking experiment.

Starts from a preset (RNA or DNA UV cross-linking) and lets every parameter
be overridden on the command line. Lists the resulting precursor adducts:

    Precursor adduct 1	:	C9H11N2O8P 306.0253 ( U-H2O )

Example:
    python scripts/generate_adducts.py --preset rna_uv --max-length 3 \
        --restriction AUGGCU --cysteine-adduct
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import logging

from nuxladducts import (
    AdductGenerationParams,
    NucleotidePreset,
    generate_modification_masses,
    log_precursor_adducts,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Generate nucleotide precursor adducts')
    parser.add_argument('--preset', type=str, default='rna_uv',
                        choices=[p.value for p in NucleotidePreset],
                        help='Cross-linking experiment preset')
    parser.add_argument('--target-nucleotides', nargs='+', default=None,
                        help='Nucleotide formulas, e.g. U=C9H13N2O9P')
    parser.add_argument('--nt-groups', nargs='+', default=None,
                        help='Nucleotide groups that must not be mixed, e.g. ACGU')
    parser.add_argument('--can-cross-link', type=str, default=None,
                        help='Cross-linkable nucleotides, e.g. U')
    parser.add_argument('--mappings', nargs='+', default=None,
                        help='Source to target nucleotide mappings, e.g. U->U')
    parser.add_argument('--modifications', nargs='+', default=None,
                        help='Nucleotide modifications, e.g. U:-H2O')
    parser.add_argument('--restriction', type=str, default='',
                        help='Sequence the adducts must be contained in')
    parser.add_argument('--cysteine-adduct', action='store_true',
                        help='Add the DTT adduct C4H8S2O2')
    parser.add_argument('--max-length', type=int, default=2,
                        help='Maximum number of nucleotides per adduct')
    parser.add_argument('--verbose', action='store_true',
                        help='Log filtered labels')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(message)s',
    )

    overrides = {
        'sequence_restriction': args.restriction,
        'cysteine_adduct': args.cysteine_adduct,
        'max_length': args.max_length,
    }
    if args.target_nucleotides is not None:
        overrides['target_nucleotides'] = args.target_nucleotides
    if args.nt_groups is not None:
        overrides['nt_groups'] = args.nt_groups
    if args.can_cross_link is not None:
        overrides['can_cross_link'] = set(args.can_cross_link)
    if args.mappings is not None:
        overrides['mappings'] = args.mappings
    if args.modifications is not None:
        overrides['modifications'] = args.modifications

    try:
        params = AdductGenerationParams.for_preset(NucleotidePreset(args.preset), **overrides)
        result = generate_modification_masses(params)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_precursor_adducts(result, cysteine_adduct=params.cysteine_adduct)
    return 0


if __name__ == '__main__':
    sys.exit(main())
