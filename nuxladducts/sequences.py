"""Target sequence expansion and nucleotide composition containment.

The restriction sequence is written in source nucleotides (e.g. the RNA
sequence used in the experiment). Substituting each source letter by its
target letter(s) yields the target sequences, which act as an oracle: a
precursor adduct is only considered if its nucleotide composition occurs
as a contiguous window in at least one target sequence.

Design principles:
1. Work-list expansion (no recursion depth limit)
2. ord() encoding of target sequences for the Numba containment kernel
3. Composition test on letter counts (order-insensitive windows)

Examples
--------
>>> mapping, restriction = simplify_mappings({"A": ["A", "G"], "U": ["U"]}, "AU")
>>> generate_target_sequences(restriction, mapping)
['AU', 'GU']
>>> encoded = [encode_sequence_to_ord(s) for s in ["AUGC"]]
>>> composition_in_sequences("UA", encoded)
True
"""

from typing import Dict, List, Tuple

import numpy as np
import numba


# =============================================================================
# Restriction Sequence Preparation
# =============================================================================

def synthesize_restriction(sources: List[str], max_length: int) -> str:
    """Build a scratch restriction sequence covering all source k-mers.

    Used when no restriction sequence is given. All strings of length
    1..max_length over the source letters are generated by repeated
    prefixing and concatenated, so every k-mer composition that the
    containment check can ask for occurs in the result.

    Parameters
    ----------
    sources : List[str]
        Distinct source nucleotides
    max_length : int
        Maximum precursor adduct length

    Returns
    -------
    str
        Concatenated scratch sequence

    Examples
    --------
    >>> synthesize_restriction(["A", "U"], 2)
    'AUAAAUUAUU'
    """
    all_combinations = list(sources)
    actual_combinations = list(sources)

    for _ in range(max_length - 1):
        new_combinations = [
            source + combination
            for source in sources
            for combination in actual_combinations
        ]
        all_combinations.extend(new_combinations)
        actual_combinations = new_combinations

    return "".join(all_combinations)


def simplify_mappings(
    source_to_targets: Dict[str, List[str]],
    restriction: str,
) -> Tuple[Dict[str, List[str]], str]:
    """Remove trivial mappings and resolve simple renames.

    - identity (only A->A): dropped
    - rename (only A->X): substituted in the restriction sequence, dropped
    - multiple targets (e.g. A->A and A->X): kept for branching

    Renames are applied in letter order, so chained renames (A->G, G->C)
    compose.

    Returns
    -------
    mappings : Dict[str, List[str]]
        Mappings with at least two distinct targets
    restriction : str
        Restriction sequence with renames applied
    """
    combinatorial = {}
    for source in sorted(source_to_targets):
        targets = list(dict.fromkeys(source_to_targets[source]))
        if len(targets) == 1 and targets[0] == source:
            continue
        if len(targets) == 1:
            restriction = restriction.replace(source, targets[0])
            continue
        combinatorial[source] = targets

    return combinatorial, restriction


# =============================================================================
# Target Sequence Expansion
# =============================================================================

def is_valid_target_sequence(sequence: str, source_to_targets: Dict[str, List[str]]) -> bool:
    """Check that every letter is a target nucleotide.

    A letter is valid if it is not a source letter, or if it is a source
    letter listed among its own targets (e.g. A in A->A, A->G).
    """
    for letter in sequence:
        targets = source_to_targets.get(letter)
        if targets is not None and letter not in targets:
            return False
    return True


def generate_target_sequences(
    restriction: str,
    source_to_targets: Dict[str, List[str]],
) -> List[str]:
    """Generate all target sequences reachable from the restriction sequence.

    Each source position is either kept or replaced by one of its targets,
    independently of all other positions. Only sequences consisting solely
    of valid target letters are returned.

    Parameters
    ----------
    restriction : str
        Restriction sequence (after simplify_mappings)
    source_to_targets : Dict[str, List[str]]
        Mappings with multiple targets

    Returns
    -------
    List[str]
        Distinct target sequences

    Notes
    -----
    The number of sequences grows exponentially with the number of mapped
    positions. Keep restriction sequences short when mappings branch.
    """
    target_sequences = []
    seen = set()

    # (sequence, first position still open for substitution)
    work_list = [(restriction, 0)]
    while work_list:
        sequence, start = work_list.pop()

        for pos in range(start, len(sequence)):
            targets = source_to_targets.get(sequence[pos])
            if targets is None:
                continue
            for target in targets:
                if target != sequence[pos]:
                    substituted = sequence[:pos] + target + sequence[pos + 1:]
                    work_list.append((substituted, pos + 1))

        if sequence not in seen and is_valid_target_sequence(sequence, source_to_targets):
            seen.add(sequence)
            target_sequences.append(sequence)

    return target_sequences


# =============================================================================
# Composition Containment (Numba-Compiled)
# =============================================================================

def encode_sequence_to_ord(sequence: str) -> np.ndarray:
    """Encode nucleotide string to ord() array for Numba processing.

    Examples
    --------
    >>> encode_sequence_to_ord("AU")
    array([65, 85], dtype=uint8)
    """
    return np.array([ord(c) for c in sequence], dtype=np.uint8)


def composition_counts(composition: str) -> np.ndarray:
    """Letter histogram (ord()-indexed, 256 bins) of a composition."""
    counts = np.zeros(256, dtype=np.int32)
    for c in composition:
        counts[ord(c)] += 1
    return counts


@numba.jit(nopython=True, cache=True)
def contains_sorted_window(
    sequence_ord: np.ndarray,
    query_counts: np.ndarray,
    query_length: int,
) -> bool:
    """Test if any window of the sequence has the query's letter counts (Numba-compiled).

    Equivalent to comparing the sorted query with every sorted window of
    the same length, done with a sliding letter histogram.

    Parameters
    ----------
    sequence_ord : np.ndarray (uint8)
        Target sequence as ord() values
    query_counts : np.ndarray (int32)
        Letter histogram of the query (composition_counts())
    query_length : int
        Number of letters in the query

    Returns
    -------
    bool
        True if a matching window exists

    Performance
    -----------
    O(n * 256) for a sequence of length n
    """
    n = len(sequence_ord)
    if query_length == 0:
        return True
    if query_length > n:
        return False

    window_counts = np.zeros(256, dtype=np.int32)
    for i in range(query_length):
        window_counts[sequence_ord[i]] += 1

    for start in range(n - query_length + 1):
        if start > 0:
            window_counts[sequence_ord[start - 1]] -= 1
            window_counts[sequence_ord[start + query_length - 1]] += 1

        match = True
        for c in range(256):
            if window_counts[c] != query_counts[c]:
                match = False
                break
        if match:
            return True

    return False


def composition_in_sequences(composition: str, encoded_sequences: List[np.ndarray]) -> bool:
    """Check if the composition occurs as a window in any target sequence.

    An empty composition is contained in every sequence. With no target
    sequences, no composition is contained.

    Parameters
    ----------
    composition : str
        Nucleotide letters (order irrelevant)
    encoded_sequences : List[np.ndarray]
        Target sequences from encode_sequence_to_ord()

    Returns
    -------
    bool
        True if at least one target sequence contains the composition
    """
    if not composition:
        return True

    query_counts = composition_counts(composition)
    for sequence_ord in encoded_sequences:
        if contains_sorted_window(sequence_ord, query_counts, len(composition)):
            return True
    return False
