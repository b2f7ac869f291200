"""Parameters for precursor adduct generation.

All inputs arrive already tokenized (lists of strings), as read from a
parameter file or the command line.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Set

from .constants import (
    DEFAULT_MAX_LENGTH,
    DNA_MAPPINGS,
    DNA_NUCLEOTIDES,
    DNA_UV_MODIFICATIONS,
    RNA_MAPPINGS,
    RNA_NUCLEOTIDES,
    RNA_UV_MODIFICATIONS,
)


class NucleotidePreset(Enum):
    """Standard cross-linking experiments."""
    RNA_UV = "rna_uv"  # UV 254 nm, uracil cross-links
    DNA_UV = "dna_uv"  # UV 254 nm, thymine cross-links


@dataclass
class AdductGenerationParams:
    """Configuration of precursor adduct generation.

    Attributes
    ----------
    target_nucleotides : List[str]
        "<letter>=<formula>" monophosphate formulas
    nt_groups : List[str]
        Nucleotide groups (e.g. "ACGU" for RNA), no adduct may mix groups
    can_cross_link : Set[str]
        Nucleotides that can be the cross-link site
    mappings : List[str]
        "<source>-><target>" substitutions of restriction sequence letters
    modifications : List[str]
        "<letter>:<signed-formula-run>" precursor modifications
    sequence_restriction : str
        Sequence (in source letters) adducts must be contained in;
        empty means any sequence
    cysteine_adduct : bool
        Add the DTT reagent adduct C4H8S2O2
    max_length : int
        Maximum number of nucleotides per adduct
    """

    target_nucleotides: List[str] = field(default_factory=list)
    nt_groups: List[str] = field(default_factory=list)
    can_cross_link: Set[str] = field(default_factory=set)
    mappings: List[str] = field(default_factory=list)
    modifications: List[str] = field(default_factory=list)
    sequence_restriction: str = ""
    cysteine_adduct: bool = False
    max_length: int = DEFAULT_MAX_LENGTH

    def __post_init__(self):
        self.can_cross_link = set(self.can_cross_link)
        if self.max_length < 1:
            raise ValueError(f"max_length must be a positive integer, got {self.max_length}")

    @classmethod
    def for_preset(cls, preset: NucleotidePreset, **overrides) -> 'AdductGenerationParams':
        """Create parameters for a standard cross-linking experiment.

        Args:
            preset: Experiment preset enum
            **overrides: Fields replacing the preset values

        Returns:
            AdductGenerationParams with preset defaults
        """
        if preset == NucleotidePreset.RNA_UV:
            params = cls(
                target_nucleotides=list(RNA_NUCLEOTIDES),
                nt_groups=["ACGU"],
                can_cross_link={"U"},
                mappings=list(RNA_MAPPINGS),
                modifications=list(RNA_UV_MODIFICATIONS),
            )
        elif preset == NucleotidePreset.DNA_UV:
            params = cls(
                target_nucleotides=list(DNA_NUCLEOTIDES),
                nt_groups=["ACGT"],
                can_cross_link={"T"},
                mappings=list(DNA_MAPPINGS),
                modifications=list(DNA_UV_MODIFICATIONS),
            )
        else:
            raise ValueError(f"Unknown nucleotide preset: {preset}")

        return replace(params, **overrides)
