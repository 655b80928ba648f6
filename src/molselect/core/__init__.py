"""Core data structures and reference tables."""

from molselect.core.structures import Atom, coords_array
from molselect.core.constants import (
    PROTEIN_RESIDUES,
    WATER_RESIDUES,
    SOLVENT_RESIDUES,
    BACKBONE_ATOMS,
    METAL_ELEMENTS,
    TERMINAL_OXYGEN,
    KEYWORDS,
    KEYWORD_ALIASES,
    canonical_keyword,
)
from molselect.core.geometry import within_distance

__all__ = [
    "Atom",
    "coords_array",
    "PROTEIN_RESIDUES",
    "WATER_RESIDUES",
    "SOLVENT_RESIDUES",
    "BACKBONE_ATOMS",
    "METAL_ELEMENTS",
    "TERMINAL_OXYGEN",
    "KEYWORDS",
    "KEYWORD_ALIASES",
    "canonical_keyword",
    "within_distance",
]
