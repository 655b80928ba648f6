"""
Reference tables for atom classification.

Residue and element vocabularies used by the selection keywords. Changing
what counts as water, solvent, metal or protein is a data change here.
"""

# Standard amino acids plus common non-standard and ambiguous codes
PROTEIN_RESIDUES = frozenset([
    "ALA", "ARG", "ASN", "ASP", "CYS", "GLN", "GLU", "GLY", "HIS", "ILE",
    "LEU", "LYS", "MET", "PHE", "PRO", "SER", "THR", "TRP", "TYR", "VAL",
    "MSE", "SEC", "PYL", "ASX", "GLX",
])

WATER_RESIDUES = frozenset(["HOH", "WAT", "H2O", "DOD", "TIP", "TIP3", "SPC"])

# Solvent includes every water name
SOLVENT_RESIDUES = WATER_RESIDUES | frozenset([
    "DMSO", "DMF", "ACN", "MeOH", "EtOH", "IPA", "GOL", "PEG",
])

BACKBONE_ATOMS = frozenset(["N", "CA", "C", "O"])

# C-terminal oxygen, never part of a side chain
TERMINAL_OXYGEN = "OXT"

# Upper-case element symbols
METAL_ELEMENTS = frozenset([
    "LI", "BE", "NA", "MG", "AL", "K", "CA", "SC", "TI", "V", "CR", "MN",
    "FE", "CO", "NI", "CU", "ZN", "GA", "RB", "SR", "Y", "ZR", "NB", "MO",
    "RU", "RH", "PD", "AG", "CD", "IN", "SN", "CS", "BA", "LA", "CE", "PR",
    "ND", "SM", "EU", "GD", "TB", "DY", "HO", "ER", "TM", "YB", "LU", "HF",
    "TA", "W", "RE", "OS", "IR", "PT", "AU", "HG", "TL", "PB", "BI",
])

HYDROGEN = "H"
CARBON = "C"

# Secondary structure codes
SS_HELIX = "h"
SS_SHEET = "s"
SS_TURN = "t"
SS_COIL = "c"
LOOP_CODES = frozenset(["", SS_COIL])

# Bare selection keywords
KEYWORDS = (
    "all", "none",
    "protein", "water", "solvent", "backbone", "sidechain",
    "metal", "ligand", "organic",
    "hydrogen", "heavy", "polar_hydrogen", "nonpolar_hydrogen",
    "helix", "sheet", "turn", "loop",
)

# Short forms accepted by the parser
KEYWORD_ALIASES = {
    "bb": "backbone",
    "sc": "sidechain",
    "metals": "metal",
    "h": "hydrogen",
    "polarh": "polar_hydrogen",
    "apolarh": "nonpolar_hydrogen",
}

# Numeric comparison operators for resi/index
COMPARISON_OPS = ("==", ">=", "<=", ">", "<")
RANGE_OP = "range"

# Atom attributes a selection spec may constrain
SPEC_ATTRIBUTES = ("name", "resn", "resi", "chain", "elem", "model")

# Rows of the candidate atom array processed per distance block
DISTANCE_CHUNK_SIZE = 2048


def canonical_keyword(word: str) -> str:
    """
    Resolve a keyword or alias to its canonical name.

    Args:
        word: Keyword as typed (any case)

    Returns:
        Canonical keyword, or the lower-cased word if it is not known
    """
    word = word.lower()
    return KEYWORD_ALIASES.get(word, word)


def is_polymer_or_solvent(resn: str) -> bool:
    """True for protein, water and solvent residue names."""
    return (
        resn in PROTEIN_RESIDUES
        or resn in WATER_RESIDUES
        or resn in SOLVENT_RESIDUES
    )


def is_metal(elem: str) -> bool:
    """True if the element symbol names a metal."""
    return elem.upper() in METAL_ELEMENTS
