"""
PDB file parser using BioPython.

Converts the first model of a PDB file into a flat list of Atom snapshots.
Secondary structure comes from the HELIX and SHEET header records.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from Bio.PDB import PDBParser
from Bio.PDB.Structure import Structure

from molselect.core.constants import SS_HELIX, SS_SHEET
from molselect.core.structures import Atom

# (chain, resi) -> secondary structure code
SecondaryStructure = Dict[Tuple[str, int], str]


def read_pdb_file(
    filename: Union[str, Path],
    model_name: Optional[str] = None,
    first_serial: int = 0,
    model_id: int = 0,
) -> List[Atom]:
    """
    Read a PDB file into atom snapshots.

    Args:
        filename: Path to PDB file
        model_name: Object identifier stored on each atom (default: file stem)
        first_serial: Serial assigned to the first atom; later atoms count up
        model_id: Which model to read (0 = first model)

    Returns:
        Atoms in file order
    """
    path = Path(filename)
    if model_name is None:
        model_name = path.stem

    parser = PDBParser(QUIET=True)
    structure = parser.get_structure(model_name, str(path))

    with open(path) as f:
        secondary = read_secondary_structure(f)

    return _convert_biopython_structure(
        structure, secondary, model_name, first_serial, model_id
    )


def read_secondary_structure(lines) -> SecondaryStructure:
    """
    Collect residue secondary structure from HELIX and SHEET records.

    Args:
        lines: Iterable of PDB file lines

    Returns:
        Mapping of (chain, resi) to "h" or "s"
    """
    secondary: SecondaryStructure = {}
    for line in lines:
        record = line[:6]
        try:
            if record == "HELIX ":
                chain, start, end, code = line[19], int(line[21:25]), int(line[33:37]), SS_HELIX
            elif record == "SHEET ":
                chain, start, end, code = line[21], int(line[22:26]), int(line[33:37]), SS_SHEET
            else:
                continue
        except (IndexError, ValueError):
            # Truncated or malformed record
            continue
        for resi in range(start, end + 1):
            secondary[(chain, resi)] = code
    return secondary


def _normalize_element(element: str, atom_name: str) -> str:
    """Capitalised element symbol (e.g., "FE" -> "Fe"), guessed if missing."""
    element = (element or "").strip()
    if not element:
        letters = "".join(c for c in atom_name if c.isalpha())
        element = letters[:1]
    return element.capitalize()


def _convert_biopython_structure(
    structure: Structure,
    secondary: SecondaryStructure,
    model_name: str,
    first_serial: int = 0,
    model_id: int = 0,
) -> List[Atom]:
    """
    Convert a BioPython Structure to a list of atoms.

    Args:
        structure: BioPython Structure object
        secondary: Secondary structure assignments
        model_name: Object identifier for the atoms
        first_serial: Serial of the first atom
        model_id: Which model to use

    Returns:
        List of Atom objects
    """
    models = list(structure.get_models())
    if not models:
        return []
    if model_id >= len(models):
        model_id = 0
    model = models[model_id]

    atoms = []
    serial = first_serial

    for chain in model:
        chain_id = chain.get_id()
        for bio_residue in chain:
            res_name = bio_residue.get_resname().strip()
            res_num = bio_residue.get_id()[1]
            ss = secondary.get((chain_id, res_num), "")

            for bio_atom in bio_residue:
                atom_name = bio_atom.get_name().strip()
                atoms.append(
                    Atom(
                        serial=serial,
                        name=atom_name,
                        resn=res_name,
                        resi=res_num,
                        chain=chain_id,
                        elem=_normalize_element(bio_atom.element, atom_name),
                        coords=tuple(bio_atom.get_coord()),
                        ss=ss,
                        model=model_name,
                    )
                )
                serial += 1

    return atoms
