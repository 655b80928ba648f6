"""
PDB file writer for atom selections.
"""

from pathlib import Path
from typing import Sequence, Union

from molselect.core.constants import PROTEIN_RESIDUES
from molselect.core.structures import Atom


def write_pdb(
    filename: Union[str, Path],
    atoms: Sequence[Atom],
) -> None:
    """
    Write atoms to PDB format.

    Atoms are numbered from 1 in the order given. Non-protein residues are
    written as HETATM records.

    Args:
        filename: Output file path
        atoms: Atoms to write
    """
    with open(filename, "w") as f:
        f.write(atoms_to_pdb_string(atoms) + "\n")


def atoms_to_pdb_string(atoms: Sequence[Atom]) -> str:
    """
    Convert atoms to a PDB format string.

    Args:
        atoms: Atoms to convert

    Returns:
        PDB format string ending with an END record
    """
    lines = []
    for atom_num, atom in enumerate(atoms, start=1):
        lines.append(
            _format_atom_line(
                atom_num=atom_num,
                atom_name=atom.name,
                res_name=atom.resn,
                chain=atom.chain,
                res_num=atom.resi,
                x=atom.x,
                y=atom.y,
                z=atom.z,
                element=atom.elem,
                hetero=atom.resn not in PROTEIN_RESIDUES,
            )
        )
    lines.append("END")
    return "\n".join(lines)


def _format_atom_line(
    atom_num: int,
    atom_name: str,
    res_name: str,
    chain: str,
    res_num: int,
    x: float,
    y: float,
    z: float,
    occupancy: float = 1.0,
    temp_factor: float = 0.0,
    element: str = "",
    hetero: bool = False,
) -> str:
    """
    Format a single ATOM/HETATM line in strict PDB format.

    PDB format specification:
    COLUMNS        DATA TYPE       CONTENTS
    --------------------------------------------------------------------------------
     1 -  6        Record name     "ATOM  " or "HETATM"
     7 - 11        Integer         Atom serial number
    13 - 16        Atom            Atom name
    17             Character       Alternate location indicator
    18 - 20        Residue name    Residue name
    22             Character       Chain identifier
    23 - 26        Integer         Residue sequence number
    27             AChar           Code for insertion of residues
    31 - 38        Real(8.3)       X coordinate
    39 - 46        Real(8.3)       Y coordinate
    47 - 54        Real(8.3)       Z coordinate
    55 - 60        Real(6.2)       Occupancy
    61 - 66        Real(6.2)       Temperature factor
    77 - 78        LString(2)      Element symbol
    """
    name = atom_name.strip()
    if len(name) < 4 and len(element.strip()) < 2:
        # One-letter elements: leading space, left-justify rest
        atom_name_fmt = f" {name:<3}"
    else:
        atom_name_fmt = f"{name:<4}"

    if not element:
        element = name[0] if name else "X"

    record = "HETATM" if hetero else "ATOM  "

    # Four-letter residue names spill into column 21
    res_name = res_name.strip()
    res_name_fmt = f"{res_name:>3} " if len(res_name) <= 3 else f"{res_name[:4]}"

    # fmt: off
    line = (
        f"{record}"                            # 1-6:   Record name
        f"{atom_num % 100000:>5d} "            # 7-11:  Serial number + col 12 space
        f"{atom_name_fmt}"                     # 13-16: Atom name
        f" "                                   # 17:    AltLoc (blank)
        f"{res_name_fmt}"                      # 18-21: ResName + col 21 space
        f"{(chain or ' '):1.1}"                # 22:    Chain ID
        f"{res_num:>4d}"                       # 23-26: Residue sequence number
        f" "                                   # 27:    Insertion code
        f"   "                                 # 28-30: Blank
        f"{x:>8.3f}"                           # 31-38: X coordinate
        f"{y:>8.3f}"                           # 39-46: Y coordinate
        f"{z:>8.3f}"                           # 47-54: Z coordinate
        f"{occupancy:>6.2f}"                   # 55-60: Occupancy
        f"{temp_factor:>6.2f}"                 # 61-66: Temperature factor
        f"          "                          # 67-76: Blank
        f"{element.upper():>2}"                # 77-78: Element symbol
    )
    # fmt: on

    return line
