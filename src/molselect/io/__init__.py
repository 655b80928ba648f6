"""PDB I/O module."""

from molselect.io.pdb_parser import read_pdb_file, read_secondary_structure
from molselect.io.pdb_writer import write_pdb, atoms_to_pdb_string

__all__ = ["read_pdb_file", "read_secondary_structure", "write_pdb", "atoms_to_pdb_string"]
