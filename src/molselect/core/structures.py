"""
Core data structures for atom snapshots.

Atoms are owned by whoever loaded them. Selection code only reads them and
hands back the same objects, so equality and hashing are by identity.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass(frozen=True, eq=False)
class Atom:
    """
    A single atom of a loaded structure.

    Identity semantics (``eq=False``) let selections build sets of the
    caller's atoms without comparing coordinates.
    """

    serial: int  # Session-unique atom serial
    name: str  # Atom name (e.g., "CA", "OXT")
    resn: str  # Residue name (e.g., "ALA", "HOH")
    resi: int  # Residue sequence number
    chain: str  # Chain identifier, may be blank
    elem: str  # Element symbol
    coords: Tuple[float, float, float]  # Cartesian coordinates
    ss: str = ""  # Secondary structure code (h, s, t, c or blank)
    model: str = ""  # Owning model/object identifier

    def __post_init__(self):
        """Ensure coords is a plain tuple of floats."""
        object.__setattr__(self, "coords", tuple(float(c) for c in self.coords))

    @property
    def x(self) -> float:
        return self.coords[0]

    @property
    def y(self) -> float:
        return self.coords[1]

    @property
    def z(self) -> float:
        return self.coords[2]

    @property
    def residue_key(self) -> Tuple[str, int]:
        """(chain, resi) pair identifying the residue."""
        return (self.chain, self.resi)


def coords_array(atoms) -> np.ndarray:
    """
    Stack atom coordinates into an array.

    Args:
        atoms: Sequence of Atom objects

    Returns:
        (N, 3) numpy array of coordinates
    """
    if not atoms:
        return np.empty((0, 3), dtype=np.float64)
    return np.array([a.coords for a in atoms], dtype=np.float64)
