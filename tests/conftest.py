"""Pytest configuration and fixtures for molselect tests."""

import pytest

from molselect.core.structures import Atom
from molselect.source import AtomTable


def make_atom(serial, name, resn, resi, chain, elem, ss, coords, model="test"):
    return Atom(
        serial=serial,
        name=name,
        resn=resn,
        resi=resi,
        chain=chain,
        elem=elem,
        coords=coords,
        ss=ss,
        model=model,
    )


# serial, name, resn, resi, chain, elem, ss, coords
_FIXTURE_ROWS = [
    (0, "N", "ALA", 1, "A", "N", "h", (0, 0, 0)),
    (1, "CA", "ALA", 1, "A", "C", "h", (1, 0, 0)),
    (2, "C", "ALA", 1, "A", "C", "h", (2, 0, 0)),
    (3, "O", "ALA", 1, "A", "O", "h", (3, 0, 0)),
    (4, "CB", "ALA", 1, "A", "C", "h", (1, 1, 0)),
    (5, "H", "ALA", 1, "A", "H", "h", (0, -1, 0)),
    (6, "N", "GLY", 2, "A", "N", "s", (10, 0, 0)),
    (7, "CA", "GLY", 2, "A", "C", "s", (11, 0, 0)),
    (8, "C", "GLY", 2, "A", "C", "s", (12, 0, 0)),
    (9, "O", "GLY", 2, "A", "O", "s", (13, 0, 0)),
    (10, "N", "VAL", 3, "B", "N", "h", (20, 0, 0)),
    (11, "CA", "VAL", 3, "B", "C", "h", (21, 0, 0)),
    (12, "O", "HOH", 100, " ", "O", "", (50, 50, 50)),
]


@pytest.fixture
def atoms():
    """Thirteen atoms: ALA 1 and GLY 2 on chain A, VAL 3 on chain B, one water."""
    return [make_atom(*row) for row in _FIXTURE_ROWS]


@pytest.fixture
def complex_atoms():
    """Protein residue, ligand, metal ion, solvent and an ion-only residue."""
    rows = [
        (0, "N", "SER", 10, "A", "N", "t", (0.0, 0.0, 0.0)),
        (1, "CA", "SER", 10, "A", "C", "t", (1.5, 0.0, 0.0)),
        (2, "C", "SER", 10, "A", "C", "t", (2.0, 1.4, 0.0)),
        (3, "O", "SER", 10, "A", "O", "t", (1.3, 2.4, 0.0)),
        (4, "CB", "SER", 10, "A", "C", "t", (2.0, -1.0, 0.5)),
        (5, "OG", "SER", 10, "A", "O", "t", (3.4, -1.0, 0.5)),
        (6, "OXT", "SER", 10, "A", "O", "c", (2.9, 1.5, 0.0)),
        (7, "C1", "LIG", 201, "A", "C", "", (6.0, 0.0, 0.0)),
        (8, "O1", "LIG", 201, "A", "O", "", (7.2, 0.0, 0.0)),
        (9, "H1", "LIG", 201, "A", "H", "", (5.5, 0.9, 0.0)),
        (10, "ZN", "ZN", 301, "A", "Zn", "", (4.0, 4.0, 0.0)),
        (11, "CL", "CL", 302, "A", "Cl", "", (9.0, 9.0, 9.0)),
        (12, "C1", "GOL", 401, "B", "C", "", (20.0, 0.0, 0.0)),
        (13, "O", "HOH", 501, "B", "O", "", (30.0, 0.0, 0.0)),
    ]
    return [make_atom(*row, model="complex") for row in rows]


@pytest.fixture
def nucleic_atoms():
    """Sugar and base atoms of one DNA residue; sugar names carry primes."""
    rows = [
        (0, "O5'", "DA", 1, "A", "O", "", (0.0, 0.0, 0.0)),
        (1, "C1'", "DA", 1, "A", "C", "", (1.4, 0.0, 0.0)),
        (2, "O3'", "DA", 1, "A", "O", "", (2.8, 0.0, 0.0)),
        (3, "N9", "DA", 1, "A", "N", "", (1.4, 1.4, 0.0)),
    ]
    return [make_atom(*row, model="dna") for row in rows]


@pytest.fixture
def table(atoms):
    """AtomTable over the thirteen-atom fixture."""
    return AtomTable(atoms)


@pytest.fixture
def pdb_text():
    """Small PDB with a helix record, two chains, a ligand and a water."""
    return "\n".join([
        "HELIX    1   1 ALA A    1  GLY A    2  5                                   2",
        "ATOM      1  N   ALA A   1       0.000   0.000   0.000  1.00  0.00           N",
        "ATOM      2  CA  ALA A   1       1.000   0.000   0.000  1.00  0.00           C",
        "ATOM      3  C   ALA A   1       2.000   0.000   0.000  1.00  0.00           C",
        "ATOM      4  O   ALA A   1       3.000   0.000   0.000  1.00  0.00           O",
        "ATOM      5  CB  ALA A   1       1.000   1.000   0.000  1.00  0.00           C",
        "ATOM      6  N   GLY A   2      10.000   0.000   0.000  1.00  0.00           N",
        "ATOM      7  CA  GLY A   2      11.000   0.000   0.000  1.00  0.00           C",
        "ATOM      8  N   VAL B   3      20.000   0.000   0.000  1.00  0.00           N",
        "ATOM      9  CA  VAL B   3      21.000   0.000   0.000  1.00  0.00           C",
        "HETATM   10 FE   HEM B 101      22.000   0.000   0.000  1.00  0.00          FE",
        "HETATM   11  O   HOH B 201      50.000  50.000  50.000  1.00  0.00           O",
        "END",
    ]) + "\n"


@pytest.fixture
def pdb_file(tmp_path, pdb_text):
    """Path to the small PDB written to a temporary directory."""
    path = tmp_path / "mini.pdb"
    path.write_text(pdb_text)
    return path
