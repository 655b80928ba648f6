"""
Atom sources.

An atom source hands out the ordered atom sequence a selection runs
against, either in full or already filtered by a selection spec.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union

from molselect.core.structures import Atom
from molselect.selection.compiler import SelectionSpec
from molselect.selection.matching import filter_by_spec


class AtomSource(Protocol):
    """Anything that can supply atoms, optionally filtered by a spec."""

    def get_atoms(self, spec: Optional[SelectionSpec] = None) -> List[Atom]:
        ...


class AtomTable:
    """
    In-memory atom source.

    Holds an ordered, read-only collection of atoms and filters it natively
    with selection specs.

    Example usage:
        >>> table = AtomTable.from_pdb("1abc.pdb")
        >>> table.get_atoms({"chain": "A", "name": ["CA"]})
    """

    def __init__(self, atoms: Iterable[Atom] = ()):
        self._atoms = tuple(atoms)

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self):
        return iter(self._atoms)

    @property
    def next_serial(self) -> int:
        """First serial not used by any atom in the table."""
        if not self._atoms:
            return 0
        return max(a.serial for a in self._atoms) + 1

    @property
    def models(self) -> List[str]:
        """Model identifiers in load order."""
        seen = []
        for atom in self._atoms:
            if atom.model not in seen:
                seen.append(atom.model)
        return seen

    def get_atoms(self, spec: Optional[SelectionSpec] = None) -> List[Atom]:
        """
        Get atoms, optionally filtered by a selection spec.

        Args:
            spec: Attribute conjunction; None or {} returns every atom

        Returns:
            New list of atoms in table order
        """
        if not spec:
            return list(self._atoms)
        return filter_by_spec(self._atoms, spec)

    def extend(self, atoms: Iterable[Atom]) -> "AtomTable":
        """Return a new table with ``atoms`` appended."""
        return AtomTable(self._atoms + tuple(atoms))

    def load_pdb(
        self,
        filename: Union[str, Path],
        model_name: Optional[str] = None,
    ) -> "AtomTable":
        """
        Return a new table with the atoms of a PDB file appended.

        Serials continue from the current table so they stay unique.
        """
        from molselect.io.pdb_parser import read_pdb_file

        atoms = read_pdb_file(
            filename, model_name=model_name, first_serial=self.next_serial
        )
        return self.extend(atoms)

    @classmethod
    def from_pdb(cls, *filenames: Union[str, Path]) -> "AtomTable":
        """Build a table from one or more PDB files."""
        table = cls()
        for filename in filenames:
            table = table.load_pdb(filename)
        return table
