"""
Selection resolution front-end.

Ties the parser, spec compiler, evaluator and an atom source together: a
selection is offered to the compiler first and falls back to full
evaluation when it cannot be written as a spec.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from molselect.core.structures import Atom
from molselect.errors import EmptySelectionError
from molselect.selection.compiler import SelectionSpec, to_spec
from molselect.selection.evaluator import evaluate
from molselect.selection.nodes import Node
from molselect.selection.parser import parse
from molselect.source import AtomSource, AtomTable


@dataclass
class SelectionResult:
    """
    Outcome of resolving a selection.

    ``spec`` is set when the selection went through the native filter,
    ``None`` when it needed full evaluation. ``atoms`` always holds the
    matched atoms in source order.
    """

    atoms: List[Atom] = field(default_factory=list)
    spec: Optional[SelectionSpec] = None
    ast: Optional[Node] = None

    @property
    def serials(self) -> List[int]:
        return [a.serial for a in self.atoms]

    def selection_spec(self) -> SelectionSpec:
        """Spec for the host viewer: the compiled spec, or a serial list."""
        if self.spec is not None:
            return self.spec
        return {"serial": self.serials}


def resolve_selection(
    selection: Union[str, Node, None],
    source: AtomSource,
    use_fast_path: bool = True,
    require_match: bool = False,
) -> SelectionResult:
    """
    Resolve a selection against an atom source.

    Resolution order:
        1. Empty/None or "all" selects everything (spec {})
        2. Strings are parsed; an AST is used as given
        3. Convertible ASTs are filtered natively by the source
        4. Everything else is evaluated atom by atom

    Args:
        selection: Selection expression or pre-built AST
        source: Atom source to select from
        use_fast_path: Try spec compilation before evaluation
        require_match: Raise if nothing matches

    Returns:
        SelectionResult with the matched atoms

    Raises:
        SelectionSyntaxError: If the expression does not parse
        EmptySelectionError: If require_match is set and nothing matches
    """
    if selection is None or isinstance(selection, str):
        text = (selection or "").strip()
        if text == "" or text.lower() == "all":
            result = SelectionResult(atoms=source.get_atoms({}), spec={})
            return _check_match(result, text, require_match)
        ast = parse(text)
    else:
        text = repr(selection)
        ast = selection

    spec = to_spec(ast) if use_fast_path else None
    if spec is not None:
        result = SelectionResult(atoms=source.get_atoms(spec), spec=spec, ast=ast)
    else:
        result = SelectionResult(atoms=evaluate(ast, source.get_atoms()), ast=ast)

    return _check_match(result, text, require_match)


def _check_match(result: SelectionResult, text: str, require_match: bool) -> SelectionResult:
    if require_match and not result.atoms:
        raise EmptySelectionError(
            f"No atoms match the selection {text!r}", {"selection": text}
        )
    return result


@dataclass
class SelectorConfig:
    """Configuration for selection resolution."""

    # Resolution options
    use_fast_path: bool = True
    require_match: bool = False

    # Behavior
    verbose: bool = False


class Selector:
    """
    Resolves PyMOL-style selections against atom sources.

    Example usage:
        >>> s = Selector()
        >>> result = s.resolve("byres around 5 ligand", AtomTable.from_pdb("1abc.pdb"))

        >>> s = Selector(verbose=True, require_match=True)
        >>> result = s.select_file("1abc.pdb", "chain A and name CA", "ca.pdb")
    """

    def __init__(
        self,
        verbose: bool = False,
        use_fast_path: bool = True,
        require_match: bool = False,
    ):
        """
        Initialize the selector with configuration options.

        Args:
            verbose: Print progress messages
            use_fast_path: Filter simple selections natively through the source
            require_match: Raise EmptySelectionError when nothing matches
        """
        self.config = SelectorConfig(
            verbose=verbose,
            use_fast_path=use_fast_path,
            require_match=require_match,
        )

    def resolve(
        self,
        selection: Union[str, Node, None],
        source: AtomSource,
    ) -> SelectionResult:
        """
        Resolve a selection against an atom source.

        Args:
            selection: Selection expression or pre-built AST
            source: Atom source to select from

        Returns:
            SelectionResult with the matched atoms
        """
        result = resolve_selection(
            selection,
            source,
            use_fast_path=self.config.use_fast_path,
            require_match=self.config.require_match,
        )

        if self.config.verbose:
            path = "spec filter" if result.spec is not None else "evaluator"
            print(f"Selected {len(result.atoms)} atoms via {path}")

        return result

    def select_file(
        self,
        input_path: Union[str, Path],
        selection: Union[str, Node, None],
        output_path: Optional[Union[str, Path]] = None,
    ) -> SelectionResult:
        """
        Select atoms from a PDB file.

        Args:
            input_path: Path to input PDB file
            selection: Selection expression or pre-built AST
            output_path: Optional path for a PDB file of the selected atoms

        Returns:
            SelectionResult with the matched atoms
        """
        if self.config.verbose:
            print(f"Reading {input_path}...")

        table = AtomTable.from_pdb(input_path)

        if self.config.verbose:
            print(f"Loaded {len(table)} atoms")

        result = self.resolve(selection, table)

        if output_path is not None:
            from molselect.io.pdb_writer import write_pdb

            if self.config.verbose:
                print(f"Writing {output_path}...")
            write_pdb(output_path, result.atoms)

        return result


def select(
    selection: Union[str, Node, None],
    atoms,
    **kwargs,
) -> List[Atom]:
    """
    Convenience function for quick selection over a list of atoms.

    Args:
        selection: Selection expression or pre-built AST
        atoms: Atoms to select from
        **kwargs: Additional options passed to Selector

    Returns:
        Matched atoms in input order
    """
    source = atoms if hasattr(atoms, "get_atoms") else AtomTable(atoms)
    return Selector(**kwargs).resolve(selection, source).atoms
