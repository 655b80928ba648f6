"""
Selection evaluator.

Evaluates an AST against an ordered atom sequence. Every handler returns a
subsequence of the input in its original order with no duplicates, and the
input is never modified.
"""

from typing import Callable, Dict, List, Sequence

from molselect.core.constants import (
    BACKBONE_ATOMS,
    CARBON,
    HYDROGEN,
    LOOP_CODES,
    PROTEIN_RESIDUES,
    SOLVENT_RESIDUES,
    SS_HELIX,
    SS_SHEET,
    SS_TURN,
    TERMINAL_OXYGEN,
    WATER_RESIDUES,
    is_metal,
    is_polymer_or_solvent,
)
from molselect.core.geometry import within_distance
from molselect.core.structures import Atom, coords_array
from molselect.errors import UnsupportedNodeError
from molselect.selection.matching import matches_any, same_element
from molselect.selection.nodes import (
    And,
    Around,
    Beyond,
    ByChain,
    ByRes,
    Chain,
    Elem,
    Index,
    Keyword,
    Model,
    Name,
    Node,
    Not,
    Or,
    Resi,
    Resn,
    XAround,
    Xor,
)


def _is_hydrogen(atom: Atom) -> bool:
    return atom.elem == HYDROGEN


def _organic(atoms: Sequence[Atom]) -> List[Atom]:
    # Approximation: non-polymer residues that contain a carbon. No bond
    # information is available to do better.
    carbon_residues = {
        a.residue_key
        for a in atoms
        if not is_polymer_or_solvent(a.resn) and a.elem.upper() == CARBON
    }
    return [
        a for a in atoms
        if not is_polymer_or_solvent(a.resn) and a.residue_key in carbon_residues
    ]


# Per-atom tests for keywords that do not look at neighbouring atoms
ATOM_KEYWORDS: Dict[str, Callable[[Atom], bool]] = {
    "protein": lambda a: a.resn in PROTEIN_RESIDUES,
    "water": lambda a: a.resn in WATER_RESIDUES,
    "solvent": lambda a: a.resn in SOLVENT_RESIDUES,
    "backbone": lambda a: a.resn in PROTEIN_RESIDUES and a.name in BACKBONE_ATOMS,
    "sidechain": lambda a: (
        a.resn in PROTEIN_RESIDUES
        and a.name not in BACKBONE_ATOMS
        and a.name != TERMINAL_OXYGEN
    ),
    "metal": lambda a: is_metal(a.elem),
    "ligand": lambda a: not is_polymer_or_solvent(a.resn) and not is_metal(a.elem),
    "hydrogen": _is_hydrogen,
    "heavy": lambda a: not _is_hydrogen(a),
    # Polarity needs bonded neighbours; both fall back to any hydrogen.
    "polar_hydrogen": _is_hydrogen,
    "nonpolar_hydrogen": _is_hydrogen,
    "helix": lambda a: a.ss == SS_HELIX,
    "sheet": lambda a: a.ss == SS_SHEET,
    "turn": lambda a: a.ss == SS_TURN,
    "loop": lambda a: (a.ss or "") in LOOP_CODES,
}


def _keep(atoms: Sequence[Atom], selected) -> List[Atom]:
    """Filter atoms down to members of ``selected``, keeping input order."""
    return [a for a in atoms if a in selected]


def _eval_keyword(node: Keyword, atoms: Sequence[Atom]) -> List[Atom]:
    if node.name == "all":
        return list(atoms)
    if node.name == "none":
        return []
    if node.name == "organic":
        return _organic(atoms)
    test = ATOM_KEYWORDS.get(node.name)
    if test is None:
        raise UnsupportedNodeError(
            f"Unknown selection keyword: {node.name!r}", {"keyword": node.name}
        )
    return [a for a in atoms if test(a)]


def _eval_name(node: Name, atoms):
    return [a for a in atoms if matches_any(a.name, node.values)]


def _eval_resn(node: Resn, atoms):
    return [a for a in atoms if matches_any(a.resn, node.values)]


def _eval_chain(node: Chain, atoms):
    return [a for a in atoms if a.chain == node.value]


def _eval_elem(node: Elem, atoms):
    return [a for a in atoms if same_element(a.elem, node.value)]


def _eval_model(node: Model, atoms):
    return [a for a in atoms if a.model == node.value]


def _eval_resi(node: Resi, atoms):
    return [a for a in atoms if node.test.matches(a.resi)]


def _eval_index(node: Index, atoms):
    return [a for a in atoms if node.test.matches(a.serial)]


def _eval_and(node: And, atoms):
    result = list(atoms)
    for child in node.children:
        result = _keep(result, set(evaluate(child, atoms)))
    return result


def _eval_or(node: Or, atoms):
    selected = set()
    for child in node.children:
        selected.update(evaluate(child, atoms))
    return _keep(atoms, selected)


def _eval_xor(node: Xor, atoms):
    counts: Dict[Atom, int] = {}
    for child in node.children:
        for a in evaluate(child, atoms):
            counts[a] = counts.get(a, 0) + 1
    # Exactly one child, not an odd number of them
    return [a for a in atoms if counts.get(a, 0) == 1]


def _eval_not(node: Not, atoms):
    excluded = set(evaluate(node.child, atoms))
    return [a for a in atoms if a not in excluded]


def _near_reference(node, atoms):
    """Evaluate the reference set and flag atoms within the node radius."""
    reference = evaluate(node.child, atoms)
    near = within_distance(coords_array(atoms), coords_array(reference), node.radius)
    return reference, near


def _eval_around(node: Around, atoms):
    reference, near = _near_reference(node, atoms)
    ref_set = set(reference)
    return [a for a, close in zip(atoms, near) if close or a in ref_set]


def _eval_xaround(node: XAround, atoms):
    reference, near = _near_reference(node, atoms)
    ref_set = set(reference)
    return [a for a, close in zip(atoms, near) if close and a not in ref_set]


def _eval_beyond(node: Beyond, atoms):
    _, near = _near_reference(node, atoms)
    return [a for a, close in zip(atoms, near) if not close]


def _eval_byres(node: ByRes, atoms):
    keys = {a.residue_key for a in evaluate(node.child, atoms)}
    return [a for a in atoms if a.residue_key in keys]


def _eval_bychain(node: ByChain, atoms):
    chains = {a.chain for a in evaluate(node.child, atoms)}
    return [a for a in atoms if a.chain in chains]


_HANDLERS: Dict[type, Callable] = {
    Keyword: _eval_keyword,
    Name: _eval_name,
    Resn: _eval_resn,
    Chain: _eval_chain,
    Elem: _eval_elem,
    Model: _eval_model,
    Resi: _eval_resi,
    Index: _eval_index,
    And: _eval_and,
    Or: _eval_or,
    Xor: _eval_xor,
    Not: _eval_not,
    Around: _eval_around,
    XAround: _eval_xaround,
    Beyond: _eval_beyond,
    ByRes: _eval_byres,
    ByChain: _eval_bychain,
}


def evaluate(node: Node, atoms: Sequence[Atom]) -> List[Atom]:
    """
    Evaluate a selection AST against a sequence of atoms.

    Args:
        node: Root of the selection AST
        atoms: Atoms to select from, in display order

    Returns:
        Matching atoms as a new list, in the order they appear in ``atoms``

    Raises:
        UnsupportedNodeError: If the AST contains an unknown node type
    """
    handler = _HANDLERS.get(type(node))
    if handler is None:
        raise UnsupportedNodeError(
            f"Unknown AST node type: {type(node).__name__}",
            {"node": repr(node)},
        )
    return handler(node, atoms)
