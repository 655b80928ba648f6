"""
Selection-to-spec compiler.

Rewrites simple selection ASTs into a flat attribute conjunction that an
atom source can filter natively. Only ``all``, ``name``, ``resn``,
``chain``, ``elem``, ``model``, ``resi ==`` and ``and`` of those convert;
everything else yields ``None`` and must go through the evaluator.
"""

from typing import Dict, List, Optional

from molselect.selection.matching import SPEC_MATCHERS, is_glob
from molselect.selection.nodes import (
    And,
    Chain,
    Elem,
    Keyword,
    Model,
    Name,
    Node,
    Resi,
    Resn,
)

SelectionSpec = Dict[str, object]

# Attributes whose accepted values may be glob patterns
GLOB_ATTRIBUTES = ("name", "resn")


def _as_list(value) -> List:
    return list(value) if isinstance(value, list) else [value]


def _intersect(attribute: str, first, second):
    """
    Merge two constraints on the same attribute.

    Returns the accepted values of the conjunction, or None when it cannot
    be written as a single value list (globs on both sides).
    """
    first, second = _as_list(first), _as_list(second)
    if attribute in GLOB_ATTRIBUTES:
        first_glob = any(is_glob(v) for v in first)
        second_glob = any(is_glob(v) for v in second)
        if first_glob and second_glob:
            return None
        if first_glob:
            first, second = second, first

    # Keep the literal values the other constraint also accepts
    matcher = SPEC_MATCHERS[attribute]
    merged = [v for v in first if matcher(v, second)]

    if attribute in GLOB_ATTRIBUTES or len(merged) != 1:
        return merged
    return merged[0]


def to_spec(node: Node) -> Optional[SelectionSpec]:
    """
    Convert a simple selection AST into a selection spec.

    Args:
        node: Root of the selection AST

    Returns:
        Attribute-to-value mapping selecting the same atoms as the AST, or
        None if the AST cannot be expressed that way
    """
    if isinstance(node, Keyword):
        return {} if node.name == "all" else None
    if isinstance(node, Name):
        return {"name": list(node.values)}
    if isinstance(node, Resn):
        return {"resn": list(node.values)}
    if isinstance(node, Chain):
        return {"chain": node.value}
    if isinstance(node, Elem):
        return {"elem": node.value}
    if isinstance(node, Model):
        return {"model": node.value}
    if isinstance(node, Resi):
        if node.test.op == "==":
            return {"resi": node.test.value}
        return None
    if isinstance(node, And):
        merged: SelectionSpec = {}
        for child in node.children:
            child_spec = to_spec(child)
            if child_spec is None:
                return None
            for attribute, value in child_spec.items():
                if attribute in merged:
                    value = _intersect(attribute, merged[attribute], value)
                    if value is None:
                        return None
                merged[attribute] = value
        return merged
    return None
