"""Selection grammar, AST, evaluator and spec compiler."""

from molselect.selection.parser import parse
from molselect.selection.evaluator import evaluate
from molselect.selection.compiler import to_spec, SelectionSpec
from molselect.selection.matching import filter_by_spec, glob_to_regex, matches_any
from molselect.selection import nodes

__all__ = [
    "parse",
    "evaluate",
    "to_spec",
    "SelectionSpec",
    "filter_by_spec",
    "glob_to_regex",
    "matches_any",
    "nodes",
]
