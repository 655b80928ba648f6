"""
molselect - PyMOL-style atom selection

Parses selection expressions such as ``byres around 5 (resn HEM)`` and
evaluates them against in-memory atom snapshots.
"""

__version__ = "1.0.0"

from molselect.core.structures import Atom
from molselect.errors import (
    SelectionError,
    SelectionSyntaxError,
    UnsupportedNodeError,
    EmptySelectionError,
)
from molselect.selection import parse, evaluate, to_spec
from molselect.selector import Selector, SelectionResult, resolve_selection, select
from molselect.source import AtomSource, AtomTable

__all__ = [
    "Atom",
    "AtomSource",
    "AtomTable",
    "Selector",
    "SelectionResult",
    "SelectionError",
    "SelectionSyntaxError",
    "UnsupportedNodeError",
    "EmptySelectionError",
    "parse",
    "evaluate",
    "to_spec",
    "resolve_selection",
    "select",
    "__version__",
]
