"""
Selection expression parser.

Turns a PyMOL-style selection string into an AST from
:mod:`molselect.selection.nodes`. The grammar lives in
``molselect/data/selection.lark``; keywords and operators are
case-insensitive, values keep their case.

Example:
    >>> parse("name CA and chain A")
    And(children=(Name(values=('CA',)), Chain(value='A')))
"""

import re
from functools import lru_cache

from lark import Lark, Transformer, v_args
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedInput,
    UnexpectedToken,
    VisitError,
)

from molselect.core.constants import KEYWORDS, canonical_keyword
from molselect.data.loader import load_grammar
from molselect.errors import SelectionSyntaxError
from molselect.selection.nodes import (
    ALL,
    DISTANCE_NODES,
    EXPANSION_NODES,
    And,
    Chain,
    Comparison,
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
    Xor,
)

# Fields of a /model/chain/resi/name macro, aligned from the right
MACRO_FIELDS = 4
_MACRO_RESI = re.compile(r"(-?\d+)(?:-(-?\d+))?")


@lru_cache(maxsize=1)
def _get_parser() -> Lark:
    """Build the LALR parser once per process."""
    return Lark(load_grammar(), parser="lalr", start="start")


def _macro_residue(field: str, column) -> Comparison:
    match = _MACRO_RESI.fullmatch(field)
    if match is None:
        raise SelectionSyntaxError(
            f"Invalid residue field {field!r} in macro", column=column
        )
    low, high = match.groups()
    if high is None:
        return Comparison.equal(int(low))
    return Comparison.between(int(low), int(high))


@v_args(inline=True)
class SelectionTransformer(Transformer):
    """Transforms parse trees into AST nodes."""

    def or_expr(self, first, *rest):
        # Runs of the same operator become one n-ary node; switching
        # operator closes the run (left-associative).
        node_cls = None
        operands = [first]
        for op, operand in zip(rest[::2], rest[1::2]):
            cls = Xor if op.lower() == "xor" else Or
            if node_cls is not None and cls is not node_cls:
                operands = [node_cls(tuple(operands))]
            node_cls = cls
            operands.append(operand)
        return node_cls(tuple(operands))

    def and_expr(self, *children):
        return And(tuple(children))

    def negation(self, child):
        return Not(child)

    def postfix_distance(self, child, op, radius):
        return DISTANCE_NODES[op.lower()](float(radius), child)

    def prefix_distance(self, op, radius, child):
        return DISTANCE_NODES[op.lower()](float(radius), child)

    def expansion(self, op, child):
        return EXPANSION_NODES[op.lower()](child)

    def keyword(self, token):
        name = canonical_keyword(token)
        if name not in KEYWORDS:
            raise SelectionSyntaxError(
                f"Unknown keyword {str(token)!r}", column=token.column
            )
        return Keyword(name)

    def macro(self, token):
        fields = str(token)[1:].split("/")
        if len(fields) > MACRO_FIELDS:
            raise SelectionSyntaxError(
                f"Too many fields in macro {str(token)!r}", column=token.column
            )
        fields = [""] * (MACRO_FIELDS - len(fields)) + fields
        model, chain, resi, name = fields

        parts = []
        if model:
            parts.append(Model(model))
        if chain:
            parts.append(Chain(chain))
        if resi:
            parts.append(Resi(_macro_residue(resi, token.column)))
        if name:
            parts.append(Name(tuple(name.split("+"))))

        if not parts:
            return ALL
        if len(parts) == 1:
            return parts[0]
        return And(tuple(parts))

    def name(self, values):
        return Name(values)

    def resn(self, values):
        return Resn(values)

    def chain(self, value):
        return Chain(str(value))

    def elem(self, value):
        return Elem(str(value))

    def model(self, value):
        return Model(str(value))

    def resi(self, test):
        return Resi(test)

    def index(self, test):
        return Index(test)

    def value_list(self, *values):
        return tuple(str(v) for v in values)

    def quoted(self, token):
        return str(token)[1:-1]

    def num_equal(self, value):
        return Comparison.equal(int(value))

    def num_range(self, low, high):
        return Comparison.between(int(low), int(high))

    def num_compare(self, op, value):
        return Comparison(str(op), value=int(value))


def _describe(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedCharacters):
        return f"Unexpected character {exc.char!r} at column {exc.column}"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "Unexpected end of selection"
        return f"Unexpected {str(exc.token)!r} at column {exc.column}"
    return "Unexpected end of selection"


def parse(text: str) -> Node:
    """
    Parse a selection expression into an AST.

    Args:
        text: Selection expression (e.g., "byres around 5 ligand")

    Returns:
        Root AST node

    Raises:
        SelectionSyntaxError: If the text does not match the grammar
    """
    if text is None or not text.strip():
        raise SelectionSyntaxError("Empty selection expression", text or "")

    try:
        tree = _get_parser().parse(text)
    except UnexpectedInput as exc:
        column = getattr(exc, "column", None)
        if column is not None and column < 0:
            column = None
        raise SelectionSyntaxError(
            f"Invalid selection {text!r}: {_describe(exc)}", text, column
        ) from None

    try:
        return SelectionTransformer().transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, SelectionSyntaxError):
            err = exc.orig_exc
            raise SelectionSyntaxError(
                f"Invalid selection {text!r}: {err.msg}", text, err.offset
            ) from None
        raise
