"""
AST node types for selection expressions.

The node set is closed: the parser only produces the classes defined here,
and the evaluator has one handler per class. Nodes are frozen and carry
only the fields their kind needs.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from molselect.core.constants import COMPARISON_OPS, RANGE_OP


@dataclass(frozen=True)
class Comparison:
    """
    Numeric test for resi/index predicates.

    ``op`` is one of ``==``, ``>=``, ``<=``, ``>``, ``<`` (using ``value``)
    or ``range`` (using the inclusive ``low``..``high`` bounds).
    """

    op: str
    value: Optional[int] = None
    low: Optional[int] = None
    high: Optional[int] = None

    def __post_init__(self):
        if self.op == RANGE_OP:
            if self.low is None or self.high is None:
                raise ValueError("range comparison needs low and high")
        elif self.op in COMPARISON_OPS:
            if self.value is None:
                raise ValueError(f"comparison {self.op!r} needs a value")
        else:
            raise ValueError(f"Unknown comparison operator: {self.op!r}")

    @classmethod
    def equal(cls, value: int) -> "Comparison":
        return cls("==", value=value)

    @classmethod
    def between(cls, low: int, high: int) -> "Comparison":
        return cls(RANGE_OP, low=low, high=high)

    def matches(self, actual: int) -> bool:
        """Apply the comparison to a value."""
        op = self.op
        if op == "==":
            return actual == self.value
        if op == RANGE_OP:
            return self.low <= actual <= self.high
        if op == ">=":
            return actual >= self.value
        if op == "<=":
            return actual <= self.value
        if op == ">":
            return actual > self.value
        return actual < self.value


@dataclass(frozen=True)
class Keyword:
    """Bare keyword such as ``all``, ``protein`` or ``helix``."""

    name: str


# Property predicates


@dataclass(frozen=True)
class Name:
    values: Tuple[str, ...]


@dataclass(frozen=True)
class Resn:
    values: Tuple[str, ...]


@dataclass(frozen=True)
class Chain:
    value: str


@dataclass(frozen=True)
class Elem:
    value: str


@dataclass(frozen=True)
class Model:
    value: str


@dataclass(frozen=True)
class Resi:
    test: Comparison


@dataclass(frozen=True)
class Index:
    test: Comparison


# Boolean operators


@dataclass(frozen=True)
class And:
    children: Tuple["Node", ...]


@dataclass(frozen=True)
class Or:
    children: Tuple["Node", ...]


@dataclass(frozen=True)
class Xor:
    children: Tuple["Node", ...]


@dataclass(frozen=True)
class Not:
    child: "Node"


# Distance operators


@dataclass(frozen=True)
class Around:
    """Reference atoms plus everything within ``radius`` of them."""

    radius: float
    child: "Node"


@dataclass(frozen=True)
class XAround:
    """Atoms within ``radius`` of the reference, reference excluded."""

    radius: float
    child: "Node"


@dataclass(frozen=True)
class Beyond:
    """Atoms with no reference atom within ``radius``."""

    radius: float
    child: "Node"


# Expansion operators


@dataclass(frozen=True)
class ByRes:
    child: "Node"


@dataclass(frozen=True)
class ByChain:
    child: "Node"


Node = Union[
    Keyword,
    Name, Resn, Chain, Elem, Model, Resi, Index,
    And, Or, Xor, Not,
    Around, XAround, Beyond,
    ByRes, ByChain,
]

DISTANCE_NODES = {
    "around": Around,
    "xaround": XAround,
    "beyond": Beyond,
}

EXPANSION_NODES = {
    "byres": ByRes,
    "bychain": ByChain,
}

ALL = Keyword("all")
NONE = Keyword("none")
