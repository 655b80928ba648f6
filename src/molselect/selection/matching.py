"""
Value matching shared by the evaluator and spec filtering.

Both the full evaluator and the native spec filter of an atom source go
through these functions, so a compiled spec and the AST it came from always
accept the same atoms.
"""

import re
from functools import lru_cache
from typing import Callable, Dict, Iterable, List, Pattern, Sequence

GLOB_CHARS = ("*", "?")


def is_glob(value: str) -> bool:
    """True if the value contains a ``*`` or ``?`` wildcard."""
    return any(c in value for c in GLOB_CHARS)


@lru_cache(maxsize=512)
def glob_to_regex(pattern: str) -> Pattern:
    """
    Compile a glob into an anchored, case-insensitive regular expression.

    ``*`` matches any run of characters, ``?`` exactly one character, and
    every other character is matched literally.

    Args:
        pattern: Glob pattern string

    Returns:
        Compiled regular expression
    """
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("^" + "".join(parts) + "$", re.IGNORECASE)


def matches_any(value: str, patterns: Iterable[str]) -> bool:
    """
    Test a value against a list of exact names or globs.

    Exact entries compare case-insensitively; entries with wildcards are
    compiled with :func:`glob_to_regex`.
    """
    for pattern in patterns:
        if is_glob(pattern):
            if glob_to_regex(pattern).fullmatch(value):
                return True
        elif value.upper() == pattern.upper():
            return True
    return False


def same_element(value: str, elem: str) -> bool:
    """Case-insensitive element comparison."""
    return value.upper() == elem.upper()


def _as_list(accepted) -> List:
    if isinstance(accepted, (list, tuple, set, frozenset)):
        return list(accepted)
    return [accepted]


# One acceptance test per spec attribute: (atom value, accepted values) -> bool
SPEC_MATCHERS: Dict[str, Callable[[object, Sequence], bool]] = {
    "name": lambda value, accepted: matches_any(value, accepted),
    "resn": lambda value, accepted: matches_any(value, accepted),
    "chain": lambda value, accepted: value in accepted,
    "elem": lambda value, accepted: any(same_element(value, e) for e in accepted),
    "resi": lambda value, accepted: value in accepted,
    "model": lambda value, accepted: value in accepted,
}


def spec_matches(spec: Dict[str, object], atom) -> bool:
    """
    Test an atom against every constraint of a selection spec.

    An empty spec accepts every atom; an attribute mapped to an empty list
    accepts none.

    Raises:
        KeyError: If the spec names an attribute without a matcher
    """
    for attribute, accepted in spec.items():
        matcher = SPEC_MATCHERS[attribute]
        if not matcher(getattr(atom, attribute), _as_list(accepted)):
            return False
    return True


def filter_by_spec(atoms: Sequence, spec: Dict[str, object]) -> list:
    """Return the atoms accepted by a spec, in their original order."""
    return [a for a in atoms if spec_matches(spec, a)]
