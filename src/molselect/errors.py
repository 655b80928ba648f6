"""Exception types raised by selection parsing and evaluation."""

from typing import Dict, Optional


class SelectionSyntaxError(SyntaxError):
    """
    A selection expression does not match the grammar.

    Attributes:
        text: The full expression that failed to parse
        offset: 1-based column of the offending input, if known
    """

    code = "selection_syntax"

    def __init__(self, message: str, text: str = "", column: Optional[int] = None):
        super().__init__(message)
        self.text = text
        self.offset = column

    def to_result(self) -> Dict[str, object]:
        """Return a JSON-ready error payload."""
        return error_result(
            self.code, self.msg, {"text": self.text, "column": self.offset}
        )


class SelectionError(Exception):
    """
    Base exception for selection failures other than syntax.

    Attributes:
        code: Stable error identifier
        message: Human-readable error message
        details: Optional detail payload for debugging
    """

    code = "selection_error"

    def __init__(self, message: str, details: Optional[object] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_result(self) -> Dict[str, object]:
        """Return a JSON-ready error payload."""
        return error_result(self.code, self.message, self.details)


class UnsupportedNodeError(SelectionError):
    """The evaluator was handed an AST node it does not know."""

    code = "unsupported_node"


class EmptySelectionError(SelectionError):
    """A selection that was required to match found no atoms."""

    code = "empty_selection"


def error_result(code: str, message: str, details: Optional[object] = None) -> Dict[str, object]:
    """
    Build an error payload.

    Args:
        code: Stable error identifier
        message: Human-readable summary
        details: Optional detail payload

    Returns:
        JSON-ready error payload
    """
    return {"ok": False, "error": {"code": code, "message": message, "details": details}}
