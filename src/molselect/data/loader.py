"""
Data loading utilities for packaged resources.

Loads the selection grammar shipped alongside the package.
"""

from pathlib import Path

GRAMMAR_FILE = "selection.lark"

# Cache for loaded data
_DATA_CACHE = {}


def get_data_path(filename: str) -> Path:
    """
    Get the path to a package data file.

    Args:
        filename: Name of the data file

    Returns:
        Path to the data file
    """
    try:
        from importlib.resources import files

        return files("molselect.data") / filename
    except (ImportError, TypeError):
        # Running from a source tree without package metadata
        return Path(__file__).parent / filename


def load_grammar() -> str:
    """
    Load the selection grammar text.

    Returns:
        Lark grammar source
    """
    if "grammar" in _DATA_CACHE:
        return _DATA_CACHE["grammar"]

    path = get_data_path(GRAMMAR_FILE)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(
            f"Selection grammar not found. Expected file: {path}"
        )

    _DATA_CACHE["grammar"] = text
    return text

