"""Packaged data files."""

from molselect.data.loader import load_grammar, get_data_path

__all__ = ["load_grammar", "get_data_path"]
