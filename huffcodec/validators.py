"""
validators.py

Shared codes for input validation in huffcodec.
"""


import os
from typing import Any, Mapping

from .errors import SymbolNotFoundInCodes, ExtraSymbolInCodes


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_file_exists(file_path: str) -> None:
    """Validate that the given file path exists."""
    if not os.path.exists(file_path):
        raise ValueError(f"File does not exist: {file_path}")


def validate_symbol_mapping(probabilities: Mapping[Any, float], codes: Mapping[Any, str]) -> None:
    """
    Cross-check the symbols of a probability table against a code table.

    Every symbol of the probability table is checked first, then every symbol of the
    code table, so a subset of codes and a superset of codes each get their own error.

    Args:
        probabilities (Mapping): Symbol to probability (or frequency).
        codes (Mapping): Symbol to code word.

    Raises:
        SymbolNotFoundInCodes: A symbol of the probabilities has no code.
        ExtraSymbolInCodes: A symbol of the codes has no probability.
    """
    for symbol in probabilities:
        if symbol not in codes:
            raise SymbolNotFoundInCodes(symbol)
    for symbol in codes:
        if symbol not in probabilities:
            raise ExtraSymbolInCodes(symbol)
