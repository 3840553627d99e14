"""
errors.py

Exceptions raised by huffcodec.

All of them derive from ValueError since every failure comes from malformed
input rather than transient state.
"""


from typing import Any


class HuffmanError(ValueError):
    """Base class for every huffcodec error."""
    pass


class SymbolMappingError(HuffmanError):
    """
    A symbol is present in one table but missing from the table it is compared to.
    """
    def __init__(self, symbol: Any, message: str) -> None:
        self.symbol = symbol
        super().__init__(message)


class SymbolNotFoundInCodes(SymbolMappingError):
    def __init__(self, symbol: Any) -> None:
        super().__init__(symbol, f"Symbol {symbol!r} found in frequencies but not in codes.")


class ExtraSymbolInCodes(SymbolMappingError):
    def __init__(self, symbol: Any) -> None:
        super().__init__(symbol, f"Extra symbol {symbol!r} found in codes but not in frequencies.")


class EmptyAlphabet(HuffmanError):
    def __init__(self) -> None:
        super().__init__("Cannot build a Huffman tree from an empty alphabet.")


class InvalidCode(HuffmanError):
    """A code word is empty or contains something other than '0' and '1'."""
    def __init__(self, code: Any) -> None:
        self.code = code
        super().__init__(f"Invalid code {code!r}: codes must be non-empty strings of '0' and '1'.")


class IncompleteCode(HuffmanError):
    """The bit stream stops inside a code word, or a prefix matches no code."""
    def __init__(self, bits: str) -> None:
        self.bits = bits
        super().__init__(f"Bits {bits!r} do not form a complete code word.")
