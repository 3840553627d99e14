"""
probabilities.py

Frequency counting and the information-theoretic quantities built on it:
probability distribution, Shannon entropy and expected code length.
"""


from collections import defaultdict
from typing import Iterable, Mapping, Sized

import numpy as np

from .models import Symbol, FrequencyTable, ProbabilityTable
from .validators import validate_symbol_mapping


def frequency(sequence: Iterable[Symbol]) -> FrequencyTable:
    """
    Count the occurrences of every symbol in a sequence.

    Args:
        sequence (Iterable[Symbol]): The symbols to count, usually a str.

    Returns:
        FrequencyTable: Symbol to count, in order of first occurrence. Empty for an empty sequence.
    """
    counts = defaultdict(int)
    for symbol in sequence:
        counts[symbol] += 1
    return dict(counts)


def freq_to_prob(frequencies: Mapping[Symbol, int]) -> ProbabilityTable:
    """
    Normalize counts into probabilities.

    Args:
        frequencies (Mapping[Symbol, int]): Symbol to count.

    Returns:
        ProbabilityTable: Symbol to count / total. Empty when there is nothing to count.
    """
    total = float(sum(frequencies.values()))
    if total == 0:
        return {}
    return {symbol: count / total for symbol, count in frequencies.items()}


def entropy(probabilities: Mapping[Symbol, float]) -> float:
    """
    Shannon entropy in bits, the sum of -p * log2(p).

    Entropy is the average amount of information carried by each symbol. Zero
    probabilities contribute nothing and an empty table has zero entropy.
    """
    if not probabilities:
        return 0.0
    probs = np.fromiter(probabilities.values(), dtype=np.float64, count=len(probabilities))
    probs = probs[probs > 0]
    return float(np.sum(-probs * np.log2(probs)))


def expected(probabilities: Mapping[Symbol, float], codes: Mapping[Symbol, Sized]) -> float:
    """
    Expected length of a message for a given variable length encoding.

    Computed as the sum over the symbols of probability times code length.

    Args:
        probabilities (Mapping[Symbol, float]): Symbol to probability.
        codes (Mapping[Symbol, Sized]): Symbol to code word; need not be a Huffman code.

    Returns:
        float: The average number of bits per symbol.

    Raises:
        SymbolNotFoundInCodes: A symbol of the probabilities has no code.
        ExtraSymbolInCodes: The codes contain a symbol with no probability.
    """
    validate_symbol_mapping(probabilities, codes)
    if not probabilities:
        return 0.0
    symbols = list(probabilities)
    probs = np.array([probabilities[symbol] for symbol in symbols], dtype=np.float64)
    lengths = np.array([len(codes[symbol]) for symbol in symbols], dtype=np.float64)
    return float(np.dot(probs, lengths))
