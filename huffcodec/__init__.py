"""
huffcodec: A Python library for Huffman coding and the entropy measures around it.
"""

from .models import (
    Symbol,
    FrequencyTable,
    ProbabilityTable,
    CodeTable,
    SymbolFrequency,
    Node,
    Leaf,
    InternalNode,
    ranked,
)

from .errors import (
    HuffmanError,
    SymbolMappingError,
    SymbolNotFoundInCodes,
    ExtraSymbolInCodes,
    EmptyAlphabet,
    InvalidCode,
    IncompleteCode,
)

from .probabilities import (
    frequency,
    freq_to_prob,
    entropy,
    expected,
)

from .huffman import (
    build_tree,
    extract_codes,
    huffman,
    prefix_conflict,
    is_prefix_free,
)

from .coders import (
    BitOutputStream,
    BitInputStream,
    HuffmanCoder,
)

from .experiments import (
    BenchmarkResult,
    ComplexityExperiment,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    SymbolCodeLog,
    CodingLog,
    EntropyLog,
    BenchmarkLog,
    TreeMergeProgressStep,
    CodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "Symbol",
    "FrequencyTable",
    "ProbabilityTable",
    "CodeTable",
    "SymbolFrequency",
    "Node",
    "Leaf",
    "InternalNode",
    "ranked",

    "HuffmanError",
    "SymbolMappingError",
    "SymbolNotFoundInCodes",
    "ExtraSymbolInCodes",
    "EmptyAlphabet",
    "InvalidCode",
    "IncompleteCode",

    "frequency",
    "freq_to_prob",
    "entropy",
    "expected",

    "build_tree",
    "extract_codes",
    "huffman",
    "prefix_conflict",
    "is_prefix_free",

    "BitOutputStream",
    "BitInputStream",
    "HuffmanCoder",

    "BenchmarkResult",
    "ComplexityExperiment",

    "Logger",
    "Log",
    "LogLevel",
    "SymbolCodeLog",
    "CodingLog",
    "EntropyLog",
    "BenchmarkLog",
    "TreeMergeProgressStep",
    "CodingProgressStep",

    "validate_type",
    "validate_file_exists",
    "validate_symbol_mapping",
]
