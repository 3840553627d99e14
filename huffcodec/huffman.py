"""
huffman.py

Huffman tree construction and code extraction.

Ties between nodes of equal probability are broken first-in first-out: leaves are
numbered in the insertion order of the probability table and every merged node
gets the next number when it is created. The queue is keyed by
(probability, number), so the same table always yields the same tree and the
same codes.
"""


import heapq
import itertools
from typing import Mapping, Optional

from .errors import EmptyAlphabet
from .logger import Logger, SymbolCodeLog, TreeMergeProgressStep
from .models import Symbol, CodeTable, Node, Leaf, InternalNode
from .settings import SINGLE_SYMBOL_CODE


def build_tree(probabilities: Mapping[Symbol, float], logger: Optional[Logger] = None) -> Node:
    """
    Build a Huffman tree by repeatedly merging the two least probable nodes.

    Args:
        probabilities (Mapping[Symbol, float]): Symbol to probability. Frequencies work too.
        logger (Optional[Logger]): Receives one progress step per merge.

    Returns:
        Node: The root. A single-symbol table gives a lone Leaf.

    Raises:
        EmptyAlphabet: The table has no symbols.
    """
    if not probabilities:
        raise EmptyAlphabet()

    sequence = itertools.count()
    heap = [(probability, next(sequence), Leaf(symbol, probability))
            for symbol, probability in probabilities.items()]
    heapq.heapify(heap)

    total_merges = len(heap) - 1
    if logger is not None:
        logger.reset_merge_progress()
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = InternalNode(left, right)
        heapq.heappush(heap, (merged.probability, next(sequence), merged))
        if logger is not None:
            logger.log(TreeMergeProgressStep("Merging Huffman nodes", total_merges))

    return heap[0][2]


def extract_codes(root: Node, logger: Optional[Logger] = None) -> CodeTable:
    """
    Walk the tree and collect the path to every leaf as its code.

    Going to the left child appends '0', going to the right child appends '1'.
    A root that is itself a leaf gets SINGLE_SYMBOL_CODE, since an empty code
    cannot be decoded.
    """
    codes = {}
    if isinstance(root, Leaf):
        codes[root.symbol] = SINGLE_SYMBOL_CODE
    else:
        stack = [(root, "")]
        while stack:
            node, code = stack.pop()
            if isinstance(node, Leaf):
                codes[node.symbol] = code
            else:
                stack.append((node.right, code + "1"))
                stack.append((node.left, code + "0"))

    if logger is not None:
        for symbol, code in codes.items():
            logger.log(SymbolCodeLog(symbol, code))
    return codes


def huffman(probabilities: Mapping[Symbol, float], logger: Optional[Logger] = None) -> CodeTable:
    """
    Huffman code for a probability table. The tree is built, walked and dropped.

    Raises:
        EmptyAlphabet: The table has no symbols.
    """
    return extract_codes(build_tree(probabilities, logger), logger)


def prefix_conflict(codes: Mapping[Symbol, str]) -> Optional[str]:
    """Return a code word that is a prefix of (or equal to) another one, or None."""
    words = sorted(codes.values())
    # After sorting, a word that prefixes others sits right before the first of them.
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return a
    return None


def is_prefix_free(codes: Mapping[Symbol, str]) -> bool:
    """Check that no code word is a prefix of another one."""
    return prefix_conflict(codes) is None
