"""
models.py

The shared objects used in huffcodec.

"""


from typing import Dict, Iterator, Tuple

# A symbol is a single character of the input text.
Symbol = str
FrequencyTable = Dict[Symbol, int]
ProbabilityTable = Dict[Symbol, float]
CodeTable = Dict[Symbol, str]


class SymbolFrequency:
    """
    Represents a symbol together with its frequency (or probability).
    """
    def __init__(self, symbol: Symbol, frequency: float) -> None:
        self.symbol: Symbol = symbol
        self.frequency: float = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"


def ranked(table: Dict[Symbol, float]) -> list:
    """
    Turn a table into SymbolFrequency records, highest value first.

    Equal values keep the table's insertion order.
    """
    return [SymbolFrequency(symbol, value)
            for symbol, value in sorted(table.items(), key=lambda item: -item[1])]


class Node:
    """
    A node of a Huffman tree. Carries the total probability of the leaves below it.
    """
    def __init__(self, probability: float) -> None:
        self.probability: float = probability

    @property
    def is_leaf(self) -> bool:
        return False

    def leaves(self) -> Iterator["Leaf"]:
        """Yield the leaves below this node from left to right."""
        stack = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                yield node
            else:
                stack.append(node.right)
                stack.append(node.left)

    def depth(self) -> int:
        """Number of edges on the longest path from this node down to a leaf."""
        deepest = 0
        stack: list = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if isinstance(node, Leaf):
                deepest = max(deepest, level)
            else:
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
        return deepest


class Leaf(Node):
    """
    A leaf holding one symbol of the alphabet.
    """
    def __init__(self, symbol: Symbol, probability: float) -> None:
        super().__init__(probability)
        self.symbol: Symbol = symbol

    @property
    def is_leaf(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Leaf):
            return self.symbol == other.symbol and self.probability == other.probability
        return False

    def __repr__(self) -> str:
        return f"Leaf({self.symbol!r}, {self.probability})"


class InternalNode(Node):
    """
    A merged node owning exactly two children.

    `left` is the child popped first from the queue (lower priority key), `right` the second.
    """
    def __init__(self, left: Node, right: Node) -> None:
        super().__init__(left.probability + right.probability)
        self.left: Node = left
        self.right: Node = right

    @property
    def children(self) -> Tuple[Node, Node]:
        return self.left, self.right

    def __eq__(self, other: object) -> bool:
        # Iterative so that long, skewed trees compare without deep recursion.
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if isinstance(a, InternalNode):
                if not isinstance(b, InternalNode) or a.probability != b.probability:
                    return False
                pairs.append((a.left, b.left))
                pairs.append((a.right, b.right))
            elif a != b:
                return False
        return True

    def __repr__(self) -> str:
        return f"InternalNode({self.probability}, left={self.left!r}, right={self.right!r})"
