from __future__ import annotations
import heapq
from dataclasses import dataclass, field
from typing import Dict, List, Union

import numpy as np

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD  # 256 byte values
PSEUDO_EOF = ALPH_SIZE          # end-of-data sentinel symbol
COUNT_CHUNK = 1 << 16           # bytes buffered per bincount


@dataclass(frozen=True)
class Leaf:
    symbol: int
    weight: int = field(default=0, compare=False)

    def __lt__(self, other):  # for heapq
        return self.weight < other.weight


@dataclass(frozen=True)
class Node:
    left: "Tree"
    right: "Tree"
    weight: int = field(default=0, compare=False)

    def __lt__(self, other):  # for heapq
        return self.weight < other.weight


Tree = Union[Leaf, Node]


def count_frequencies(reader) -> np.ndarray:
    """
    Read 8-bit values until the reader runs dry.
    Returns counts indexed by symbol (length ALPH_SIZE + 1), sentinel forced to 1.
    """
    counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
    buf = bytearray()
    while True:
        v = reader.read_bits(BITS_PER_WORD)
        if v is None:
            break
        buf.append(v)
        if len(buf) == COUNT_CHUNK:
            counts += np.bincount(np.frombuffer(bytes(buf), dtype=np.uint8), minlength=ALPH_SIZE + 1)
            buf = bytearray()
    counts += np.bincount(np.frombuffer(bytes(buf), dtype=np.uint8), minlength=ALPH_SIZE + 1)
    counts[PSEUDO_EOF] = 1
    return counts


def build_tree(counts) -> Tree:
    # any min-weight pairing is valid; the tree travels in the header
    pq = [Leaf(symbol=int(s), weight=int(counts[s])) for s in np.flatnonzero(counts)]
    heapq.heapify(pq)
    while len(pq) > 1:
        a = heapq.heappop(pq)
        b = heapq.heappop(pq)
        heapq.heappush(pq, Node(left=a, right=b, weight=a.weight + b.weight))
    return pq[0]


def build_codebook(node: Tree, prefix: str = "", code: Dict[int, str] = None) -> Dict[int, str]:
    if code is None:
        code = {}
    if isinstance(node, Leaf):
        code[node.symbol] = prefix
    else:
        build_codebook(node.left, prefix + "0", code)
        build_codebook(node.right, prefix + "1", code)
    return code


def leaves(node: Tree) -> List[int]:
    """Leaf symbols in pre-order."""
    if isinstance(node, Leaf):
        return [node.symbol]
    return leaves(node.left) + leaves(node.right)
