import numpy as np
from .huffman import ALPH_SIZE


def entropy_bits(counts) -> float:
    """Shannon entropy (bits/byte) of the byte distribution, sentinel excluded."""
    c = np.asarray(counts[:ALPH_SIZE], dtype=np.float64)
    total = c.sum()
    if total == 0:
        return 0.0
    p = c[c > 0] / total
    return float(-np.sum(p * np.log2(p)))


def mean_code_length(counts, codebook) -> float:
    c = np.asarray(counts[:ALPH_SIZE], dtype=np.float64)
    total = c.sum()
    if total == 0:
        return 0.0
    lengths = np.array([len(codebook.get(s, "")) for s in range(ALPH_SIZE)], dtype=np.float64)
    return float(np.dot(c, lengths) / total)


def compression_ratio(n_in: int, n_out: int) -> float:
    if n_out == 0:
        return float("inf")
    return n_in / n_out
