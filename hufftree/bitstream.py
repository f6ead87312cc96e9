from .huffman import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF, Leaf, Node, Tree

BITS_PER_INT = 32
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1   # magic: tree-header format

# Stream layout (bit-granular, MSB-first):
# magic(32) tree(pre-order: 0 = node, 1 + symbol(9) = leaf)
# body(codes..., code(PSEUDO_EOF)) zero-padding to byte boundary
LEAF_BITS = BITS_PER_WORD + 1
MAX_LEAVES = ALPH_SIZE + 1  # one per byte value plus PSEUDO_EOF
MAX_DEPTH = MAX_LEAVES - 1


class MalformedHeader(ValueError):
    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class TruncatedStream(ValueError):
    pass


class TruncatedHeader(MalformedHeader, TruncatedStream):
    pass


def write_magic(w):
    w.write_bits(BITS_PER_INT, HUFF_TREE)


def read_magic(r):
    bits = r.read_bits(BITS_PER_INT)
    if bits != HUFF_TREE:
        raise MalformedHeader(f"Illegal header starts with {bits}", value=bits)
    return bits


def write_tree(w, node: Tree):
    if isinstance(node, Leaf):
        w.write_bits(1, 1)
        w.write_bits(LEAF_BITS, node.symbol)
    else:
        w.write_bits(1, 0)
        write_tree(w, node.left)
        write_tree(w, node.right)


def read_tree(r) -> Tree:
    nleaves = [0]

    def _read(depth):
        if depth > MAX_DEPTH:
            raise MalformedHeader(f"Malformed stream: tree deeper than {MAX_DEPTH}", value=depth)
        bit = r.read_bits(1)
        if bit is None:
            raise TruncatedHeader("Malformed stream: tree header truncated")
        if bit == 0:
            left = _read(depth + 1)
            right = _read(depth + 1)
            return Node(left=left, right=right)
        sym = r.read_bits(LEAF_BITS)
        if sym is None:
            raise TruncatedHeader("Malformed stream: leaf value truncated")
        if sym > PSEUDO_EOF:
            raise MalformedHeader(f"Illegal leaf value {sym}", value=sym)
        nleaves[0] += 1
        if nleaves[0] > MAX_LEAVES:
            raise MalformedHeader(f"Malformed stream: more than {MAX_LEAVES} leaves", value=nleaves[0])
        return Leaf(symbol=sym)

    return _read(0)
