from .huffman import (
    ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF, Leaf,
    count_frequencies, build_tree, build_codebook, leaves,
)
from .bitstream import (
    MalformedHeader, TruncatedStream,
    write_magic, read_magic, write_tree, read_tree,
)
from .bitpack import BitReader, BitWriter

DEBUG_LOW = 1
DEBUG_HIGH = 4


def code_words(codebook):
    """sym -> (code_int, code_len); a zero-length path maps to (0, 0)."""
    return {sym: (int(path, 2) if path else 0, len(path)) for sym, path in codebook.items()}


def compress(reader, writer, debug: int = 0):
    """
    Two passes over reader: count, then (after reset) encode.
    Returns:
      stats: dict (bytes_in, bits_written, header_bits, leaves, counts, codebook)
    """
    # 1) Frequencies + tree
    counts = count_frequencies(reader)
    root = build_tree(counts)
    codebook = build_codebook(root)
    codes = code_words(codebook)

    if debug >= DEBUG_HIGH:
        for sym in sorted(codebook):
            print(f"[compress] sym={sym:3d} count={int(counts[sym])} code={codebook[sym] or '-'}")

    # 2) Magic + tree header
    start = writer.bits_written
    write_magic(writer)
    write_tree(writer, root)
    header_bits = writer.bits_written - start

    # 3) Body, then the sentinel code
    reader.reset()
    while True:
        v = reader.read_bits(BITS_PER_WORD)
        if v is None:
            break
        code, L = codes[v]
        writer.write_bits(L, code)
    code, L = codes[PSEUDO_EOF]
    writer.write_bits(L, code)
    writer.close()

    stats = {
        "bytes_in": int(counts[:ALPH_SIZE].sum()),
        "bits_written": writer.bits_written - start,
        "header_bits": header_bits,
        "leaves": len(codebook),
        "counts": counts,
        "codebook": codebook,
    }
    if debug >= DEBUG_LOW:
        print(f"[compress] bytes_in={stats['bytes_in']} leaves={stats['leaves']} "
              f"header_bits={header_bits} bits_written={stats['bits_written']}")
    return stats


def decompress(reader, writer, debug: int = 0):
    """
    Walk the tree bit by bit until the PSEUDO_EOF leaf.
    Returns:
      stats: dict (bytes_out, bits_read, header_bits, leaves)
    """
    start = reader.bits_read
    read_magic(reader)
    root = read_tree(reader)
    header_bits = reader.bits_read - start
    nleaves = len(leaves(root))

    if debug >= DEBUG_HIGH:
        print(f"[decompress] tree leaves={nleaves} header_bits={header_bits}")

    nout = 0
    if isinstance(root, Leaf):
        # single leaf: zero-length code, nothing to walk
        if root.symbol != PSEUDO_EOF:
            raise MalformedHeader(f"Single-leaf tree without PSEUDO_EOF: {root.symbol}", value=root.symbol)
    else:
        node = root
        while True:
            bit = reader.read_bits(1)
            if bit is None:
                raise TruncatedStream("Bad input, no PSEUDO_EOF")
            node = node.left if bit == 0 else node.right
            if isinstance(node, Leaf):
                if node.symbol == PSEUDO_EOF:
                    break
                writer.write_bits(BITS_PER_WORD, node.symbol)
                nout += 1
                node = root
    writer.close()

    stats = {
        "bytes_out": nout,
        "bits_read": reader.bits_read - start,
        "header_bits": header_bits,
        "leaves": nleaves,
    }
    if debug >= DEBUG_LOW:
        print(f"[decompress] bytes_out={nout} leaves={nleaves} bits_read={stats['bits_read']}")
    return stats


def compress_bytes(data: bytes, debug: int = 0) -> bytes:
    w = BitWriter()
    compress(BitReader(data), w, debug=debug)
    return w.close()


def decompress_bytes(data: bytes, debug: int = 0) -> bytes:
    w = BitWriter()
    decompress(BitReader(data), w, debug=debug)
    return w.close()
