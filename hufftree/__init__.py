from .bitpack import BitReader, BitWriter
from .bitstream import MalformedHeader, TruncatedStream, TruncatedHeader, HUFF_TREE
from .codec import compress, decompress, compress_bytes, decompress_bytes
