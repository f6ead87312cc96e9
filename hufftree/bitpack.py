class BitWriter:
    def __init__(self, f=None):
        self._f = f
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self._closed = False
        self.bits_written = 0

    def write_bits(self, nbits: int, value: int):
        """Write the low 'nbits' bits of value (MSB-first)."""
        if self._closed:
            raise ValueError("write to closed BitWriter")
        for i in range(nbits - 1, -1, -1):
            bit = (value >> i) & 1
            self._cur = (self._cur << 1) | bit
            self._nbits += 1
            if self._nbits == 8:
                self._buf.append(self._cur)
                self._cur = 0
                self._nbits = 0
        self.bits_written += nbits

    def close(self) -> bytes:
        """Pad remaining bits with zeros, flush to the sink if any."""
        if not self._closed:
            if self._nbits > 0:
                self._buf.append(self._cur << (8 - self._nbits))
                self._cur = 0
                self._nbits = 0
            if self._f is not None:
                self._f.write(self._buf)
            self._closed = True
        return bytes(self._buf)


class BitReader:
    def __init__(self, data: bytes):
        self.data = data
        self._pos = 0  # absolute bit index, MSB-first within each byte
        self._limit = len(data) * 8
        self.bits_read = 0

    def read_bits(self, n: int):
        """Return the next n bits as an int, or None if fewer than n remain."""
        if self._pos + n > self._limit:
            return None
        value = 0
        for _ in range(n):
            b = (self.data[self._pos >> 3] >> (7 - (self._pos & 7))) & 1
            value = (value << 1) | b
            self._pos += 1
        self.bits_read += n
        return value

    def reset(self):
        self._pos = 0
