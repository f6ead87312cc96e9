import io
import pytest

from hufftree.bitpack import BitReader, BitWriter


def test_write_bits_msb_first():
    w = BitWriter()
    w.write_bits(3, 0b101)
    w.write_bits(5, 0b00011)
    assert w.close() == b"\xa3"
    assert w.bits_written == 8


def test_close_pads_partial_byte_with_zeros():
    w = BitWriter()
    w.write_bits(1, 1)
    assert w.close() == b"\x80"
    assert w.bits_written == 1


def test_write_bits_keeps_low_bits_only():
    w = BitWriter()
    w.write_bits(4, 0xFF)
    assert w.close() == b"\xf0"


def test_zero_length_write_is_noop():
    w = BitWriter()
    w.write_bits(0, 123)
    assert w.close() == b""
    assert w.bits_written == 0


def test_write_after_close_raises():
    w = BitWriter()
    w.close()
    with pytest.raises(ValueError):
        w.write_bits(1, 1)


def test_close_flushes_to_sink_once():
    sink = io.BytesIO()
    w = BitWriter(sink)
    w.write_bits(16, 0xBEEF)
    assert w.close() == b"\xbe\xef"
    w.close()
    assert sink.getvalue() == b"\xbe\xef"


def test_read_bits_msb_first():
    r = BitReader(b"\xa3")
    assert r.read_bits(3) == 0b101
    assert r.read_bits(5) == 0b00011
    assert r.read_bits(1) is None
    assert r.bits_read == 8


def test_read_bits_short_returns_none_without_consuming():
    r = BitReader(b"\xff")
    assert r.read_bits(9) is None
    assert r.read_bits(8) == 0xFF


def test_read_32_bits_is_big_endian():
    data = b"\xfa\xce\x82\x01"
    assert BitReader(data).read_bits(32) == int.from_bytes(data, "big")


def test_reset_rewinds_to_start():
    r = BitReader(b"\x12\x34")
    assert r.read_bits(8) == 0x12
    assert r.read_bits(8) == 0x34
    r.reset()
    assert r.read_bits(16) == 0x1234


def test_empty_reader():
    r = BitReader(b"")
    assert r.read_bits(1) is None
    assert r.read_bits(0) == 0
