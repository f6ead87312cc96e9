import sys
import pytest

from hufftree import decode
from hufftree import encode
from hufftree.bitstream import MalformedHeader


def _run(monkeypatch, module, *argv):
    monkeypatch.setattr(sys, "argv", [module.__name__ + ".py", *argv])
    module.main()


def test_encode_decode_files(tmp_path, monkeypatch, capsys):
    src = tmp_path / "in.txt"
    src.write_bytes(b"command line round trip\n" * 40)
    packed = tmp_path / "out" / "in.hf"
    restored = tmp_path / "restored" / "in.txt"

    _run(monkeypatch, encode, "--input", str(src), "--output", str(packed))
    _run(monkeypatch, decode, "--input", str(packed), "--output", str(restored))

    assert restored.read_bytes() == src.read_bytes()
    assert packed.stat().st_size < src.stat().st_size
    out = capsys.readouterr().out
    assert "[encode] wrote" in out
    assert "ratio=" in out
    assert "[decode] wrote" in out


def test_empty_file(tmp_path, monkeypatch):
    src = tmp_path / "empty"
    src.write_bytes(b"")
    packed = tmp_path / "empty.hf"
    restored = tmp_path / "empty.out"

    _run(monkeypatch, encode, "--input", str(src), "--output", str(packed))
    _run(monkeypatch, decode, "--input", str(packed), "--output", str(restored))
    assert restored.read_bytes() == b""


def test_decode_rejects_foreign_file(tmp_path, monkeypatch):
    bad = tmp_path / "bad.hf"
    bad.write_bytes(b"not a huffman stream")
    restored = tmp_path / "bad.out"
    with pytest.raises(MalformedHeader):
        _run(monkeypatch, decode, "--input", str(bad), "--output", str(restored))
    assert not restored.exists()
