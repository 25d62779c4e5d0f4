import struct
from pathlib import Path

import pytest

from dvplconv.codec import encode_dvpl, inspect_dvpl, inspect_dvpl_file
from dvplconv.codec.errors import InvalidFooterError


def test_inspect_compressed(tmp_path: Path):
    payload = b"texture data " * 100
    f = tmp_path / "t.tex.dvpl"
    f.write_bytes(encode_dvpl(payload))
    info = inspect_dvpl_file(f)
    assert info["path"] == str(f)
    assert info["footer"]["original_size"] == len(payload)
    assert info["footer"]["type"] == 2
    assert info["payload_size"] == info["footer"]["compressed_size"]
    assert info["size_ok"] and info["crc_ok"] and info["type_ok"]
    assert info["ratio"] > 1.0


def test_inspect_reports_problems_without_raising():
    payload = b"raw"
    data = payload + struct.pack("<IIII4s", 9, 3, 0, 5, b"DVPL")
    info = inspect_dvpl(data)
    assert info["size_ok"]
    assert not info["crc_ok"]
    assert not info["type_ok"]
    assert info["footer"]["type_name"] == "unknown(5)"


def test_inspect_requires_footer():
    with pytest.raises(InvalidFooterError):
        inspect_dvpl(b"tiny")
