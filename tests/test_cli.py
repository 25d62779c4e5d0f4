"""CLI behaviour tests (exit codes, reporter output, defaults file)."""

import json
from pathlib import Path

import pytest
import yaml

from dvplconv import cli
from dvplconv.codec import decode_dvpl, encode_dvpl


def _json_events(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.startswith("{")]


def test_compress_then_decompress_roundtrip(tmp_path: Path, capsys):
    src = tmp_path / "maps" / "level.sc2"
    src.parent.mkdir()
    payload = b"level geometry " * 64
    src.write_bytes(payload)

    assert cli.main(["compress", str(tmp_path)]) == 0
    assert not src.exists()
    assert decode_dvpl((tmp_path / "maps" / "level.sc2.dvpl").read_bytes()) == payload

    assert cli.main(["decompress", str(tmp_path)]) == 0
    assert src.read_bytes() == payload
    assert not (tmp_path / "maps" / "level.sc2.dvpl").exists()

    err = capsys.readouterr().err
    assert "COMPRESS FINISHED." in err
    assert "DECOMPRESS FINISHED." in err
    assert "Convert summary:" in err


def test_keep_originals_flag(tmp_path: Path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"abc")
    assert cli.main(["compress", str(tmp_path), "--keep-originals"]) == 0
    assert src.exists()
    assert (tmp_path / "a.txt.dvpl").exists()


def test_failed_file_keeps_exit_zero(tmp_path: Path, capsys):
    (tmp_path / "bad.dvpl.dvpl").write_bytes(b"not a dvpl file at all")
    assert cli.main(["decompress", str(tmp_path)]) == 0
    err = capsys.readouterr().err
    assert "E_INVALID_FOOTER" in err
    assert "1 failed file(s)" in err


def test_fail_on_error_flag(tmp_path: Path):
    (tmp_path / "bad.txt.dvpl").write_bytes(b"x" * 30)
    assert cli.main(["decompress", str(tmp_path), "--fail-on-error"]) == 1


def test_missing_path_exit_one(tmp_path: Path, capsys):
    assert cli.main(["compress", str(tmp_path / "missing")]) == 1
    assert "E_PATH_MISSING" in capsys.readouterr().err


def test_verify_json_reporter(tmp_path: Path, capsys):
    (tmp_path / "ok.txt.dvpl").write_bytes(encode_dvpl(b"ok"))
    (tmp_path / "plain.txt").write_bytes(b"ignored")
    assert cli.main(["-r", "json", "verify", str(tmp_path)]) == 0
    events = _json_events(capsys.readouterr().out)
    summary = [e for e in events if e["event"] == "summary"]
    assert summary and summary[0]["summary_type"] == "verify"
    assert summary[0]["processed"] == "1"
    assert summary[0]["skipped"] == "1"
    end = [e for e in events if e["event"] == "task_end"][0]
    assert end["status"] == "success"
    assert end["total"] == 2
    assert (tmp_path / "ok.txt.dvpl").exists()
    assert not (tmp_path / "ok.txt").exists()
    sections = [e for e in events if e["event"] == "section"]
    assert sections == [{"event": "section", "title": "dvplconv verify"}]


def test_inspect_json(tmp_path: Path, capsys):
    f = tmp_path / "x.txt.dvpl"
    f.write_bytes(encode_dvpl(b"inspect " * 40))
    assert cli.main(["-r", "silent", "inspect", str(f), "--json"]) == 0
    info = json.loads(capsys.readouterr().out)
    assert info["footer"]["type_name"] == "lz4"
    assert info["footer"]["original_size"] == 320
    assert info["crc_ok"] and info["size_ok"] and info["type_ok"]
    assert info["path"] == str(f)


def test_inspect_bad_footer(tmp_path: Path, capsys):
    f = tmp_path / "x.dvpl"
    f.write_bytes(b"short")
    assert cli.main(["inspect", str(f)]) == 1
    assert "E_INVALID_FOOTER" in capsys.readouterr().err


def test_inspect_crc_mismatch_exit_one(tmp_path: Path, capsys):
    data = bytearray(encode_dvpl(b"abcdef"))
    data[0] ^= 1
    f = tmp_path / "x.dvpl"
    f.write_bytes(bytes(data))
    assert cli.main(["inspect", str(f)]) == 1
    assert "crc_ok=False" in capsys.readouterr().err


def test_config_file_defaults(tmp_path: Path):
    cfg = tmp_path / "dvplconv.yaml"
    cfg.write_text(yaml.safe_dump({"keep_originals": True, "reporter": "silent"}))
    work = tmp_path / "work"
    work.mkdir()
    (work / "a.txt").write_bytes(b"abc")
    assert cli.main(["--config", str(cfg), "compress", str(work)]) == 0
    assert (work / "a.txt").exists()
    assert (work / "a.txt.dvpl").exists()


def test_bad_config_file(tmp_path: Path, capsys):
    cfg = tmp_path / "dvplconv.json"
    cfg.write_text(json.dumps({"keep_originals": "yes"}))
    assert cli.main(["--config", str(cfg), "compress", str(tmp_path)]) == 1
    assert "E_CONFIG" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as ei:
        cli.main(["--version"])
    assert ei.value.code == 0
    assert "dvplconv" in capsys.readouterr().out


def test_missing_subcommand():
    with pytest.raises(SystemExit) as ei:
        cli.main([])
    assert ei.value.code == 2


def test_batch_run_opens_section(tmp_path: Path, capsys):
    (tmp_path / "a.txt").write_bytes(b"abc")
    assert cli.main(["compress", str(tmp_path)]) == 0
    err = capsys.readouterr().err
    assert "\n[dvplconv compress]\n" in err
    assert err.index("[dvplconv compress]") < err.index("Convert summary:")


def test_silent_reporter_prints_nothing(tmp_path: Path, capsys):
    (tmp_path / "bad.txt.dvpl").write_bytes(b"x" * 30)
    assert cli.main(["-r", "silent", "decompress", str(tmp_path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""
