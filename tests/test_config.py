import json
from pathlib import Path

import pytest

from dvplconv import cli
from dvplconv.codec.errors import ConfigError
from dvplconv.config import CliDefaults, load_defaults


def test_no_config_gives_defaults():
    assert load_defaults(None) == CliDefaults()


def test_yaml_config(tmp_path: Path):
    p = tmp_path / "c.yml"
    p.write_text("keep_originals: true\nverbose: 2\nreporter: json\n")
    d = load_defaults(p)
    assert d.keep_originals is True
    assert d.verbose == 2
    assert d.reporter == "json"
    assert d.strict_compression is False


def test_json_config(tmp_path: Path):
    p = tmp_path / "c.json"
    p.write_text(json.dumps({"strict_compression": True, "fail_on_error": True}))
    d = load_defaults(p)
    assert d.strict_compression and d.fail_on_error


def test_empty_yaml_is_defaults(tmp_path: Path):
    p = tmp_path / "c.yaml"
    p.write_text("")
    assert load_defaults(p) == CliDefaults()


@pytest.mark.parametrize(
    "content",
    [
        "[1, 2]",
        "unknown_key: 1",
        "reporter: fancy",
        "verbose: -1",
        "keep_originals: 1",
        "keep_originals: [",
    ],
)
def test_invalid_config(tmp_path: Path, content: str):
    p = tmp_path / "c.yaml"
    p.write_text(content)
    with pytest.raises(ConfigError):
        load_defaults(p)


def test_missing_config(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_defaults(tmp_path / "absent.yaml")


def test_config_path_is_directory(tmp_path: Path):
    p = tmp_path / "cfg.yaml"
    p.mkdir()
    with pytest.raises(ConfigError) as ei:
        load_defaults(p)
    assert isinstance(ei.value.__cause__, OSError)


def test_config_not_utf8(tmp_path: Path):
    p = tmp_path / "c.json"
    p.write_bytes(b"\xff\xfe{")
    with pytest.raises(ConfigError) as ei:
        load_defaults(p)
    assert isinstance(ei.value.__cause__, UnicodeDecodeError)


@pytest.mark.parametrize("kind", ["directory", "undecodable"])
def test_unreadable_config_exits_one(tmp_path: Path, capsys, kind: str):
    if kind == "directory":
        cfg = tmp_path / "cfg.yaml"
        cfg.mkdir()
    else:
        cfg = tmp_path / "c.json"
        cfg.write_bytes(b"\xff\xfe{")
    data = tmp_path / "data"
    data.mkdir()
    assert cli.main(["--config", str(cfg), "verify", str(data)]) == 1
    assert "E_CONFIG" in capsys.readouterr().err
