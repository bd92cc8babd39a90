# tests/test_cli.py - CLI smoke checks
import json

import pytest

from emoji_registry.cli import codepoints, main


@pytest.fixture
def cfg_path(tmp_path):
    root = tmp_path / "emoji"
    root.mkdir()
    (root / "blobcat.png").write_bytes(b"")
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"emoji_dir": str(root), "log_color": False}), encoding="utf8")
    return str(path)


def test_codepoints():
    assert codepoints("\u263a\ufe0f") == "U+263A U+FE0F"


def test_check(cfg_path, capsys):
    assert main(["--config", cfg_path, "check", "\u263a"]) == 0
    out = capsys.readouterr().out
    assert "U+263A U+FE0F" in out
    assert "no" in out


def test_variants(cfg_path, capsys):
    assert main(["--config", cfg_path, "variants", "\u2764\u200d\U0001F525"]) == 0
    out = capsys.readouterr().out
    assert "U+2764 U+FE0F U+200D U+1F525" in out
    assert "U+2764 U+200D U+1F525" in out


def test_list_and_get(cfg_path, capsys):
    assert main(["--config", cfg_path, "list"]) == 0
    assert "blobcat" in capsys.readouterr().out
    assert main(["--config", cfg_path, "get", "blobcat"]) == 0
    assert "/emoji/blobcat.png" in capsys.readouterr().out
    assert main(["--config", cfg_path, "get", "nope"]) == 1


def test_stats(cfg_path, capsys):
    assert main(["--config", cfg_path, "stats"]) == 0
    out = capsys.readouterr().out
    assert "3799" in out
    assert "1252" in out


def test_missing_emoji_dir_reports_error(tmp_path, capsys):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"emoji_dir": str(tmp_path / "missing")}), encoding="utf8")
    assert main(["--config", str(path), "list"]) == 2
    assert "error" in capsys.readouterr().out
